"""Member mapper interface."""
from abc import ABC, abstractmethod

from passport_login.models.models import Member

from ..resource_owner import ResourceOwner


class MemberMapper(ABC):
    """Copies or derives resource owner profile fields onto a local member."""

    @abstractmethod
    def map(self, member: Member, resource_owner: ResourceOwner) -> Member:
        """Populate ``member`` from ``resource_owner`` and return it."""


class PassthroughMemberMapper(MemberMapper):
    """Leaves the member untouched."""

    def map(self, member: Member, resource_owner: ResourceOwner) -> Member:
        return member
