"""Field-mapping member mapper."""
import logging

from passport_login.models.models import Member

from ..resource_owner import ResourceOwner
from .base import MemberMapper

logger = logging.getLogger(__name__)

DEFAULT_MAPPING: dict[str, str] = {
    "email": "email",
    "first_name": "first_name",
    "surname": "last_name",
}


class GenericMemberMapper(MemberMapper):
    """
    Maps resource owner fields onto member fields.

    ``mapping`` is ``{member_field: resource_owner_field}``. Blank or missing
    owner values are skipped so they never overwrite what is already set.
    When no first name was mapped, the owner's display ``name`` is split
    into first name and surname.
    """

    def __init__(self, mapping: dict[str, str] | None = None):
        self.mapping = dict(DEFAULT_MAPPING if mapping is None else mapping)
        unknown = [field for field in self.mapping if not hasattr(Member, field)]
        if unknown:
            raise ValueError(f"Unknown member fields in mapping: {', '.join(sorted(unknown))}")

    def map(self, member: Member, resource_owner: ResourceOwner) -> Member:
        for member_field, owner_field in self.mapping.items():
            value = resource_owner.get(owner_field)
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            setattr(member, member_field, value)

        if not member.first_name and resource_owner.name:
            first, _, rest = resource_owner.name.strip().partition(" ")
            member.first_name = first
            if rest and not member.surname:
                member.surname = rest.strip()

        logger.debug("Mapped resource owner %s onto member fields %s", resource_owner.id, list(self.mapping))
        return member
