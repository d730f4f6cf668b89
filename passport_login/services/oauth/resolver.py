"""Resolves an OAuth access token to a local member."""
import logging

from passport_login.core.exceptions import IdentityLookupError, PassportConflictError
from passport_login.models.models import Member

from .exceptions import OAuthProviderError
from .mappers import MemberMapperFactory
from .passport_store import PassportStore
from .providers import OAuthProvider
from .resource_owner import ResourceOwner

logger = logging.getLogger(__name__)


class TokenResolver:
    """
    Find-or-create of a member from a provider access token.

    Collaborators are injected so each can be substituted independently:
    - store: PassportStore (or anything with find/create)
    - mapper_factory: MemberMapperFactory (or anything with for_provider)
    """

    def __init__(self, store: PassportStore, mapper_factory: MemberMapperFactory):
        self.store = store
        self.mapper_factory = mapper_factory

    async def resolve(self, access_token: str, provider: OAuthProvider, provider_name: str) -> Member:
        """
        Return the member linked to the token's resource owner, creating
        member and passport on first sight.

        Raises:
            IdentityLookupError: If the token cannot be exchanged
        """
        try:
            resource_owner = await provider.get_resource_owner(access_token)
        except OAuthProviderError as e:
            logger.warning("Resource owner lookup failed for %s: %s", provider_name, e)
            raise IdentityLookupError(provider_name, str(e)) from e

        member = self.store.find(provider_name, resource_owner.id)
        if member is not None:
            logger.info("Resolved %s:%s to member %s", provider_name, resource_owner.id, member.id)
            return member

        return self.create_member(resource_owner, provider_name)

    def create_member(self, resource_owner: ResourceOwner, provider_name: str) -> Member:
        """Map a new member from the resource owner and bind a passport to it.

        Mapping only happens here, so a returning member's fields are never
        overwritten by later logins.
        """
        mapper = self.mapper_factory.for_provider(provider_name)
        member = mapper.map(Member(), resource_owner)
        member.oauth_source = provider_name

        try:
            self.store.create(provider_name, resource_owner.id, member)
        except PassportConflictError:
            existing = self.store.find(provider_name, resource_owner.id)
            if existing is None:
                raise
            logger.info(
                "Passport %s:%s created concurrently, using member %s",
                provider_name,
                resource_owner.id,
                existing.id,
            )
            return existing

        logger.info("Created member %s from %s:%s", member.id, provider_name, resource_owner.id)
        return member
