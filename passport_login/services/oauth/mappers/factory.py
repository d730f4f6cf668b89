"""Registry of member mappers keyed by provider name."""
import logging

from passport_login.core.config import settings

from .base import MemberMapper
from .generic import GenericMemberMapper

logger = logging.getLogger(__name__)


class MemberMapperFactory:
    """
    Resolves the mapper for a provider.

    Providers without a registered mapper get the default one.
    """

    def __init__(self, default: MemberMapper | None = None):
        self._mappers: dict[str, MemberMapper] = {}
        self.default = default or GenericMemberMapper()

    def register(self, provider_name: str, mapper: MemberMapper) -> None:
        self._mappers[provider_name] = mapper
        logger.info("Registered member mapper for provider: %s", provider_name)

    def for_provider(self, provider_name: str) -> MemberMapper:
        return self._mappers.get(provider_name, self.default)


def create_mapper_factory() -> MemberMapperFactory:
    """Build a factory with one GenericMemberMapper per configured provider mapping."""
    factory = MemberMapperFactory()
    for provider_name, mapping in settings.OAUTH_MEMBER_MAPPINGS.items():
        factory.register(provider_name, GenericMemberMapper(mapping))
    return factory
