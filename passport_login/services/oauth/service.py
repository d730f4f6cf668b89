"""OAuth login service.

Responsibilities:
- Keep the registry of resource owner providers
- Record the active provider in the request session
- Hand the token to LoginTokenHandler
"""
import logging

from passport_login.core.exceptions import ProviderNotRegisteredError

from .handler import SESSION_PROVIDER_KEY, LoginResult, LoginTokenHandler
from .providers import OAuthProvider

logger = logging.getLogger(__name__)


class OAuthService:
    """Entry point for token logins against registered providers."""

    def __init__(self, handler: LoginTokenHandler):
        """
        Args:
            handler: LoginTokenHandler bound to the current request session
        """
        self.handler = handler
        self._providers: dict[str, OAuthProvider] = {}

    def register_provider(self, name: str, provider: OAuthProvider) -> None:
        self._providers[name] = provider
        logger.info("Registered OAuth provider: %s", name)

    def get_provider(self, name: str) -> OAuthProvider:
        """
        Raises:
            ProviderNotRegisteredError: If provider not registered
        """
        if name not in self._providers:
            raise ProviderNotRegisteredError(name)
        return self._providers[name]

    @property
    def providers(self) -> list[OAuthProvider]:
        return list(self._providers.values())

    async def authenticate_with_token(self, provider_name: str, access_token: str) -> LoginResult:
        """
        Log in with an access token issued by ``provider_name``.

        Raises:
            ProviderNotRegisteredError: If the provider is unknown
            IdentityLookupError: If the token cannot be exchanged
        """
        provider = self.get_provider(provider_name)
        self.handler.session[SESSION_PROVIDER_KEY] = provider_name

        result = await self.handler.handle_token(access_token, provider)
        if result.success:
            logger.info("Member %s authenticated via %s", result.member.id, provider_name)
        return result
