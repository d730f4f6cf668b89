"""Logs a member in from an OAuth access token."""
import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

from passport_login.core.exceptions import MemberIneligibleError, ProviderNameMissingError
from passport_login.models.models import Member

from .eligibility import ensure_eligible
from .identity_store import IdentityStore
from .providers import OAuthProvider
from .resolver import TokenResolver

logger = logging.getLogger(__name__)

SESSION_PROVIDER_KEY = "oauth2.provider"


@dataclass
class LoginResult:
    success: bool
    status_code: int
    member: Member | None = None
    reasons: list[str] = field(default_factory=list)


class LoginTokenHandler:
    """
    Turns an access token into a logged-in member.

    Flow:
    1. Read the provider name from the request session
    2. Resolve (find or create) the member
    3. Run the eligibility gate
    4. Log the member in, or answer 403 without a session
    """

    def __init__(
        self,
        resolver: TokenResolver,
        identity_store: IdentityStore,
        session: MutableMapping[str, Any],
    ):
        self.resolver = resolver
        self.identity_store = identity_store
        self.session = session

    def get_provider_name(self, provider: OAuthProvider) -> str:
        name = self.session.get(SESSION_PROVIDER_KEY) or getattr(provider, "name", None)
        if not name:
            raise ProviderNameMissingError()
        return name

    async def handle_token(self, access_token: str, provider: OAuthProvider) -> LoginResult:
        """
        Returns:
            LoginResult with status 200 after logging in, or 403 when the
            member may not log in

        Raises:
            IdentityLookupError: If the token cannot be exchanged
        """
        provider_name = self.get_provider_name(provider)
        member = await self.resolver.resolve(access_token, provider, provider_name)

        try:
            ensure_eligible(member)
        except MemberIneligibleError as e:
            logger.warning("Login refused for member %s via %s", member.id, provider_name)
            return LoginResult(success=False, status_code=e.status_code, member=member, reasons=e.reasons)

        self.identity_store.log_in(member)
        return LoginResult(success=True, status_code=200, member=member)
