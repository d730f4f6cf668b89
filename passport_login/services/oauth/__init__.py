"""OAuth token login.

Maps OAuth 2.0 access tokens to local members through passports and logs
them in.

Flow:
- Provider exchanges the token for a ResourceOwner
- TokenResolver finds or creates the member for (provider, owner id)
- Eligibility gate decides whether the member may log in
- IdentityStore establishes the session
"""
from .eligibility import check_eligibility, ensure_eligible
from .exceptions import (
    OAuthProviderError,
    OAuthTokenError,
    OAuthUserInfoError,
)
from .factory import create_oauth_service
from .handler import SESSION_PROVIDER_KEY, LoginResult, LoginTokenHandler
from .identity_store import MEMBER_SESSION_KEY, IdentityStore, SessionIdentityStore
from .mappers import (
    GenericMemberMapper,
    MemberMapper,
    MemberMapperFactory,
    PassthroughMemberMapper,
)
from .passport_store import PassportStore
from .providers import (
    GenericOAuthProvider,
    GoogleOAuthProvider,
    OAuthProvider,
)
from .resolver import TokenResolver
from .resource_owner import ResourceOwner
from .service import OAuthService

__all__ = [
    # Exceptions
    "OAuthProviderError",
    "OAuthTokenError",
    "OAuthUserInfoError",
    # Providers
    "OAuthProvider",
    "GenericOAuthProvider",
    "GoogleOAuthProvider",
    "ResourceOwner",
    # Mappers
    "MemberMapper",
    "GenericMemberMapper",
    "PassthroughMemberMapper",
    "MemberMapperFactory",
    # Core
    "PassportStore",
    "TokenResolver",
    "check_eligibility",
    "ensure_eligible",
    "IdentityStore",
    "SessionIdentityStore",
    "MEMBER_SESSION_KEY",
    "LoginTokenHandler",
    "LoginResult",
    "SESSION_PROVIDER_KEY",
    # Service
    "OAuthService",
    "create_oauth_service",
]
