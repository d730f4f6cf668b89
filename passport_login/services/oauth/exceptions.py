"""OAuth provider exceptions."""


class OAuthProviderError(Exception):
    """Raised when OAuth provider communication fails."""


class OAuthTokenError(OAuthProviderError):
    """Raised when the provider rejects the access token."""


class OAuthUserInfoError(OAuthProviderError):
    """Raised when fetching the resource owner fails."""
