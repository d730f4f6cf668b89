"""OAuth resource owner providers."""
from .base import OAuthProvider
from .generic import GenericOAuthProvider
from .google import GoogleOAuthProvider

__all__ = ["OAuthProvider", "GenericOAuthProvider", "GoogleOAuthProvider"]
