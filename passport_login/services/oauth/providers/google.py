"""Google OAuth 2.0 / OpenID Connect resource owner provider."""
from typing import Any

from ..resource_owner import ResourceOwner
from .base import OAuthProvider


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 2.0 / OpenID Connect implementation."""

    def __init__(self, name: str = "google", timeout: float = 10.0):
        super().__init__(name, timeout=timeout)

    @property
    def display_name(self) -> str:
        return "Google"

    @property
    def user_info_url(self) -> str:
        return "https://www.googleapis.com/oauth2/v3/userinfo"

    def extract_resource_owner(self, user_info: dict[str, Any]) -> ResourceOwner:
        """
        Read a Google user info response.

        The v3 endpoint returns ``sub``; the older v2 endpoint returns ``id``.
        """
        owner_id = user_info.get("sub") or user_info.get("id")
        if not owner_id:
            raise KeyError("sub")
        return ResourceOwner(
            id=owner_id,
            email=user_info.get("email"),
            name=user_info.get("name"),
            first_name=user_info.get("given_name"),
            last_name=user_info.get("family_name"),
            attributes=user_info,
        )
