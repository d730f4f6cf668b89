"""Abstract base class for OAuth 2.0 resource owner providers.

Exchanges an access token for the resource owner behind it.
Subclasses supply the user info endpoint and how to read its payload.
"""
import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..exceptions import OAuthTokenError, OAuthUserInfoError
from ..resource_owner import ResourceOwner

logger = logging.getLogger(__name__)


def _token_fingerprint(access_token: str) -> str:
    """Short stable digest so logs can correlate requests without the token."""
    return hashlib.sha256(access_token.encode("utf-8")).hexdigest()[:12]


class OAuthProvider(ABC):
    """
    Abstract base class for OAuth 2.0 providers.

    The authorization-code flow happens elsewhere; a provider here only turns
    an access token into a ResourceOwner.
    """

    def __init__(self, name: str, timeout: float = 10.0):
        """
        Initialize OAuth provider.

        Args:
            name: Provider identifier used for passports (e.g., "google")
            timeout: HTTP timeout in seconds for user info requests
        """
        self.name = name
        self.timeout = timeout

    @property
    def display_name(self) -> str:
        return self.name.title()

    @property
    @abstractmethod
    def user_info_url(self) -> str:
        """Provider's user info endpoint."""
        pass

    async def get_user_info(self, access_token: str) -> dict[str, Any]:
        """
        Fetch user information using access token.

        Args:
            access_token: OAuth access token

        Returns:
            User profile information

        Raises:
            OAuthTokenError: If the provider rejects the token (401)
            OAuthUserInfoError: If fetching user info fails otherwise
        """
        headers = {"Authorization": f"Bearer {access_token}", "Accept": "application/json"}
        fingerprint = _token_fingerprint(access_token)

        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(self.user_info_url, headers=headers, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.error(
                    "User info fetch failed | provider=%s token=%s status=%s",
                    self.name,
                    fingerprint,
                    status,
                )
                if status == 401:
                    raise OAuthTokenError(f"Access token rejected by {self.name}") from e
                raise OAuthUserInfoError(f"User info fetch failed: {status}") from e
            except httpx.RequestError as e:
                logger.error("User info request failed | provider=%s error=%s", self.name, e)
                raise OAuthUserInfoError(f"Failed to connect to {self.name}") from e
            except ValueError as e:
                raise OAuthUserInfoError(f"{self.name} returned a non-JSON user info payload") from e

    @abstractmethod
    def extract_resource_owner(self, user_info: dict[str, Any]) -> ResourceOwner:
        """
        Build a ResourceOwner from the provider's user info payload.

        Args:
            user_info: Raw user info from provider

        Returns:
            ResourceOwner with the provider-assigned id and profile fields
        """
        pass

    async def get_resource_owner(self, access_token: str) -> ResourceOwner:
        """
        Exchange an access token for the resource owner it belongs to.

        Raises:
            OAuthProviderError: If the exchange fails or no id is returned
        """
        user_info = await self.get_user_info(access_token)
        if not isinstance(user_info, dict):
            raise OAuthUserInfoError(f"{self.name} user info is not a JSON object")
        try:
            return self.extract_resource_owner(user_info)
        except (KeyError, ValueError) as e:
            raise OAuthUserInfoError(f"{self.name} user info has no usable id") from e
