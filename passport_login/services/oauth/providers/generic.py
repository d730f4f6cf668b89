"""Provider for any OAuth 2.0 server with a JSON user info endpoint."""
from typing import Any

from ..resource_owner import ResourceOwner
from .base import OAuthProvider


class GenericOAuthProvider(OAuthProvider):
    """
    Configurable provider: the user info URL and the key holding the
    resource owner id come from settings rather than code.
    """

    def __init__(self, name: str, user_info_url: str, id_field: str = "id", timeout: float = 10.0):
        super().__init__(name, timeout=timeout)
        self._user_info_url = user_info_url
        self.id_field = id_field

    @property
    def user_info_url(self) -> str:
        return self._user_info_url

    def extract_resource_owner(self, user_info: dict[str, Any]) -> ResourceOwner:
        owner_id = user_info.get(self.id_field)
        if owner_id is None or owner_id == "":
            raise KeyError(self.id_field)
        return ResourceOwner(
            id=owner_id,
            email=user_info.get("email"),
            name=user_info.get("name"),
            first_name=user_info.get("first_name") or user_info.get("given_name"),
            last_name=user_info.get("last_name") or user_info.get("family_name"),
            attributes=user_info,
        )
