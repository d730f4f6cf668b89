"""Resource owner identity returned by an OAuth provider."""
from typing import Any

from pydantic import BaseModel, field_validator


class ResourceOwner(BaseModel):
    """
    Provider's view of the authenticated user.

    Ephemeral: never persisted, only linked to a member through a Passport.

    Fields:
      - id: opaque identifier assigned by the provider, normalised to str
      - email / name / first_name / last_name: optional profile fields
      - attributes: the raw user info payload from the provider
    """

    id: str
    email: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    attributes: dict[str, Any] = {}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_str(cls, v):
        """Providers return integer ids (e.g. 123456789); store them as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def get(self, field: str, default: Any = None) -> Any:
        """Read a profile field, falling back to the raw provider payload."""
        if field in type(self).model_fields and field != "attributes":
            value = getattr(self, field)
            if value is not None:
                return value
        return self.attributes.get(field, default)
