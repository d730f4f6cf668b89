from __future__ import annotations

import os
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "PassportLogin"
    ENV: str = "dev"
    DATABASE_URL: str | None = None
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    # Signs the request session cookie that carries oauth2.provider and login.member_id
    SESSION_SECRET: str = "change_me_session"
    SESSION_COOKIE: str = "passport_login.session"

    # OAuth 2.0 resource owner providers
    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    OAUTH_GENERIC_NAME: str | None = None
    OAUTH_GENERIC_USER_INFO_URL: str | None = None
    OAUTH_GENERIC_ID_FIELD: str = "id"
    OAUTH_HTTP_TIMEOUT: float = 10.0

    # Per-provider member field mappings: {"google": {"email": "email", "surname": "last_name"}}
    OAUTH_MEMBER_MAPPINGS: dict[str, dict[str, str]] = {}

    @field_validator("OAUTH_GENERIC_NAME", mode="before")
    @classmethod
    def blank_generic_name_to_none(cls, v):
        """Treat an empty provider name from the environment as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_required_fields(self) -> BaseAppSettings:
        if self.DATABASE_URL and self.DATABASE_URL.startswith("postgres://"):
            self.DATABASE_URL = self.DATABASE_URL.replace("postgres://", "postgresql://", 1)

        if self.OAUTH_GENERIC_NAME and not self.OAUTH_GENERIC_USER_INFO_URL:
            raise ValueError("OAUTH_GENERIC_USER_INFO_URL is required when OAUTH_GENERIC_NAME is set")

        if self.ENV.lower() == "prod":
            required_in_prod = ("DATABASE_URL", "SESSION_SECRET")
            missing = [name for name in required_in_prod if not getattr(self, name)]
            if missing:
                raise ValueError(f"Missing required production settings: {', '.join(missing)}")
            if self.SESSION_SECRET == "change_me_session":
                raise ValueError("Insecure default secrets in production: SESSION_SECRET uses default placeholder")
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite:///./passport_login_dev.db"


class TestSettings(BaseAppSettings):
    ENV: str = "test"
    DATABASE_URL: str = "sqlite:///:memory:"


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
