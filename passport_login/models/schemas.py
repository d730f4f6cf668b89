from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class TokenLoginIn(BaseModel):
    """Access token obtained by the client from an OAuth provider."""
    access_token: str = Field(min_length=1)


class MemberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str | None = None
    first_name: str | None = None
    surname: str | None = None
    oauth_source: str | None = None
    last_login: dt.datetime | None = None


class TokenLoginOut(BaseModel):
    """Result of logging in with a provider access token."""
    success: bool
    member: MemberOut | None = None
    reasons: list[str] = []


class OAuthProviderInfo(BaseModel):
    name: str
    display_name: str


class OAuthProvidersOut(BaseModel):
    """List of registered OAuth providers."""
    providers: list[OAuthProviderInfo]
