"""Exception hierarchy for passport login.

Every error raised by the login core derives from PassportLoginException so the
API layer can translate it into a response from ``status_code`` and ``to_dict``.

Error codes follow pattern: AUTH[NUMBER]
- AUTH001: resource owner lookup failed
- AUTH002: member may not log in
- AUTH003: passport already exists for (provider, identifier)
- AUTH004: provider not registered
- AUTH005: provider name missing from request context
"""

from __future__ import annotations

from typing import Any


class PassportLoginException(Exception):
    """Base exception for all passport login errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with message and metadata.

        Args:
            message: Human readable error message
            code: Unique error code (e.g., "AUTH001")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


class IdentityLookupError(PassportLoginException):
    """Exchanging the access token for a resource owner failed."""

    def __init__(self, provider: str, reason: str | None = None):
        message = f"Could not fetch resource owner from {provider}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            code="AUTH001",
            status_code=400,
            details={"provider": provider},
        )
        self.provider = provider


class MemberIneligibleError(PassportLoginException):
    """Member was found or created but fails the login validation."""

    def __init__(self, reasons: list[str], member_id: int | None = None):
        super().__init__(
            message="Member is not allowed to log in",
            code="AUTH002",
            status_code=403,
            details={"reasons": list(reasons), "member_id": member_id},
        )
        self.reasons = list(reasons)


class PassportConflictError(PassportLoginException):
    """A passport for (provider, identifier) was created by another request first."""

    def __init__(self, provider: str, identifier: str):
        super().__init__(
            message=f"Passport already exists for {provider}:{identifier}",
            code="AUTH003",
            status_code=409,
            details={"provider": provider, "identifier": identifier},
        )
        self.provider = provider
        self.identifier = identifier


class ProviderNotRegisteredError(PassportLoginException):
    def __init__(self, provider: str):
        super().__init__(
            message=f"OAuth provider '{provider}' not registered",
            code="AUTH004",
            status_code=404,
            details={"provider": provider},
        )


class ProviderNameMissingError(PassportLoginException):
    def __init__(self):
        super().__init__(
            message="No OAuth provider name in the current login context",
            code="AUTH005",
            status_code=400,
        )
