from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from passport_login.db.base_class import Base


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _aware(value: dt.datetime) -> dt.datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value


@dataclass
class ValidationResult:
    """Outcome of a login eligibility check; valid when no messages were added."""

    messages: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.messages.append(message)

    def is_valid(self) -> bool:
        return not self.messages


class Member(Base):
    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    first_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    surname: Mapped[str | None] = mapped_column(String(120), nullable=True)
    # Name of the OAuth provider the member was first created from
    oauth_source: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    is_active: Mapped[bool] = mapped_column(default=True, server_default="true")
    locked_out_until: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_login: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )

    passports: Mapped[list[Passport]] = relationship(
        "Passport",
        back_populates="member",
        cascade="all, delete-orphan",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("is_active", True)
        super().__init__(**kwargs)

    def is_locked_out(self, now: dt.datetime | None = None) -> bool:
        if self.locked_out_until is None:
            return False
        return _aware(self.locked_out_until) > (now or utcnow())

    def validate_can_log_in(self) -> ValidationResult:
        """Check whether this member may start a session.

        Each failing rule adds one message; an empty result means the member
        can log in.
        """
        result = ValidationResult()
        if not self.is_active:
            result.add_error("This account has been disabled.")
        if self.is_locked_out():
            result.add_error("This account is temporarily locked. Please try again later.")
        return result

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, oauth_source={self.oauth_source})>"


class Passport(Base):
    """Link between a provider's external identifier and a local member.

    Rules:
      - (provider, identifier) is globally unique.
      - A member may hold one passport per provider it has linked.
      - Never mutated; removed together with the owning member.
    """

    id: Mapped[int] = mapped_column(primary_key=True)
    provider: Mapped[str] = mapped_column(String(50), nullable=False)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    member_id: Mapped[int] = mapped_column(
        ForeignKey("member.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )

    member: Mapped[Member] = relationship("Member", back_populates="passports")

    __table_args__ = (
        UniqueConstraint("provider", "identifier", name="uq_passport_provider_identifier"),
    )

    def __repr__(self) -> str:
        return f"<Passport(provider={self.provider}, identifier={self.identifier}, member_id={self.member_id})>"
