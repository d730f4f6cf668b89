"""Session establishment for resolved members."""
import logging
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any

from sqlalchemy.orm import Session

from passport_login.models.models import Member, utcnow

logger = logging.getLogger(__name__)

MEMBER_SESSION_KEY = "login.member_id"


class IdentityStore(ABC):
    """Starts and ends the logged-in state for a member."""

    @abstractmethod
    def log_in(self, member: Member) -> None:
        pass

    @abstractmethod
    def log_out(self) -> None:
        pass


class SessionIdentityStore(IdentityStore):
    """Keeps the logged-in member id in the request session."""

    def __init__(self, session: MutableMapping[str, Any], db: Session | None = None):
        self.session = session
        self.db = db

    def log_in(self, member: Member) -> None:
        member.last_login = utcnow()
        if self.db is not None:
            self.db.commit()
        self.session[MEMBER_SESSION_KEY] = member.id
        logger.info("Member %s logged in", member.id)

    def log_out(self) -> None:
        member_id = self.session.pop(MEMBER_SESSION_KEY, None)
        if member_id is not None:
            logger.info("Member %s logged out", member_id)

    def current_member_id(self) -> int | None:
        return self.session.get(MEMBER_SESSION_KEY)
