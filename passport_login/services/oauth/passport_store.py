"""Persistent (provider, identifier) -> member mapping."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from passport_login.core.exceptions import PassportConflictError
from passport_login.models.models import Member, Passport

logger = logging.getLogger(__name__)


class PassportStore:
    """
    Looks up and creates passports.

    Uniqueness of (provider, identifier) is enforced by the database, so a
    create that loses a race surfaces as PassportConflictError instead of a
    duplicate row.
    """

    def __init__(self, db: Session):
        self.db = db

    def find(self, provider: str, identifier: str) -> Member | None:
        passport = (
            self.db.query(Passport)
            .filter(Passport.provider == provider, Passport.identifier == str(identifier))
            .first()
        )
        if passport is None:
            return None
        return passport.member

    def create(self, provider: str, identifier: str, member: Member) -> Passport:
        """
        Persist ``member`` (if new) together with a passport bound to it.

        Raises:
            PassportConflictError: If the pair already has a passport
        """
        passport = Passport(provider=provider, identifier=str(identifier))
        member.passports.append(passport)
        self.db.add(member)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Passport conflict for %s:%s", provider, identifier)
            raise PassportConflictError(provider, str(identifier)) from e

        self.db.refresh(member)
        logger.info("Created passport %s:%s for member %s", provider, identifier, member.id)
        return passport

    def passports_for(self, member: Member) -> list[Passport]:
        return (
            self.db.query(Passport)
            .filter(Passport.member_id == member.id)
            .order_by(Passport.id)
            .all()
        )
