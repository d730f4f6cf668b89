"""Login eligibility gate."""
import logging

from passport_login.core.exceptions import MemberIneligibleError
from passport_login.models.models import Member, ValidationResult

logger = logging.getLogger(__name__)


def check_eligibility(member: Member) -> ValidationResult:
    """Ask the member whether it may log in. No side effects."""
    return member.validate_can_log_in()


def ensure_eligible(member: Member) -> None:
    """
    Raises:
        MemberIneligibleError: If the member fails validation
    """
    result = check_eligibility(member)
    if not result.is_valid():
        logger.info("Member %s rejected at login: %s", member.id, "; ".join(result.messages))
        raise MemberIneligibleError(result.messages, member_id=member.id)
