"""Factory function for creating a configured OAuth login service."""
import logging
from collections.abc import MutableMapping
from typing import Any

from sqlalchemy.orm import Session

from passport_login.core.config import settings

from .handler import LoginTokenHandler
from .identity_store import SessionIdentityStore
from .mappers import create_mapper_factory
from .passport_store import PassportStore
from .providers import GenericOAuthProvider, GoogleOAuthProvider
from .resolver import TokenResolver
from .service import OAuthService

logger = logging.getLogger(__name__)


def create_oauth_service(db: Session, session: MutableMapping[str, Any]) -> OAuthService:
    """
    Wire an OAuthService for one request.

    Registers every provider enabled in settings.

    Args:
        db: Database session
        session: Request-scoped session mapping

    Returns:
        Configured OAuthService instance
    """
    resolver = TokenResolver(PassportStore(db), create_mapper_factory())
    handler = LoginTokenHandler(resolver, SessionIdentityStore(session, db), session)
    service = OAuthService(handler)

    if settings.GOOGLE_CLIENT_ID:
        service.register_provider("google", GoogleOAuthProvider(timeout=settings.OAUTH_HTTP_TIMEOUT))
    else:
        logger.debug("Google OAuth not configured (missing client ID)")

    if settings.OAUTH_GENERIC_NAME and settings.OAUTH_GENERIC_USER_INFO_URL:
        service.register_provider(
            settings.OAUTH_GENERIC_NAME,
            GenericOAuthProvider(
                name=settings.OAUTH_GENERIC_NAME,
                user_info_url=settings.OAUTH_GENERIC_USER_INFO_URL,
                id_field=settings.OAUTH_GENERIC_ID_FIELD,
                timeout=settings.OAUTH_HTTP_TIMEOUT,
            ),
        )

    return service
