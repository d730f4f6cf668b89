"""
OAuth 2.0 token login routes.

Endpoints:
- GET  /auth/oauth/providers - List registered providers
- POST /auth/oauth/{provider}/token - Log in with a provider access token

Only handles the HTTP layer; login logic lives in OAuthService.
Provider errors (unknown provider, failed lookup) are rendered by the
PassportLoginException handler.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from passport_login.db.session import get_db
from passport_login.models import schemas
from passport_login.services.oauth import OAuthService, create_oauth_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth/oauth", tags=["oauth"])


def get_oauth_service(request: Request, db: Annotated[Session, Depends(get_db)]) -> OAuthService:
    return create_oauth_service(db, request.session)


@router.get("/providers", response_model=schemas.OAuthProvidersOut)
async def list_oauth_providers(
    oauth_service: Annotated[OAuthService, Depends(get_oauth_service)],
) -> dict:
    """
    List available OAuth providers.

    Returns:
        {"providers": [{"name": "google", "display_name": "Google"}]}
    """
    providers = [
        {"name": provider.name, "display_name": provider.display_name}
        for provider in oauth_service.providers
    ]
    return {"providers": providers}


@router.post("/{provider}/token", response_model=schemas.TokenLoginOut)
async def token_login(
    provider: str,
    payload: schemas.TokenLoginIn,
    oauth_service: Annotated[OAuthService, Depends(get_oauth_service)],
):
    """
    Log in with an access token issued by ``provider``.

    Returns 200 with the member on success and 403 with the reasons when
    the member may not log in; no session is created in that case.

    Example:
        POST /auth/oauth/google/token {"access_token": "ya29..."}
    """
    result = await oauth_service.authenticate_with_token(provider, payload.access_token)

    if not result.success:
        # Rejected members get the reasons only, never their profile
        body = schemas.TokenLoginOut(success=False, reasons=result.reasons)
        return JSONResponse(status_code=result.status_code, content=body.model_dump(mode="json"))

    member = schemas.MemberOut.model_validate(result.member)
    return schemas.TokenLoginOut(success=True, member=member)
