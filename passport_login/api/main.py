from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from passport_login.api.routes_oauth import router as oauth_router
from passport_login.core.config import settings
from passport_login.core.errors import register_error_handlers
from passport_login.core.logger import init_logging


def create_app() -> FastAPI:
    init_logging()

    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        https_only=is_production,
    )
    register_error_handlers(app)
    app.include_router(oauth_router)

    return app


app = create_app()
