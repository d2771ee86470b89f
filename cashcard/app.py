"""FastAPI application for the cash card API."""
from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from cashcard.core.config import Settings, get_settings
from cashcard.core.logging_config import setup_logging
from cashcard.db.create_tables import create_all
from cashcard.db.seed import seed_demo_data
from cashcard.repositories.sql_repository import SQLCashCardRepository, SQLUserRepository
from cashcard.routers import cashcards as cashcards_router
from cashcard.services.auth_service import AuthService
from cashcard.services.cash_card_service import CashCardService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON-only API."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Cache-Control", "no-store")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"detail": errors})


@asynccontextmanager
async def _lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.auto_create_tables:
        create_all()
    if settings.seed_demo_data:
        seed_demo_data()
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its services wired to the SQL stores."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Cash Card API", lifespan=_lifespan)
    app.state.settings = settings
    app.state.cash_card_service = CashCardService(SQLCashCardRepository())
    app.state.auth_service = AuthService(SQLUserRepository())

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_exception_handler(RequestValidationError, _validation_error)

    app.include_router(cashcards_router.router)
    logger.info("Cash card API configured (env=%s)", settings.app_env)
    return app


app = create_app()
