from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.account_service import AccountService
from ..application.services.address_service import AddressService
from ..infrastructure.persistence.sqlite import SQLitePersistence
from ..presentation.api.errors import register_error_handlers
from ..presentation.api.routers import address_router
from ..presentation.api.routers import admin as admin_router
from ..presentation.api.routers import user_router
from ..services.email_service import EmailService
from ..services.password_hasher import PasswordHasher
from ..services.token_service import TokenService
from ..services.verification_codes import VerificationCodeGenerator

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="FoodBuddy User Service", lifespan=_create_lifespan(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(user_router.router)
    app.include_router(address_router.router)
    app.include_router(admin_router.router)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def build_container(settings: Settings) -> ApplicationContainer:
    persistence = SQLitePersistence(settings.database_path)
    token_service = TokenService(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_hours=settings.token_exp_hours,
    )
    email_service = EmailService(
        smtp_host=settings.smtp_host,
        smtp_port=settings.smtp_port,
        smtp_username=settings.smtp_username,
        smtp_password=settings.smtp_password,
        from_email=settings.smtp_from_email,
    )
    account_service = AccountService(
        persistence=persistence,
        password_hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        token_service=token_service,
        code_generator=VerificationCodeGenerator(),
        email_service=email_service,
    )
    return ApplicationContainer(
        settings=settings,
        persistence=persistence,
        account_service=account_service,
        address_service=AddressService(persistence),
    )


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        container = build_container(settings)
        app.state.container = container  # type: ignore[attr-defined]
        logger.info("User service ready (database: %s)", settings.database_path)
        try:
            yield
        finally:
            container.persistence.close()

    return lifespan
