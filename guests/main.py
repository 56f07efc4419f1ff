from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guests.api.v1.router import router as api_v1_router
from guests.config.logging import setup_logging
from guests.config.settings import settings
from guests.core.middleware import register_exception_handlers, register_middlewares
from guests.db.init_db import init_db
from guests.db.session import SessionLocal
from guests.services.devmode_service import DevModeService

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    if settings.CORS_ORIGINS and settings.CORS_ORIGINS != ["*"]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Permissive for development; tighten in production
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.on_event("startup")
    async def on_startup() -> None:
        if not settings.is_production():
            # Production schemas are managed outside the application
            init_db()
        if settings.DEV_MODE_POPULATE or settings.DEV_MODE_DEPOPULATE:
            db = SessionLocal()
            try:
                DevModeService(db).startup()
            finally:
                db.close()
        logger.info(f"{settings.APP_NAME} {settings.API_VERSION} started ({settings.ENVIRONMENT})")

    return app


app = create_app()
