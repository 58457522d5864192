"""Aviary Catalog API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from aviary.core.config import DEFAULT_SECRET_KEY, settings
from aviary.core.exceptions import register_exception_handlers
from aviary.db.base import async_session_factory, init_models
from aviary.middleware.audit import AuditMiddleware
from aviary.schemas.common import HealthResponse
from aviary.services.admin import AdminService

from aviary.routers.admins import router as admins_router
from aviary.routers.birds import router as birds_router
from aviary.routers.contact import router as contact_router
from aviary.routers.products import router as products_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


def _check_secret_key() -> None:
    """Warn when production runs with the placeholder session secret."""
    if settings.app_env == "production" and settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning(
            "SECRET_KEY is the built-in default; admin session cookies can be forged. "
            "Set SECRET_KEY before serving traffic."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    if settings.bootstrap_admin_username and settings.bootstrap_admin_password:
        async with async_session_factory() as session:
            await AdminService(session).ensure_bootstrap_admin(
                settings.bootstrap_admin_username, settings.bootstrap_admin_password,
            )
            await session.commit()
    logger.info("%s started (%s)", settings.app_name, settings.app_env)
    yield


def create_app() -> FastAPI:
    _configure_logging()
    _check_secret_key()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )

    # --- Audit middleware (innermost, reads the decoded session) ---
    app.add_middleware(AuditMiddleware)

    # --- Admin sessions ---
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.app_env == "production",
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes ---
    app.include_router(birds_router)
    app.include_router(products_router)
    app.include_router(admins_router)
    app.include_router(contact_router)

    # --- Uploaded images ---
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
