"""
FreshSave FastAPI Application
Main entry point: application factory, middleware and configuration wiring
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import auth, food_items, recipes, sharing, stats, health
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_error_handler,
    general_exception_handler,
)
from adapters import (
    InMemorySessionStore,
    PasswordHasher,
    SessionStore,
    SqlSessionStore,
)
from app.config import Settings, SessionBackend, settings as default_settings
from app.exceptions import AppError
from domain.models import Database
from services.auth_service import AuthService
from services.sharing_service import SharingService

_logger = logging.getLogger("freshsave.main")


def _seed_reference_data(database: Database) -> dict:
    with database.session() as db:
        return SharingService.seed_reference_data(db)


def _build_session_store(settings: Settings, database: Database) -> SessionStore:
    if settings.session_backend == SessionBackend.MEMORY:
        return InMemorySessionStore()
    return SqlSessionStore(database.session_factory)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    session_store: Optional[SessionStore] = None,
) -> FastAPI:
    """
    Build a fully wired application.

    Tests pass their own settings, database and session store; the process
    entry point uses the module-level defaults.
    """
    settings = settings or default_settings
    database = database or Database(settings.database_url, echo=settings.db_echo)
    session_store = session_store or _build_session_store(settings, database)

    # Setup logging with configured level and format
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for application startup and shutdown.
        Creates the schema with retries and seeds reference data.
        """
        _logger.info(f"Starting FreshSave in {settings.environment.value} mode")

        for attempt in range(1, settings.db_init_attempts + 1):
            try:
                # Run blocking init in a thread to avoid blocking the event loop
                await anyio.to_thread.run_sync(database.init_schema)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    settings.db_init_attempts,
                    exc,
                )
                if attempt < settings.db_init_attempts:
                    await anyio.sleep(settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts", attempt
                    )
                    raise

        if settings.seed_reference_data:
            await anyio.to_thread.run_sync(_seed_reference_data, database)

        pruned = await anyio.to_thread.run_sync(session_store.prune_expired)
        if pruned:
            _logger.info("Pruned %d expired sessions", pruned)

        try:
            yield
        finally:
            _logger.info("Shutting down FreshSave")
            database.dispose()

    docs_enabled = not settings.is_production()
    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
        redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.session_store = session_store
    app.state.auth_service = AuthService(
        session_store,
        PasswordHasher(rounds=settings.password_hash_rounds),
        session_ttl_seconds=settings.session_ttl_seconds,
        remember_ttl_seconds=settings.session_remember_ttl_seconds,
    )

    # Credentials are required for the session cookie to cross origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    for module in (auth, food_items, recipes, sharing, stats, health):
        app.include_router(module.router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
