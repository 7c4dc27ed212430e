"""
Acme Flavors Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) returns a configured FastAPI instance; the
       module-level `app` is what uvicorn loads (flavors_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging                  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌──────────┐ ┌─────────────┐  │
    │  │ /api/flavors[/id]│ │ /health  │ │ / + static  │  │
    │  └──────────────────┘ └──────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  NotFound→404 │ Database→500 │ anything else→500    │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup (strictly sequential; any failure aborts before listening):
    1. Configure logging
    2. Construct the Database and check connectivity
    3. Drop, recreate and seed the flavors table
    Shutdown:
    1. Dispose the Database (close the connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from flavors_api import __version__
from flavors_api.config import Settings, settings as default_settings
from flavors_api.database import Database
from flavors_api.exceptions import DatabaseError, NotFoundError
from flavors_api.middleware.logging import RequestLoggingMiddleware
from flavors_api.middleware.request_id import RequestIDMiddleware, request_id_var
from flavors_api.routes import docs, flavors, health
from flavors_api.services.seed import ensure_schema, rebuild_schema

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once at startup before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # flavors.access replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Acquire the store, prepare the schema, and release the store on shutdown.

    A failure here propagates out of the lifespan, so uvicorn reports a
    startup failure and never begins accepting requests.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)

    database = Database(settings)
    try:
        await database.ping()
        if settings.seed_on_startup:
            await rebuild_schema(database)
        else:
            await ensure_schema(database)
    except Exception:
        logger.exception("Error starting server!")
        await database.dispose()
        raise

    app.state.database = database
    logger.info("Server is listening on http://%s:%d", settings.host, settings.port)

    yield  # Application runs here

    logger.info("Shutting down, closing database connections...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and error bodies.

        NotFoundError  → 404 Not Found
        DatabaseError  → 500 Internal Server Error
        Exception      → 500 Internal Server Error (unexpected errors)

    Store details and stack traces are logged, never returned.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": request_id_var.get(""),
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Tests pass their own Settings (e.g. a SQLite URL); uvicorn uses the
    module-level instance built from the environment.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Acme Flavors API",
        description="CRUD over ice-cream flavors, seeded fresh on every start.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Last added = first to execute: RequestID runs before Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(flavors.router)
    app.include_router(health.router)
    app.include_router(docs.router)
    docs.mount_static(app, settings.static_dir)

    return app


app = create_app()
