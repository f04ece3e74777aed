"""
Sample API: FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the app, attaches the Database handle to
       app.state, and registers middleware, exception handlers and routers.
Who:   uvicorn (`uvicorn sample_api.main:app`), `python -m sample_api`, and
       the test suite, which passes its own Database.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  Req ID → Logging → CORS                │
    │                                                      │
    │  Routes:                                             │
    │   /agents (GET, POST)   /agents/{id} (PATCH,PUT,DEL) │
    │   /customers (GET)      /orders (GET)   /health      │
    │   /docs  /redoc  /openapi.json                       │
    │                                                      │
    │  Exception Handlers:                                 │
    │   ValidationError→400  NotFoundError→404             │
    │   StorageError→500     RequestValidationError→400    │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the docs URL
    Shutdown: dispose the engine (close every pooled connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sample_api import __version__
from sample_api.config import settings
from sample_api.database import Database
from sample_api.exceptions import NotFoundError, StorageError, ValidationError
from sample_api.middleware.logging import RequestLoggingMiddleware
from sample_api.middleware.request_id import RequestIDMiddleware, request_id_var
from sample_api.routes import agents, customers, health, orders

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup logging, then engine disposal on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Sample API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Sample API shutting down...")
    database: Database = app.state.database
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{"error": <message>}` responses.

        ValidationError         → 400
        RequestValidationError  → 400 "Invalid request"
        NotFoundError           → 404
        StorageError            → 500 with the driver's message
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON, wrong field types, or a non-integer path id."""
        rid = request_id_var.get("")
        locations = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
        logger.warning("[%s] Invalid request: %s", rid, ", ".join(locations))
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s (id=%s)", rid, exc.message, exc.resource_id)
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or type(exc).__name__},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Connection source to serve requests from. Defaults to one
                  built from `settings`; tests pass a SQLite-backed one.
    """
    app = FastAPI(
        title="Sample API",
        description="API for managing agents, customers, and orders",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.database = database or Database.from_settings(settings)

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(agents.router)
    app.include_router(customers.router)
    app.include_router(orders.router)
    app.include_router(health.router)

    return app


app = create_app()
