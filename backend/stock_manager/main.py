"""
Stock Manager Backend — FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error mapping,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn stock_manager.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware:  Request ID → Logging → CORS                │
    │                                                          │
    │  Routes:  /api/categories      /api/sub-categories       │
    │           /api/components      /api/sub-components       │
    │           /health                                        │
    │                                                          │
    │  Exception Handlers:                                     │
    │   RequestValidationError → 400 (path id or body)         │
    │   NotFoundError → 404      StoreError → 500              │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listening address
    Shutdown: dispose the database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stock_manager import __version__
from stock_manager.config import settings
from stock_manager.database import dispose_engine
from stock_manager.exceptions import NotFoundError, StoreError
from stock_manager.middleware.logging import RequestLoggingMiddleware
from stock_manager.middleware.request_id import RequestIDMiddleware, request_id_var
from stock_manager.routes import categories, components, health, sub_categories, sub_components

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once from the lifespan, before anything else logs. The format
    puts the logger name up front so access lines (stock_manager.access)
    and service lines (stock_manager.services.*) are easy to tell apart.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Acquire on startup, release on shutdown.

    The engine itself is created at import and connects lazily, so startup
    never blocks on the database; shutdown disposes the pool.
    """
    setup_logging()
    logger.info("Stock Manager API %s starting up...", __version__)
    logger.info("Schema: %s", settings.db_schema)
    logger.info("Server is running on port %d", settings.port)

    yield

    logger.info("Stock Manager API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

BODY_NOT_AN_OBJECT = "Request body must be a JSON object"


def has_invalid_path_id(request: Request, errors: List[Dict[str, Any]]) -> bool:
    """
    True when a path id failed UUID parsing.

    Undecodable JSON is rejected before FastAPI converts path parameters,
    so the raw path values are checked too; every path parameter of this
    API is a UUID.
    """
    if any(tuple(err["loc"])[:1] == ("path",) for err in errors):
        return True
    for value in request.path_params.values():
        try:
            UUID(str(value))
        except ValueError:
            return True
    return False


def field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors to [{field, message}], one per failed rule.

    Errors located at the body itself (missing, not an object, not JSON)
    collapse into a single `body` entry.
    """
    items = []
    for err in errors:
        loc = err["loc"]
        if err["type"] == "json_invalid" or len(loc) < 2:
            item = {"field": "body", "message": BODY_NOT_AN_OBJECT}
        else:
            item = {"field": ".".join(str(part) for part in loc[1:]), "message": err["msg"]}
        if item not in items:
            items.append(item)
    return items


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to the API's error bodies.

    Handler hierarchy:
        RequestValidationError  → 400 {"error": "Invalid UUID"} for a bad path id,
                                  else {"errors": [{field, message}, ...]}
        NotFoundError           → 404 {"error": "<Entity> not found"}
        StoreError              → 500 {"error": ..., "details": <store message>}
        Exception (fallback)    → 500 {"error": "Internal server error"}
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = list(exc.errors())
        if has_invalid_path_id(request, errors):
            return JSONResponse(status_code=400, content={"error": "Invalid UUID"})

        items = field_errors(errors)
        logger.warning(
            "[%s] Invalid request body: %s",
            request_id_var.get(""),
            ", ".join(item["field"] for item in items),
        )
        return JSONResponse(status_code=400, content={"errors": items})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(
            "[%s] Store error: %s | %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.details,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "details": exc.details},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the log, never to the client."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers into a FastAPI app."""
    app = FastAPI(
        title="Stock Manager API",
        description=(
            "CRUD API over an inventory hierarchy: categories, sub-categories, "
            "components and the sub-components nested inside them."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: the last added runs
    # first, so Request ID → Logging → CORS on the way in.
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,  # browsers refuse credentials with a wildcard
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(sub_categories.router)
    app.include_router(components.router)
    app.include_router(sub_components.router)
    app.include_router(health.router)

    return app


# uvicorn expects `stock_manager.main:app` to be importable
app = create_app()
