"""
Product Catalog Backend — FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn (`uvicorn product_catalog.main:app`) or the
       `product-catalog` console script (run()).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:                                            │
    │    /api/products[...]   product CRUD + image        │
    │    /images/<file>       static image files          │
    │    /health              data file probe             │
    │                                                     │
    │  Exception Handlers:                                │
    │    ValidationError→400 │ NotFound→404 │ Storage→500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the images directory, report
              where the data file lives.
    Shutdown: log only; there are no pooled resources to release.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from product_catalog import __version__
from product_catalog.config import settings
from product_catalog.exceptions import (
    CatalogError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from product_catalog.middleware.logging import RequestLoggingMiddleware
from product_catalog.middleware.request_id import RequestIDMiddleware, request_id_var
from product_catalog.routes import health, products

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level comes from settings.log_level; output goes to stdout.
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


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Product Catalog Backend starting up...")

    images_dir = Path(settings.images_dir)
    images_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Images directory: %s", images_dir.resolve())

    data_file = Path(settings.data_file)
    if data_file.is_file():
        logger.info("Data file: %s", data_file.resolve())
    else:
        # Requests fail with 500 until the file exists; create it with "[]".
        logger.warning("Data file %s does not exist", data_file.resolve())

    logger.info("Server running at %s/api/products", settings.public_base_url)
    logger.info("Images served from %s/images/", settings.public_base_url)
    logger.info("=" * 60)

    yield

    logger.info("Product Catalog Backend shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _business_error_response(status_code: int, exc: CatalogError) -> Response:
    if exc.plain_text:
        return PlainTextResponse(exc.message, status_code=status_code)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        ValidationError  → 400 (JSON {"error": ...} or plain text)
        NotFoundError    → 404 (JSON {"error": ...} or plain text)
        StorageError     → 500 generic message, details logged
        CatalogError     → 500 generic message
        Exception        → 500 generic message, stack trace logged
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Bad request: %s | Context: %s", rid, exc.message, exc.context)
        return _business_error_response(400, exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _business_error_response(404, exc)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": "An internal error occurred. Please try again later."},
        )

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(request: Request, exc: CatalogError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s", rid, exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "An internal error occurred. Please try again later."},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred."},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Product Catalog API",
        description=(
            "CRUD API over a flat-file product collection, with product images "
            "served from a static images directory."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes
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

    app.include_router(products.router)
    app.include_router(health.router)

    # check_dir=False: the directory is created in lifespan, after import
    app.mount(
        "/images",
        StaticFiles(directory=settings.images_dir, check_dir=False),
        name="images",
    )

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured host/port."""
    uvicorn.run(
        "product_catalog.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
