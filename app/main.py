# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Products API.
# create_app() builds the AppContext (settings, engine, store) once and wires
# middleware, exception handlers and routers around it.
#
# Usage:
#   uvicorn app.main:app --reload
#   products-api                      (runs uvicorn on HOST:PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app import __version__
from app.config import Settings, get_settings
from app.dependencies import AppContext
from app.exceptions import (
    ProductApiException,
    product_api_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from app.middleware import SingleOriginCORSMiddleware, log_requests
from app.routers import health, products
from lib.database import connect_db, create_engine_from_url, create_session_factory
from lib.store import ProductStore, SqlProductStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: connect to the database and create tables. A failure is
      logged and the API keeps serving.
    - Shutdown: dispose of the engine's connection pool.
    """
    context: AppContext = app.state.context

    # Startup
    logger.info(f"Starting Products API in {context.settings.ENVIRONMENT} mode")
    logger.info(f"CORS origin: {context.settings.cors_origin}")
    if context.engine is not None:
        await connect_db(context.engine)

    yield

    # Shutdown
    logger.info("Shutting down Products API")
    if context.engine is not None:
        await context.engine.dispose()


def build_context(settings: Settings, store: ProductStore | None = None) -> AppContext:
    """
    Build the AppContext.

    With no store given, a SQL store on settings.DATABASE_URL is created.
    """
    if store is not None:
        return AppContext(settings=settings, store=store)

    engine = create_engine_from_url(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    store = SqlProductStore(create_session_factory(engine))
    return AppContext(settings=settings, store=store, engine=engine)


def create_app(settings: Settings | None = None, store: ProductStore | None = None) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        store: Product store to use (defaults to a SQL store on DATABASE_URL)
    """
    settings = settings or get_settings()
    context = build_context(settings, store)

    app = FastAPI(
        title="Products API",
        description="REST API for managing products: name, price and availability.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Products",
                "description": "Create, read, update and delete products",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )
    app.state.context = context

    # =========================================================================
    # Middleware
    # =========================================================================
    # Registered last-to-first: CORS runs before request logging sees anything.

    app.middleware("http")(log_requests)
    app.add_middleware(SingleOriginCORSMiddleware, origin=settings.cors_origin)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ProductApiException, product_api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        products.router,
        prefix="/api/products",
        tags=["Products"]
    )

    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    settings = get_settings()
    logger.info(f"REST API on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
