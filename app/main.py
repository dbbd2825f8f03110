# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Feed API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Request pipeline (outermost first):
#   CORSHeadersMiddleware -> AuthMiddleware -> routes -> exception handlers
#
# Usage:
#   uvicorn app.main:app --port 8080
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.auth import AuthMiddleware
from app.config import settings
from app.exceptions import (
    FeedException,
    feed_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.graphql import create_graphql_router
from app.middleware import CORSHeadersMiddleware
from app.routers import feed, health
from core.database import close_db, get_db_info, init_db

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    uvicorn only starts accepting connections after the startup half of this
    handler returns, so the database is connected before the first request.
    A failed connection is logged and aborts startup.
    """
    logger.info(f"Starting Feed API in {settings.ENVIRONMENT} mode")

    try:
        await init_db()
    except Exception as e:
        logger.error(f"Could not connect to MongoDB at {get_db_info()['url']}: {e}")
        raise

    logger.info(f"...Listening on port {settings.PORT}")

    yield

    logger.info("Shutting down Feed API")
    await close_db()


def create_app() -> FastAPI:
    """Build the application: middleware, routes, static files, handlers."""
    app = FastAPI(
        title="Feed API",
        description="GraphQL feed API with image uploads.",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Feed",
                "description": "Upload images for posts",
            },
            {
                "name": "GraphQL",
                "description": "Users, login and posts",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    # =========================================================================
    # Middleware
    # =========================================================================
    # Added innermost first: the last middleware added wraps all others.

    app.add_middleware(AuthMiddleware)
    app.add_middleware(CORSHeadersMiddleware, allow_origin=settings.CORS_ALLOW_ORIGIN)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(FeedException, feed_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        feed.router,
        prefix="/feed",
        tags=["Feed"]
    )

    app.include_router(
        create_graphql_router(),
        prefix="/graphql",
        tags=["GraphQL"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    # =========================================================================
    # Static Files
    # =========================================================================

    settings.images_path.mkdir(parents=True, exist_ok=True)
    app.mount(
        f"/{settings.IMAGES_DIR}",
        StaticFiles(directory=settings.images_path),
        name="images",
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Feed API",
            "version": __version__,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
