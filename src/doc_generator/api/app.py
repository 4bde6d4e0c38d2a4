"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doc_generator import __version__
from doc_generator.api.routes import completions_router, docs_router, health_router
from doc_generator.config import get_settings
from doc_generator.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Configure logging first
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info("application_starting", version=__version__)
        yield
        logger.info("application_stopped")

    app = FastAPI(
        title="Doc Generator API",
        description="ApexDoc and JSDoc comment generation from declaration scanning",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Editors call from localhost extensions
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(docs_router, prefix="/api/v1")
    app.include_router(completions_router, prefix="/api/v1")

    logger.info(
        "application_configured",
        debug=settings.debug,
        template_dir=str(settings.template_dir) if settings.template_dir else "bundled",
    )

    return app
