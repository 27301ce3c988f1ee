"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from miqat import __version__
from miqat.api.dependencies import initialize_app_state, shutdown_app_state
from miqat.api.routes import router as api_router
from miqat.config import AppConfig, get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info("Miqat başlatılıyor...")

    if getattr(app.state, "miqat", None) is None:
        initialize_app_state(app, app.state.config)

    logger.info("Miqat hazır!")

    yield

    # Shutdown
    logger.info("Miqat kapatılıyor...")
    shutdown_app_state(app)
    logger.info("Miqat kapatıldı.")


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Uygulama ayarları (varsayılan: ortam değişkenlerinden)

    Returns:
        Configured FastAPI app
    """
    if config is None:
        config = get_config()

    app = FastAPI(
        title="Miqat",
        description="Çevrimdışı namaz vakti ve kıble hesaplama servisi",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config in app state
    app.state.config = config
    initialize_app_state(app, config)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(api_router, prefix="/api")

    # Health check
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
