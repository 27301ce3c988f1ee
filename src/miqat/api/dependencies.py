"""Application state and dependencies."""

import logging
from dataclasses import dataclass
from datetime import datetime

from fastapi import FastAPI, Request

from miqat.config import AppConfig
from miqat.domain.models import PrayerTimeSet, QiblaResult
from miqat.infrastructure.cache import InMemoryTTLCache

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Application state container."""

    config: AppConfig
    times_cache: InMemoryTTLCache[PrayerTimeSet]
    qibla_cache: InMemoryTTLCache[QiblaResult]
    started_at: datetime


def initialize_app_state(app: FastAPI, config: AppConfig) -> AppState:
    """
    Initialize application state and attach it to the app.

    Args:
        app: FastAPI uygulaması
        config: Uygulama ayarları

    Returns:
        Initialized AppState
    """
    state = AppState(
        config=config,
        times_cache=InMemoryTTLCache(config.times_cache_ttl),
        qibla_cache=InMemoryTTLCache(config.qibla_cache_ttl),
        started_at=datetime.now(),
    )
    app.state.miqat = state
    logger.debug(
        f"Önbellekler hazır (vakit TTL: {config.times_cache_ttl}s, "
        f"kıble TTL: {config.qibla_cache_ttl}s)"
    )
    return state


def get_app_state(request: Request) -> AppState:
    """Get current application state."""
    state = getattr(request.app.state, "miqat", None)
    if state is None:
        raise RuntimeError("Application state not initialized")
    return state


def shutdown_app_state(app: FastAPI) -> None:
    """Shutdown application state."""
    state = getattr(app.state, "miqat", None)
    if state is not None:
        state.times_cache.clear()
        state.qibla_cache.clear()
        app.state.miqat = None
