"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Self

from miqat.domain.models import AsrSchool, CalculationMethod, Language
from miqat.infrastructure.cache import ONE_DAY_SECONDS, ONE_WEEK_SECONDS


@dataclass
class AppConfig:
    """Application configuration."""

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    # Calculation defaults
    method: CalculationMethod = CalculationMethod.MWL
    asr_school: AsrSchool = AsrSchool.SHAFI
    language: Language = Language.ENGLISH

    # Cache lifetimes (seconds)
    times_cache_ttl: float = ONE_DAY_SECONDS
    qibla_cache_ttl: float = ONE_WEEK_SECONDS

    @classmethod
    def from_env(cls) -> Self:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("MIQAT_HOST", "127.0.0.1"),
            port=int(os.getenv("MIQAT_PORT", "8080")),
            log_level=os.getenv("MIQAT_LOG_LEVEL", "INFO"),
            method=CalculationMethod.from_name(os.getenv("MIQAT_METHOD", "MWL")),
            asr_school=AsrSchool(os.getenv("MIQAT_ASR_SCHOOL", AsrSchool.SHAFI.value).lower()),
            language=Language(os.getenv("MIQAT_LANGUAGE", Language.ENGLISH.value).lower()),
            times_cache_ttl=float(os.getenv("MIQAT_TIMES_CACHE_TTL", str(ONE_DAY_SECONDS))),
            qibla_cache_ttl=float(os.getenv("MIQAT_QIBLA_CACHE_TTL", str(ONE_WEEK_SECONDS))),
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def setup_logging(level: str = "INFO") -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("timezonefinder").setLevel(logging.WARNING)
