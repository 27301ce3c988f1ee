"""Main entry point for the Miqat web service."""

import logging

import uvicorn

from miqat.api.app import create_app
from miqat.config import get_config, setup_logging


def main() -> None:
    """Run the Miqat web service."""
    config = get_config()
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Miqat başlatılıyor...")
    logger.info(f"Varsayılan metot: {config.method.value}, ikindi: {config.asr_school.value}")

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
