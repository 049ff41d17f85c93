"""Command-line entry point: ``python -m pathprobe``."""

from __future__ import annotations

import logging
import sys

import uvicorn

from pathprobe.app import create_app
from pathprobe.config import Settings, configure_logging
from pathprobe.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
