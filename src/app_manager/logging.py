import logging
import os
import sys
from typing import Optional, Union

import structlog

LOG_LEVEL_ENV = "APP_MANAGER_LOG_LEVEL"


def resolve_level(configured: Optional[str] = None) -> str:
    """Pick the log level: environment first, then config, then WARNING."""
    level = os.environ.get(LOG_LEVEL_ENV) or configured or "WARNING"
    return level.upper()


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure structlog on top of stdlib logging, writing to stderr."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
