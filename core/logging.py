import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

from core.config import Settings

# Statement echo is left to SQLAlchemy's own ``echo`` flag
QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")


def resolve_log_level(settings: Settings) -> int:
    """LOG_LEVEL wins; otherwise DEBUG in development and INFO elsewhere."""
    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown LOG_LEVEL: {settings.LOG_LEVEL}")
        return level
    return logging.DEBUG if settings.ENVIRONMENT == "development" else logging.INFO


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at the configured level."""
    level = resolve_log_level(settings)
    use_json = settings.LOG_JSON if settings.LOG_JSON is not None else settings.ENVIRONMENT == "production"

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
