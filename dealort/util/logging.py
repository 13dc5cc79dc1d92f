"""Standard library logging setup.

Application code logs through logfire directly. This module routes records
from third-party libraries (uvicorn, sqlalchemy, alembic) into logfire so
everything ends up in one place.
"""

import logging

import logfire

from dealort.config import Settings

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def resolve_level(settings: Settings) -> int:
    """Pick the root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging to forward into logfire.

    Must be called after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = resolve_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Override any existing configuration
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("dealort").setLevel(level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
