"""Logging setup built on loguru.

Modules obtain a logger through ``get_logger(__name__)``. The first call
configures loguru with defaults when nothing has been configured yet, so the
library stays usable without the CLI bootstrap.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.WARNING,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's sinks with one configured for the environment."""
    global _configured

    logger.remove()
    logger.configure(extra={"name": "hashmatch"})

    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEV_FORMAT,
            colorize=environment == Environment.DEVELOPMENT,
            backtrace=environment == Environment.DEVELOPMENT,
            diagnose=False,
        )

    _configured = True


def is_configured() -> bool:
    """Whether a sink has been configured since the last reset."""
    return _configured


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Drop all sinks and forget configuration state."""
    global _configured

    logger.remove()
    _configured = False
