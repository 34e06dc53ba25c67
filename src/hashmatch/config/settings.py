"""Runtime settings for hashmatch."""

import enum
import typing as t
from dataclasses import dataclass, fields


class Environment(enum.Enum):
    """Runtime environment for the application.

    Drives logging format: colorized console output for development and
    testing, serialized records for production.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_CHUNK_SIZE: t.Final = 64 * 1024


@dataclass(frozen=True)
class Settings:
    """Settings container shared by the CLI and library entrypoints.

    The default log level is WARNING so that log records do not interleave
    with the digest table printed on stdout.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.WARNING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets CLI options default to None and only replace the values the user
    actually supplied.
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    return Settings(
        **{key: value for key, value in overrides.items() if value is not None}
    )
