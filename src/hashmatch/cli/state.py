"""CLI state container."""

import typing as t

from ..comparison import ComparisonEngine, FileDigestProvider, InputValidator
from ..config.settings import Settings
from ..events import BaseEmitter
from ..infrastructure.logging import get_logger

EngineFactory = t.Callable[..., ComparisonEngine]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factories commands use to build their
    collaborators. Tests swap ``engine_factory`` to inject fakes.
    """

    def __init__(
        self,
        settings: Settings,
        engine_factory: EngineFactory | None = None,
    ):
        self.settings = settings
        self._engine_factory = engine_factory or self._default_engine_factory

    def create_validator(self) -> InputValidator:
        return InputValidator(logger=get_logger("hashmatch.validator"))

    def create_engine(self, *, emitter: BaseEmitter) -> ComparisonEngine:
        return self._engine_factory(emitter=emitter)

    def _default_engine_factory(self, *, emitter: BaseEmitter) -> ComparisonEngine:
        provider = FileDigestProvider(chunk_size=self.settings.chunk_size)
        return ComparisonEngine(provider=provider, emitter=emitter)
