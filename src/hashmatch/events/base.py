"""Emitter interface between the comparison engine and its observers."""

from abc import ABC, abstractmethod
from typing import Any, Callable

# Receives the event model passed to ``emit``.
Handler = Callable[[Any], None]


class BaseEmitter(ABC):
    """Channel the engine publishes comparison progress on.

    ComparisonEngine emits ``comparison.started``, then one
    ``comparison.digest_computed`` per file and algorithm (skipped in quiet
    mode), one ``comparison.algorithm_completed`` per algorithm and a final
    ``comparison.finished``. The CLI's ResultReporter subscribes to the
    digest rows; anything else may listen to the rest.

    Emission is synchronous: ``emit`` returns once every handler ran.
    """

    @abstractmethod
    def on(self, event_type: str, handler: Handler) -> None:
        """Register ``handler`` for ``event_type``."""

    @abstractmethod
    def off(self, event_type: str, handler: Handler) -> None:
        """Remove a handler registered with ``on``."""

    @abstractmethod
    def emit(self, event_type: str, event_data: Any) -> None:
        """Deliver ``event_data`` to the handlers of ``event_type``."""
