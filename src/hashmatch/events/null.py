"""Emitter used when nobody observes a comparison run."""

from typing import Any

from .base import BaseEmitter, Handler


class NullEmitter(BaseEmitter):
    """Discards comparison events.

    Default for ComparisonEngine and ``compare_files`` when no emitter is
    injected, so library callers get the outcome without digest rows being
    rendered anywhere.
    """

    def on(self, event_type: str, handler: Handler) -> None:
        pass

    def off(self, event_type: str, handler: Handler) -> None:
        pass

    def emit(self, event_type: str, event_data: Any) -> None:
        pass
