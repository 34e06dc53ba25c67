"""Handle returned when subscribing to an emitter."""

from .base import BaseEmitter, Handler


class Subscription:
    """Represents one handler registration that can be undone once."""

    def __init__(
        self,
        emitter: BaseEmitter,
        event_type: str,
        handler: Handler,
    ) -> None:
        self._emitter = emitter
        self._event_type = event_type
        self._handler = handler
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Remove the handler. Safe to call more than once."""
        if not self._active:
            return
        self._emitter.off(self._event_type, self._handler)
        self._active = False


def subscribe(
    emitter: BaseEmitter,
    event_type: str,
    handler: Handler,
) -> Subscription:
    """Register ``handler`` and return a Subscription for it."""
    emitter.on(event_type, handler)
    return Subscription(emitter, event_type, handler)
