"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter
from .models import (
    AlgorithmCompletedEvent,
    BaseEvent,
    ComparisonFinishedEvent,
    ComparisonStartedEvent,
    DigestComputedEvent,
)
from .null import NullEmitter
from .subscription import Subscription, subscribe

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "NullEmitter",
    "Subscription",
    "subscribe",
    # Comparison Events
    "BaseEvent",
    "ComparisonStartedEvent",
    "DigestComputedEvent",
    "AlgorithmCompletedEvent",
    "ComparisonFinishedEvent",
]
