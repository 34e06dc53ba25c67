"""Events emitted by ComparisonEngine during a run."""

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..domain.algorithms import HashAlgorithm
from ..domain.comparison import ComparisonOutcome


class BaseEvent(BaseModel):
    """Immutable base for all events."""

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)",
    )
    event_type: str = Field(default="base", description="Event type identifier")


class ComparisonStartedEvent(BaseEvent):
    """Emitted before the first digest of a run is computed."""

    event_type: str = Field(default="comparison.started")
    files: tuple[Path, ...] = Field(description="Files being compared")
    algorithms: tuple[HashAlgorithm, ...] = Field(description="Resolved algorithms")
    expected_digest: str | None = Field(default=None)


class DigestComputedEvent(BaseEvent):
    """Emitted for each digest row that should be shown to the user.

    ``show_header`` is True only for the first row of a run.
    """

    event_type: str = Field(default="comparison.digest_computed")
    path: Path = Field(description="File that was hashed")
    algorithm: HashAlgorithm
    digest: str = Field(description="Lowercase hex digest")
    show_header: bool = Field(default=False)


class AlgorithmCompletedEvent(BaseEvent):
    """Emitted once every file has been compared under an algorithm."""

    event_type: str = Field(default="comparison.algorithm_completed")
    algorithm: HashAlgorithm
    matched: bool


class ComparisonFinishedEvent(BaseEvent):
    """Emitted when the run reaches a verdict."""

    event_type: str = Field(default="comparison.finished")
    outcome: ComparisonOutcome
