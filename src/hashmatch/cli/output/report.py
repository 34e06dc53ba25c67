"""Console rendering of digest rows, verdicts and diagnostics."""

import typing as t

import typer

from ...domain.algorithms import HashAlgorithm
from ...domain.comparison import ComparisonOutcome
from ...domain.exceptions import HashMatchError, InputValidationError
from ...events import BaseEmitter, DigestComputedEvent, Subscription, subscribe

# Wide enough for the column title and the longest label.
_ALGORITHM_WIDTH: t.Final = max(len("Algorithm"), *(len(a.label) for a in HashAlgorithm))


def format_header(digest_width: int) -> list[str]:
    """Header lines printed above the first digest row."""
    title = f"{'Algorithm':<{_ALGORITHM_WIDTH}}  {'Hash':<{digest_width}}  Path"
    rule = f"{'-' * _ALGORITHM_WIDTH}  {'-' * digest_width}  ----"
    return [title, rule]


def format_row(event: DigestComputedEvent) -> str:
    """Compact row for a single file digest."""
    return f"{event.algorithm.label:<{_ALGORITHM_WIDTH}}  {event.digest}  {event.path}"


def display_digest_row(event: DigestComputedEvent) -> None:
    """Print a digest row, preceded by the header when the event asks for it."""
    if event.show_header:
        for line in format_header(len(event.digest)):
            typer.secho(line, bold=True)
    typer.echo(format_row(event))


def display_verdict(outcome: ComparisonOutcome) -> None:
    """Print the final MATCH / MISMATCH line."""
    color = typer.colors.GREEN if outcome.verdict.is_match else typer.colors.RED
    typer.secho(outcome.render_verdict(), fg=color, bold=True)


def display_error(error: HashMatchError) -> None:
    """Print a diagnostic, expanding aggregated validation errors."""
    errors = error.errors if isinstance(error, InputValidationError) else [error]
    for item in errors:
        typer.secho(f"✗ {item}", fg=typer.colors.RED, err=True)


def display_algorithms() -> None:
    """Print the supported algorithms with their digest lengths."""
    for label, length in HashAlgorithm.length_table().items():
        typer.echo(f"{label:<{_ALGORITHM_WIDTH}}  {length}")


class ResultReporter:
    """Subscribes to engine events and renders them to the console."""

    def __init__(self, emitter: BaseEmitter) -> None:
        self._subscription: Subscription | None = subscribe(
            emitter, "comparison.digest_computed", display_digest_row
        )

    def report(self, outcome: ComparisonOutcome) -> None:
        display_verdict(outcome)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
