"""Compare command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ...domain.comparison import ComparisonOutcome
from ...domain.exceptions import HashMatchError
from ...events import EventEmitter
from ...infrastructure.logging import get_logger
from ..output.report import ResultReporter, display_error
from ..state import CLIState

EXIT_MISMATCH = 1
EXIT_ERROR = 2


def run_comparison(
    state: CLIState,
    files: list[Path],
    algorithms: list[str] | None,
    expected: str | None,
    *,
    quiet: bool,
    fast: bool,
) -> ComparisonOutcome:
    """Validate inputs and run the engine with console reporting wired in.

    Raises:
        typer.Exit: On validation or hashing errors, after printing them.
    """
    emitter = EventEmitter(get_logger(__name__))
    reporter = ResultReporter(emitter)
    try:
        config = state.create_validator().validate(
            files, algorithms, expected, quiet=quiet, fast=fast
        )
        outcome = state.create_engine(emitter=emitter).run(config)
    except HashMatchError as e:
        display_error(e)
        raise typer.Exit(code=EXIT_ERROR)
    finally:
        reporter.close()

    reporter.report(outcome)
    return outcome


def compare(
    ctx: typer.Context,
    files: Optional[list[Path]] = typer.Argument(
        None,
        help="Files to compare (two or more, or one with --expected)",
        show_default=False,
    ),
    algorithm: Optional[list[str]] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Algorithm(s): MD5, SHA1, SHA256, SHA384, SHA512 or All. "
        "Repeat or comma-separate. [default: SHA512]",
    ),
    expected: Optional[str] = typer.Option(
        None,
        "--expected",
        "-e",
        help="Expected hex digest; its length selects the algorithm",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print the verdict"
    ),
    fast: bool = typer.Option(
        False, "--fast", "-f", help="Stop after the first algorithm that matches"
    ),
) -> None:
    """Compare file digests with each other or with an expected hash.

    Exit code is 0 on MATCH, 1 on MISMATCH and 2 on invalid input or
    read errors.

    Examples:
        hashmatch compare a.iso b.iso
        hashmatch compare a.iso b.iso -a sha256,md5 --fast
        hashmatch compare a.iso -a All
        hashmatch compare a.iso --expected d41d8cd98f00b204e9800998ecf8427e
    """
    state: CLIState = ctx.obj

    outcome = run_comparison(
        state, files or [], algorithm, expected, quiet=quiet, fast=fast
    )
    if not outcome.matched:
        raise typer.Exit(code=EXIT_MISMATCH)
