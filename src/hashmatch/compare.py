"""Library entrypoint: validate, resolve and run a comparison in one call."""

import typing as t

from .comparison import (
    BaseDigestProvider,
    ComparisonEngine,
    InputValidator,
)
from .comparison.resolver import AlgorithmSelection
from .comparison.validator import PathInput
from .domain.comparison import ComparisonOutcome
from .events import BaseEmitter

if t.TYPE_CHECKING:
    import loguru


def compare_files(
    files: t.Sequence[PathInput],
    algorithms: AlgorithmSelection = None,
    expected: str | None = None,
    *,
    quiet: bool = False,
    fast: bool = False,
    provider: BaseDigestProvider | None = None,
    emitter: BaseEmitter | None = None,
    logger: t.Optional["loguru.Logger"] = None,
) -> ComparisonOutcome:
    """Compare file digests with each other or with an expected digest.

    Example:
        outcome = compare_files(["a.iso", "b.iso"], algorithms=["sha256", "md5"])
        if outcome.matched:
            ...

    Raises:
        InputValidationError: If inputs are invalid; nothing is hashed.
        HashComputationError: If a file becomes unreadable mid-run.
    """
    config = InputValidator(logger=logger).validate(
        files,
        algorithms,
        expected,
        quiet=quiet,
        fast=fast,
    )
    engine = ComparisonEngine(provider=provider, emitter=emitter, logger=logger)
    return engine.run(config)
