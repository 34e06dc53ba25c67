"""Multi-algorithm digest comparison.

The engine walks algorithms in resolved order and, for each one, hashes
every file before comparing. A mismatch ends the run on that algorithm;
in fast mode so does the first match. Per-file rows and the verdict are
reported through an event emitter rather than printed directly.
"""

import hmac
import typing as t

from ..domain.algorithms import HashAlgorithm
from ..domain.comparison import (
    AlgorithmResult,
    ComparisonOutcome,
    FileEntry,
    RunConfiguration,
)
from ..domain.exceptions import HashComputationError
from ..events import (
    AlgorithmCompletedEvent,
    BaseEmitter,
    ComparisonFinishedEvent,
    ComparisonStartedEvent,
    DigestComputedEvent,
    NullEmitter,
)
from ..infrastructure.logging import get_logger
from .digest import BaseDigestProvider, FileDigestProvider

if t.TYPE_CHECKING:
    import loguru


def digests_equal(left: str, right: str) -> bool:
    """Case-insensitive, constant-time comparison of two hex digests."""
    return hmac.compare_digest(left.lower(), right.lower())


class ComparisonEngine:
    """Runs a validated RunConfiguration to a ComparisonOutcome.

    Implementation Decisions:
    - Within an algorithm every file is hashed before comparing, so the
      digest table is complete even when the first file already differs
    - HashComputationError is logged and re-raised; no partial verdict
      is produced
    - The "header shown" flag lives in ``run`` and is passed on each
      DigestComputedEvent, so it never leaks between runs
    """

    def __init__(
        self,
        provider: BaseDigestProvider | None = None,
        emitter: BaseEmitter | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            provider: Digest provider used to hash files. Defaults to a
                FileDigestProvider.
            emitter: Event emitter receiving progress events. Defaults to a
                NullEmitter, which discards them.
            logger: Logger instance for diagnostics.
        """
        self._provider = provider or FileDigestProvider()
        self._emitter = emitter or NullEmitter()
        self._logger = logger or get_logger(__name__)

    @property
    def emitter(self) -> BaseEmitter:
        """Event emitter for broadcasting comparison events."""
        return self._emitter

    def run(self, config: RunConfiguration) -> ComparisonOutcome:
        """Compare the configured files under each algorithm in turn.

        Raises:
            HashComputationError: If any file cannot be hashed.
        """
        entries = tuple(FileEntry(path=path) for path in config.files)
        results: list[AlgorithmResult] = []
        header_pending = True

        self._emitter.emit(
            "comparison.started",
            ComparisonStartedEvent(
                files=config.files,
                algorithms=config.algorithms,
                expected_digest=config.expected_digest,
            ),
        )

        for algorithm in config.algorithms:
            for entry in entries:
                digest = self._hash(entry, algorithm)
                if not config.quiet:
                    self._emitter.emit(
                        "comparison.digest_computed",
                        DigestComputedEvent(
                            path=entry.path,
                            algorithm=algorithm,
                            digest=digest,
                            show_header=header_pending,
                        ),
                    )
                    header_pending = False

            result = self._compare(algorithm, entries, config.expected_digest)
            results.append(result)
            self._emitter.emit(
                "comparison.algorithm_completed",
                AlgorithmCompletedEvent(algorithm=algorithm, matched=result.matched),
            )
            self._logger.debug(
                "Algorithm compared",
                algorithm=algorithm.label,
                matched=result.matched,
            )

            if not result.matched:
                break
            if config.fast:
                self._logger.debug(f"Fast mode: stopping after {algorithm.label}")
                break

        last = results[-1]
        outcome = ComparisonOutcome(
            matched=last.matched,
            algorithm_stopped_at=last.algorithm,
            expected_value=config.expected_digest,
            results=tuple(results),
            entries=entries,
        )
        self._emitter.emit("comparison.finished", ComparisonFinishedEvent(outcome=outcome))
        return outcome

    def _hash(self, entry: FileEntry, algorithm: HashAlgorithm) -> str:
        try:
            digest = self._provider.digest(entry.path, algorithm).lower()
        except HashComputationError as exc:
            self._logger.error(f"Hashing aborted: {exc}")
            raise
        entry.digests[algorithm] = digest
        return digest

    def _compare(
        self,
        algorithm: HashAlgorithm,
        entries: tuple[FileEntry, ...],
        expected: str | None,
    ) -> AlgorithmResult:
        digests = [(entry.path, entry.digests[algorithm]) for entry in entries]

        if expected is not None:
            source = expected
            compare_set = [digest for _, digest in digests]
        else:
            source = digests[0][1]
            compare_set = [digest for _, digest in digests[1:]]

        # Evaluate every digest so timing does not reveal the mismatch position.
        outcomes = [digests_equal(source, digest) for digest in compare_set]

        return AlgorithmResult(
            algorithm=algorithm,
            matched=all(outcomes),
            source_digest=source,
            digests=tuple(digests),
        )


__all__ = [
    "ComparisonEngine",
    "digests_equal",
]
