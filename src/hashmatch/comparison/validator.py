"""Pre-flight validation of comparison inputs."""

import os
import stat
import typing as t
from pathlib import Path

from ..domain.algorithms import HEX_DIGEST_PATTERN, is_all_sentinel
from ..domain.comparison import RunConfiguration
from ..domain.exceptions import (
    ConflictingModesError,
    HashMatchError,
    InputValidationError,
    InsufficientFilesError,
    MalformedDigestError,
    PathIsDirectoryError,
    PathNotAccessibleError,
    PathNotFoundError,
    UnsupportedAlgorithmError,
    UnsupportedDigestLengthError,
)
from ..infrastructure.logging import get_logger
from .resolver import AlgorithmResolver, AlgorithmSelection, split_selection

if t.TYPE_CHECKING:
    from loguru import Logger

PathInput = str | os.PathLike[str]


class InputValidator:
    """Checks inputs and builds the RunConfiguration for a run.

    All rules are evaluated before failing, so a single
    InputValidationError reports every problem found, in rule order:
    file count, paths, algorithm names, mode conflicts, expected digest.
    No file is read here.
    """

    def __init__(
        self,
        resolver: AlgorithmResolver | None = None,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._resolver = resolver or AlgorithmResolver()
        self._logger = logger or get_logger(__name__)

    def validate(
        self,
        files: t.Sequence[PathInput],
        algorithms: AlgorithmSelection = None,
        expected: str | None = None,
        *,
        quiet: bool = False,
        fast: bool = False,
    ) -> RunConfiguration:
        """Validate inputs and resolve them into a RunConfiguration.

        Raises:
            InputValidationError: Carrying every violation found.
        """
        paths = tuple(Path(f) for f in files)
        algorithms = split_selection(algorithms)
        if expected is not None:
            expected = expected.strip()

        errors: list[HashMatchError] = []
        errors.extend(self._check_file_count(paths, expected))
        errors.extend(self._check_paths(paths))
        errors.extend(self._check_algorithm_names(algorithms))
        errors.extend(self._check_modes(algorithms, expected))

        if errors:
            for error in errors:
                self._logger.debug(f"Validation failed: {error}")
            raise InputValidationError(errors)

        config = RunConfiguration(
            files=paths,
            algorithms=self._resolver.resolve(algorithms, expected),
            expected_digest=expected,
            quiet=quiet,
            fast=fast,
        )
        self._logger.debug(
            "Inputs validated",
            files=len(config.files),
            algorithms=[a.label for a in config.algorithms],
        )
        return config

    def _check_file_count(
        self, paths: tuple[Path, ...], expected: str | None
    ) -> list[HashMatchError]:
        required = 1 if expected is not None else 2
        if len(paths) < required:
            return [InsufficientFilesError(required=required, provided=len(paths))]
        return []

    def _check_paths(self, paths: tuple[Path, ...]) -> list[HashMatchError]:
        errors: list[HashMatchError] = []
        for path in paths:
            try:
                mode = path.stat().st_mode
            except (FileNotFoundError, NotADirectoryError):
                errors.append(PathNotFoundError(path))
                continue
            except OSError as exc:
                errors.append(PathNotAccessibleError(path, exc.strerror or str(exc)))
                continue

            if not stat.S_ISREG(mode):
                errors.append(
                    PathIsDirectoryError(path, is_directory=stat.S_ISDIR(mode))
                )
        return errors

    def _check_algorithm_names(
        self, algorithms: AlgorithmSelection
    ) -> list[HashMatchError]:
        items = split_selection(algorithms)
        # "All" overrides every other name, unknown ones included.
        if any(isinstance(i, str) and is_all_sentinel(i) for i in items):
            return []

        errors: list[HashMatchError] = []
        for item in items:
            try:
                self._resolver.parse(item)
            except UnsupportedAlgorithmError as exc:
                errors.append(exc)
        return errors

    def _check_modes(
        self, algorithms: AlgorithmSelection, expected: str | None
    ) -> list[HashMatchError]:
        if expected is None:
            return []

        errors: list[HashMatchError] = []
        if not self._resolver.is_default(algorithms):
            errors.append(ConflictingModesError())

        try:
            self._resolver.infer_from_digest(expected)
        except UnsupportedDigestLengthError as exc:
            errors.append(exc)

        if expected and not HEX_DIGEST_PATTERN.fullmatch(expected):
            errors.append(MalformedDigestError(expected))
        return errors


__all__ = [
    "InputValidator",
    "PathInput",
]
