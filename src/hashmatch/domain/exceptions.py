"""Custom exceptions for hashmatch."""

from pathlib import Path
from typing import Iterable


class HashMatchError(Exception):
    """Base exception for hashmatch errors."""

    pass


class InputValidationError(HashMatchError):
    """Raised when pre-flight validation finds one or more problems.

    Every violation found is carried in ``errors`` in the order the rules
    were checked, so callers can report them all at once.
    """

    def __init__(self, errors: Iterable[HashMatchError]) -> None:
        self.errors = list(errors)
        message = "; ".join(str(error) for error in self.errors)
        super().__init__(message or "Input validation failed")


class InsufficientFilesError(HashMatchError):
    """Raised when fewer files were supplied than the mode requires."""

    def __init__(self, *, required: int, provided: int) -> None:
        self.required = required
        self.provided = provided
        noun = "file" if required == 1 else "files"
        super().__init__(
            f"At least {required} {noun} required for comparison, got {provided}"
        )


class InvalidPathError(HashMatchError):
    """Base exception for unusable input paths."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class PathNotFoundError(InvalidPathError):
    """Raised when an input path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path not found: {path}")


class PathIsDirectoryError(InvalidPathError):
    """Raised when an input path exists but is not a regular file.

    Covers directories as well as FIFOs, sockets and device files.
    """

    def __init__(self, path: Path, *, is_directory: bool = True) -> None:
        self.is_directory = is_directory
        if is_directory:
            message = f"Path is a directory, not a file: {path}"
        else:
            message = f"Path is not a regular file: {path}"
        super().__init__(path, message)


class PathNotAccessibleError(InvalidPathError):
    """Raised when an input path cannot be inspected, e.g. permission denied."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Path not accessible: {path}: {reason}")


class UnsupportedAlgorithmError(HashMatchError):
    """Raised when an algorithm name is not in the supported set."""

    def __init__(self, *, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = list(supported)
        super().__init__(
            f"Unsupported hash algorithm '{name}', "
            f"choose from: {', '.join(self.supported)}"
        )


class ConflictingModesError(HashMatchError):
    """Raised when an expected digest is combined with explicit algorithms."""

    def __init__(self) -> None:
        super().__init__(
            "An expected hash determines its own algorithm and cannot be "
            "combined with an explicit algorithm selection"
        )


class UnsupportedDigestLengthError(HashMatchError):
    """Raised when no supported algorithm produces digests of this length."""

    def __init__(self, *, length: int, supported: dict[str, int]) -> None:
        self.length = length
        self.supported = dict(supported)
        table = ", ".join(f"{name}: {size}" for name, size in self.supported.items())
        super().__init__(
            f"Expected hash length {length} matches no supported algorithm "
            f"({table})"
        )


class MalformedDigestError(HashMatchError):
    """Raised when an expected digest contains non-hexadecimal characters."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Expected hash must be hexadecimal: {value!r}")


class HashComputationError(HashMatchError):
    """Raised when a file cannot be read while computing its digest."""

    def __init__(self, *, file_path: Path, algorithm: str, reason: str) -> None:
        self.file_path = file_path
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"Unable to compute {algorithm} for {file_path}: {reason}")
