"""Domain layer - core models and exceptions."""

from .algorithms import (
    ALL_ALGORITHMS_ORDER,
    ALL_ALGORITHMS_SENTINEL,
    DEFAULT_ALGORITHM,
    HashAlgorithm,
)
from .comparison import (
    AlgorithmResult,
    ComparisonOutcome,
    FileEntry,
    RunConfiguration,
    Verdict,
)
from .exceptions import (
    ConflictingModesError,
    HashComputationError,
    HashMatchError,
    InputValidationError,
    InsufficientFilesError,
    InvalidPathError,
    MalformedDigestError,
    PathIsDirectoryError,
    PathNotAccessibleError,
    PathNotFoundError,
    UnsupportedAlgorithmError,
    UnsupportedDigestLengthError,
)

__all__ = [
    # Algorithms
    "ALL_ALGORITHMS_ORDER",
    "ALL_ALGORITHMS_SENTINEL",
    "DEFAULT_ALGORITHM",
    "HashAlgorithm",
    # Comparison Models
    "AlgorithmResult",
    "ComparisonOutcome",
    "FileEntry",
    "RunConfiguration",
    "Verdict",
    # Exceptions
    "ConflictingModesError",
    "HashComputationError",
    "HashMatchError",
    "InputValidationError",
    "InsufficientFilesError",
    "InvalidPathError",
    "MalformedDigestError",
    "PathIsDirectoryError",
    "PathNotAccessibleError",
    "PathNotFoundError",
    "UnsupportedAlgorithmError",
    "UnsupportedDigestLengthError",
]
