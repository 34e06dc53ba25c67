"""hashmatch - compare file digests across one or more hash algorithms."""

from .compare import compare_files
from .comparison import (
    AlgorithmResolver,
    ComparisonEngine,
    FileDigestProvider,
    InputValidator,
)
from .domain import ComparisonOutcome, HashAlgorithm, RunConfiguration, Verdict

__all__ = [
    "compare_files",
    "AlgorithmResolver",
    "ComparisonEngine",
    "FileDigestProvider",
    "InputValidator",
    "ComparisonOutcome",
    "HashAlgorithm",
    "RunConfiguration",
    "Verdict",
]
