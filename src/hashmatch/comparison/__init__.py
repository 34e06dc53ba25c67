"""Comparison layer - validation, algorithm resolution and the engine."""

from .digest import BaseDigestProvider, FileDigestProvider, NullDigestProvider
from .engine import ComparisonEngine, digests_equal
from .resolver import AlgorithmResolver, AlgorithmSelection, split_selection
from .validator import InputValidator, PathInput

__all__ = [
    # Digest Providers
    "BaseDigestProvider",
    "FileDigestProvider",
    "NullDigestProvider",
    # Resolution and Validation
    "AlgorithmResolver",
    "AlgorithmSelection",
    "InputValidator",
    "PathInput",
    "split_selection",
    # Engine
    "ComparisonEngine",
    "digests_equal",
]
