"""Console output helpers."""

from .report import (
    ResultReporter,
    display_algorithms,
    display_digest_row,
    display_error,
    display_verdict,
)

__all__ = [
    "ResultReporter",
    "display_algorithms",
    "display_digest_row",
    "display_error",
    "display_verdict",
]
