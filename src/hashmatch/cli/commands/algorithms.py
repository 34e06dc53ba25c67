"""Algorithms command implementation."""

from ..output.report import display_algorithms


def algorithms() -> None:
    """List supported algorithms and their hex digest lengths.

    The length is what --expected uses to pick an algorithm.
    """
    display_algorithms()
