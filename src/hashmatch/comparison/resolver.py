"""Turn a user's algorithm selection into the concrete algorithms to run."""

import typing as t

from ..domain.algorithms import (
    ALL_ALGORITHMS_ORDER,
    DEFAULT_ALGORITHM,
    HashAlgorithm,
    is_all_sentinel,
)
from ..domain.exceptions import (
    UnsupportedAlgorithmError,
    UnsupportedDigestLengthError,
)

AlgorithmSelection = t.Iterable[str | HashAlgorithm] | None


def split_selection(selection: AlgorithmSelection) -> list[str | HashAlgorithm]:
    """Flatten a selection, splitting comma-separated names.

    Blank items are dropped, so ``["sha1,", " md5"]`` yields two names.
    """
    items: list[str | HashAlgorithm] = []
    for item in selection or ():
        if isinstance(item, HashAlgorithm):
            items.append(item)
            continue
        items.extend(part.strip() for part in item.split(",") if part.strip())
    return items


class AlgorithmResolver:
    """Expands selections and infers algorithms from expected digests.

    Resolution rules:
    - nothing selected resolves to SHA512
    - "All" anywhere in the selection resolves to every algorithm,
      strongest first
    - otherwise the named algorithms, de-duplicated in first-seen order
    - with an expected digest, the single algorithm whose digest length
      matches it
    """

    def resolve(
        self,
        selection: AlgorithmSelection = None,
        expected: str | None = None,
    ) -> tuple[HashAlgorithm, ...]:
        """Resolve the ordered algorithms for a run.

        Raises:
            UnsupportedAlgorithmError: If a selected name is unknown.
            UnsupportedDigestLengthError: If ``expected`` matches no algorithm.
        """
        if expected is not None:
            return (self.infer_from_digest(expected),)
        return self.expand(selection)

    def expand(self, selection: AlgorithmSelection) -> tuple[HashAlgorithm, ...]:
        """Expand an explicit selection without regard to expected mode."""
        items = split_selection(selection)
        if not items:
            return (DEFAULT_ALGORITHM,)

        if any(isinstance(item, str) and is_all_sentinel(item) for item in items):
            return ALL_ALGORITHMS_ORDER

        resolved: list[HashAlgorithm] = []
        for item in items:
            algorithm = self.parse(item)
            if algorithm not in resolved:
                resolved.append(algorithm)
        return tuple(resolved)

    def parse(self, item: str | HashAlgorithm) -> HashAlgorithm:
        """Parse a single algorithm name."""
        if isinstance(item, HashAlgorithm):
            return item
        try:
            return HashAlgorithm.from_name(item)
        except ValueError as exc:
            raise UnsupportedAlgorithmError(
                name=item,
                supported=[a.label for a in ALL_ALGORITHMS_ORDER],
            ) from exc

    def infer_from_digest(self, expected: str) -> HashAlgorithm:
        """Identify the algorithm from the length of an expected digest."""
        length = len(expected.strip())
        algorithm = HashAlgorithm.from_hex_length(length)
        if algorithm is None:
            raise UnsupportedDigestLengthError(
                length=length,
                supported=HashAlgorithm.length_table(),
            )
        return algorithm

    def is_default(self, selection: AlgorithmSelection) -> bool:
        """True if the selection resolves to the default algorithm set.

        Unknown names count as an explicit, non-default selection.
        """
        try:
            return self.expand(selection) == (DEFAULT_ALGORITHM,)
        except UnsupportedAlgorithmError:
            return False


__all__ = [
    "AlgorithmResolver",
    "AlgorithmSelection",
    "split_selection",
]
