"""Digest providers: compute the hex digest of a file."""

import hashlib
import typing as t
from abc import ABC, abstractmethod
from pathlib import Path

from ..config.settings import DEFAULT_CHUNK_SIZE
from ..domain.algorithms import HashAlgorithm
from ..domain.exceptions import HashComputationError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    from loguru import Logger


class BaseDigestProvider(ABC):
    """Abstract base class for digest computation."""

    @abstractmethod
    def digest(self, file_path: Path, algorithm: HashAlgorithm) -> str:
        """Compute the digest of a file.

        Returns:
            The digest as a lowercase hex string.

        Raises:
            HashComputationError: If the file cannot be read.
        """


class FileDigestProvider(BaseDigestProvider):
    """Hashes files with hashlib, streaming them in fixed-size chunks."""

    def __init__(
        self,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._chunk_size = chunk_size
        self._logger = logger or get_logger(__name__)

    def digest(self, file_path: Path, algorithm: HashAlgorithm) -> str:
        try:
            hasher = hashlib.new(str(algorithm))
            with file_path.open("rb") as handle:
                while chunk := handle.read(self._chunk_size):
                    hasher.update(chunk)
        except OSError as exc:
            raise HashComputationError(
                file_path=file_path,
                algorithm=algorithm.label,
                reason=exc.strerror or str(exc),
            ) from exc

        digest = hasher.hexdigest()
        self._logger.debug(
            "Digest computed",
            file=str(file_path),
            algorithm=algorithm.label,
        )
        return digest


class NullDigestProvider(BaseDigestProvider):
    """No-op provider that never touches the filesystem.

    Returns a digest of the right length made of a repeated character, so
    every file compares equal under every algorithm.
    """

    def __init__(self, fill: str = "0") -> None:
        self._fill = fill

    def digest(self, file_path: Path, algorithm: HashAlgorithm) -> str:
        return self._fill * algorithm.hex_length


__all__ = [
    "BaseDigestProvider",
    "FileDigestProvider",
    "NullDigestProvider",
]
