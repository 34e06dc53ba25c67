"""Hash algorithm domain model."""

import enum
import re
import typing as t

ALL_ALGORITHMS_SENTINEL: t.Final = "All"

# ASCII hex only; use with fullmatch.
HEX_DIGEST_PATTERN: t.Final = re.compile(r"[0-9a-fA-F]+")


class HashAlgorithm(enum.StrEnum):
    """Supported digest algorithms.

    Values are the names ``hashlib.new`` accepts. Each algorithm has a
    distinct hex digest length, which is what lets an expected digest
    identify its own algorithm.
    """

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def hex_length(self) -> int:
        """Expected hexadecimal string length for the algorithm."""
        return _HEX_LENGTHS[self]

    @property
    def label(self) -> str:
        """Display name used in tables and diagnostics."""
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Parse an algorithm name case-insensitively.

        Accepts ``SHA256``, ``sha256`` and ``SHA-256`` alike.

        Raises:
            ValueError: If the name is not a supported algorithm.
        """
        normalized = name.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unsupported hash algorithm '{name.strip()}'") from exc

    @classmethod
    def from_hex_length(cls, length: int) -> "HashAlgorithm | None":
        """Return the algorithm producing digests of ``length`` hex chars."""
        for algorithm, hex_length in _HEX_LENGTHS.items():
            if hex_length == length:
                return algorithm
        return None

    @classmethod
    def length_table(cls) -> dict[str, int]:
        """Mapping of algorithm label to hex digest length."""
        return {algorithm.label: algorithm.hex_length for algorithm in cls}


_HEX_LENGTHS: t.Final[dict[HashAlgorithm, int]] = {
    HashAlgorithm.MD5: 32,
    HashAlgorithm.SHA1: 40,
    HashAlgorithm.SHA256: 64,
    HashAlgorithm.SHA384: 96,
    HashAlgorithm.SHA512: 128,
}

DEFAULT_ALGORITHM: t.Final = HashAlgorithm.SHA512

# Strongest first.
ALL_ALGORITHMS_ORDER: t.Final[tuple[HashAlgorithm, ...]] = (
    HashAlgorithm.SHA512,
    HashAlgorithm.SHA384,
    HashAlgorithm.SHA256,
    HashAlgorithm.SHA1,
    HashAlgorithm.MD5,
)


def is_all_sentinel(name: str) -> bool:
    """True when ``name`` is the "All" shorthand, in any case."""
    return name.strip().lower() == ALL_ALGORITHMS_SENTINEL.lower()
