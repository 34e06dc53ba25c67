"""Comparison run domain models."""

import enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .algorithms import HEX_DIGEST_PATTERN, HashAlgorithm


class Verdict(enum.StrEnum):
    """Final verdict of a comparison run."""

    MATCH = "MATCH"
    MATCH_EXPECTED = "MATCH EXPECTED"
    MISMATCH = "MISMATCH"
    MISMATCH_EXPECTED = "MISMATCH, expected"

    def render(self, expected: str | None = None) -> str:
        """Verdict line as shown to the user."""
        if self is Verdict.MISMATCH_EXPECTED:
            return f"{self.value} {expected}"
        return self.value

    @property
    def is_match(self) -> bool:
        return self in (Verdict.MATCH, Verdict.MATCH_EXPECTED)


class FileEntry(BaseModel):
    """A single input file and the digests computed for it so far."""

    path: Path = Field(description="Path of the file being compared")
    digests: dict[HashAlgorithm, str] = Field(
        default_factory=dict,
        description="Computed digests keyed by algorithm",
    )

    def digest_for(self, algorithm: HashAlgorithm) -> str | None:
        """Digest computed for ``algorithm``, or None if it never ran."""
        return self.digests.get(algorithm)


class RunConfiguration(BaseModel):
    """Validated, immutable description of one comparison run."""

    model_config = ConfigDict(frozen=True)

    files: tuple[Path, ...] = Field(description="Files to compare, in input order")
    algorithms: tuple[HashAlgorithm, ...] = Field(
        description="Algorithms to run, in resolved order",
    )
    expected_digest: str | None = Field(
        default=None,
        description="Digest every file must match, enables expected mode",
    )
    quiet: bool = Field(default=False, description="Suppress per-file digest rows")
    fast: bool = Field(default=False, description="Stop after the first match")

    @property
    def expected_mode(self) -> bool:
        return self.expected_digest is not None

    @field_validator("expected_digest")
    @classmethod
    def _normalize_expected(cls, value: str | None) -> str | None:
        # Case is preserved so the verdict echoes the value as typed.
        if value is None:
            return None
        value = value.strip()
        if not HEX_DIGEST_PATTERN.fullmatch(value):
            raise ValueError("Expected hash must be hexadecimal")
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "RunConfiguration":
        if not self.algorithms:
            raise ValueError("At least one algorithm is required")
        if len(set(self.algorithms)) != len(self.algorithms):
            raise ValueError("Algorithms must not contain duplicates")

        if self.expected_mode:
            if len(self.algorithms) != 1:
                raise ValueError("Expected mode runs exactly one algorithm")
            if len(self.files) < 1:
                raise ValueError("Expected mode requires at least one file")
            algorithm = self.algorithms[0]
            if len(self.expected_digest) != algorithm.hex_length:
                raise ValueError(
                    f"Expected hash length {len(self.expected_digest)} does not "
                    f"match {algorithm.label} ({algorithm.hex_length})"
                )
        elif len(self.files) < 2:
            raise ValueError("At least two files are required for comparison")

        return self


class AlgorithmResult(BaseModel):
    """Outcome of comparing every file under a single algorithm."""

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    matched: bool
    source_digest: str = Field(
        description="Value the other digests were compared against",
    )
    digests: tuple[tuple[Path, str], ...] = Field(
        description="(path, digest) pairs in input order",
    )


class ComparisonOutcome(BaseModel):
    """Result of a whole comparison run."""

    model_config = ConfigDict(frozen=True)

    matched: bool
    algorithm_stopped_at: HashAlgorithm = Field(
        description="Algorithm on which the run reached its decision",
    )
    expected_value: str | None = Field(
        default=None,
        description="Expected digest when the run was in expected mode",
    )
    results: tuple[AlgorithmResult, ...] = Field(default=())
    entries: tuple[FileEntry, ...] = Field(default=())

    @property
    def verdict(self) -> Verdict:
        if self.expected_value is not None:
            return Verdict.MATCH_EXPECTED if self.matched else Verdict.MISMATCH_EXPECTED
        return Verdict.MATCH if self.matched else Verdict.MISMATCH

    @property
    def algorithms_computed(self) -> tuple[HashAlgorithm, ...]:
        return tuple(result.algorithm for result in self.results)

    def render_verdict(self) -> str:
        """Verdict line including the expected value on mismatch."""
        return self.verdict.render(self.expected_value)
