"""Tests for hash algorithm domain model."""

import hashlib

import pytest

from hashmatch.domain.algorithms import (
    ALL_ALGORITHMS_ORDER,
    DEFAULT_ALGORITHM,
    HashAlgorithm,
    is_all_sentinel,
)


class TestHashAlgorithm:
    """Hash algorithm metadata helpers."""

    def test_hex_length_map(self):
        """Each algorithm exposes expected hex length."""
        assert HashAlgorithm.MD5.hex_length == 32
        assert HashAlgorithm.SHA1.hex_length == 40
        assert HashAlgorithm.SHA256.hex_length == 64
        assert HashAlgorithm.SHA384.hex_length == 96
        assert HashAlgorithm.SHA512.hex_length == 128

    def test_hex_lengths_are_distinct(self):
        lengths = [algorithm.hex_length for algorithm in HashAlgorithm]
        assert len(set(lengths)) == len(lengths)

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_hex_length_matches_hashlib(self, algorithm):
        assert len(hashlib.new(algorithm, b"").hexdigest()) == algorithm.hex_length

    def test_label_is_upper_case_name(self):
        assert HashAlgorithm.SHA256.label == "SHA256"
        assert str(HashAlgorithm.SHA256) == "sha256"

    def test_length_table(self):
        assert HashAlgorithm.length_table() == {
            "MD5": 32,
            "SHA1": 40,
            "SHA256": 64,
            "SHA384": 96,
            "SHA512": 128,
        }


class TestFromName:
    """Parsing algorithm names."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("SHA256", HashAlgorithm.SHA256),
            ("sha256", HashAlgorithm.SHA256),
            ("SHA-256", HashAlgorithm.SHA256),
            (" md5 ", HashAlgorithm.MD5),
            ("Sha1", HashAlgorithm.SHA1),
        ],
    )
    def test_accepts_common_spellings(self, name, expected):
        assert HashAlgorithm.from_name(name) is expected

    def test_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unsupported hash algorithm 'crc32'"):
            HashAlgorithm.from_name("crc32")


class TestFromHexLength:
    """Reverse lookup from digest length."""

    @pytest.mark.parametrize(
        "length, expected",
        [
            (32, HashAlgorithm.MD5),
            (40, HashAlgorithm.SHA1),
            (64, HashAlgorithm.SHA256),
            (96, HashAlgorithm.SHA384),
            (128, HashAlgorithm.SHA512),
        ],
    )
    def test_known_lengths(self, length, expected):
        assert HashAlgorithm.from_hex_length(length) is expected

    @pytest.mark.parametrize("length", [0, 31, 56, 129])
    def test_unknown_lengths(self, length):
        assert HashAlgorithm.from_hex_length(length) is None


class TestConstants:
    def test_default_is_sha512(self):
        assert DEFAULT_ALGORITHM is HashAlgorithm.SHA512

    def test_all_order_is_strongest_first(self):
        assert ALL_ALGORITHMS_ORDER == (
            HashAlgorithm.SHA512,
            HashAlgorithm.SHA384,
            HashAlgorithm.SHA256,
            HashAlgorithm.SHA1,
            HashAlgorithm.MD5,
        )

    @pytest.mark.parametrize("value", ["All", "all", "ALL", " All "])
    def test_all_sentinel_case_insensitive(self, value):
        assert is_all_sentinel(value) is True

    def test_all_sentinel_rejects_other_names(self):
        assert is_all_sentinel("sha256") is False
