"""Tests for digest providers."""

from pathlib import Path

import pytest

from hashmatch.comparison.digest import FileDigestProvider, NullDigestProvider
from hashmatch.domain.algorithms import HashAlgorithm
from hashmatch.domain.exceptions import HashComputationError


class TestFileDigestProvider:
    """Hashing real files."""

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_matches_hashlib(self, make_file, calculate_hash, mock_logger, algorithm):
        content = b"hello world" * 1000
        path = make_file("file.bin", content)
        provider = FileDigestProvider(chunk_size=7, logger=mock_logger)

        assert provider.digest(path, algorithm) == calculate_hash(content, algorithm)

    def test_known_md5_of_empty_file(self, make_file, mock_logger):
        path = make_file("empty.bin", b"")
        provider = FileDigestProvider(logger=mock_logger)

        digest = provider.digest(path, HashAlgorithm.MD5)

        assert digest == "d41d8cd98f00b204e9800998ecf8427e"

    def test_logs_debug_on_success(self, make_file, mock_logger):
        path = make_file("file.bin", b"x")
        FileDigestProvider(logger=mock_logger).digest(path, HashAlgorithm.SHA1)

        mock_logger.debug.assert_called_once()

    def test_missing_file_raises_hash_computation_error(self, tmp_path, mock_logger):
        missing = tmp_path / "gone.bin"
        provider = FileDigestProvider(logger=mock_logger)

        with pytest.raises(HashComputationError) as exc:
            provider.digest(missing, HashAlgorithm.SHA256)

        assert exc.value.file_path == missing
        assert exc.value.algorithm == "SHA256"
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_read_error_raises_hash_computation_error(self, mocker, mock_logger):
        mocker.patch.object(Path, "open", side_effect=PermissionError(13, "Permission denied"))
        provider = FileDigestProvider(logger=mock_logger)

        with pytest.raises(HashComputationError, match="Permission denied"):
            provider.digest(Path("locked.bin"), HashAlgorithm.MD5)


class TestNullDigestProvider:
    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_returns_fill_of_correct_length(self, algorithm):
        digest = NullDigestProvider().digest(Path("never-read"), algorithm)
        assert digest == "0" * algorithm.hex_length
