"""Pytest configuration and fixtures for hashmatch tests."""

import hashlib
import typing as t
from pathlib import Path

import loguru
import pytest
from typer.testing import CliRunner

from hashmatch.cli.app import create_cli_app
from hashmatch.config.settings import Environment, LogLevel, Settings
from hashmatch.domain.algorithms import HashAlgorithm
from hashmatch.events import BaseEmitter, EventEmitter
from hashmatch.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        chunk_size=1024,
    )


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    emitter = mocker.Mock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe handlers."""
    return EventEmitter(mock_logger)


@pytest.fixture
def calculate_hash():
    """Factory fixture to calculate hash for test content.

    Usage:
        def test_something(calculate_hash):
            hash_value = calculate_hash(b"content", HashAlgorithm.SHA256)
    """

    def _calculate(content: bytes, algorithm: HashAlgorithm) -> str:
        hasher = hashlib.new(algorithm)
        hasher.update(content)
        return hasher.hexdigest()

    return _calculate


@pytest.fixture
def make_file(tmp_path: Path) -> t.Callable[[str, bytes], Path]:
    """Factory fixture writing ``content`` to ``tmp_path / name``."""

    def _make(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def identical_files(make_file) -> list[Path]:
    """Two files with the same content."""
    return [
        make_file("a.bin", b"hello world"),
        make_file("b.bin", b"hello world"),
    ]


@pytest.fixture
def differing_files(make_file) -> list[Path]:
    """Two files with different content."""
    return [
        make_file("a.bin", b"hello world"),
        make_file("b.bin", b"hello there"),
    ]


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)
