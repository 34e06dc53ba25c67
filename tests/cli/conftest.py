"""Shared fixtures for CLI tests."""

import pytest

from hashmatch.cli.app import create_cli_app
from hashmatch.cli.state import CLIState
from hashmatch.comparison import ComparisonEngine, NullDigestProvider


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()


@pytest.fixture
def cli_state_with_null_provider(test_settings, mock_logger):
    """CLIState whose engines never read files."""

    def null_engine_factory(*, emitter):
        return ComparisonEngine(
            provider=NullDigestProvider(), emitter=emitter, logger=mock_logger
        )

    return CLIState(test_settings, engine_factory=null_engine_factory)


@pytest.fixture
def app_with_null_provider(cli_state_with_null_provider):
    """CLI app with a null digest provider injected through state."""
    return create_cli_app(state=cli_state_with_null_provider)
