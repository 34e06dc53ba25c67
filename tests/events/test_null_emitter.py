"""Tests for NullEmitter implementation."""

from typing import Any

import pytest

from hashmatch.comparison.digest import FileDigestProvider
from hashmatch.comparison.engine import ComparisonEngine
from hashmatch.domain.algorithms import HashAlgorithm
from hashmatch.domain.comparison import RunConfiguration
from hashmatch.events import BaseEmitter, NullEmitter, subscribe


@pytest.fixture
def null_emitter():
    """Provide a NullEmitter instance for testing."""
    return NullEmitter()


class TestNullEmitter:
    """Test NullEmitter implementation."""

    def test_null_emitter_implements_base_emitter(self, null_emitter):
        assert isinstance(null_emitter, BaseEmitter)

    def test_all_methods_do_nothing_without_error(self, null_emitter):
        received = []

        def handler(event: Any) -> None:
            received.append(event)

        null_emitter.on("event", handler)
        null_emitter.emit("event", {"data": "test"})
        null_emitter.off("event", handler)

        assert received == []

    def test_comparison_events_reach_no_subscriber(
        self, null_emitter, mock_logger, identical_files
    ):
        rows = []
        subscription = subscribe(
            null_emitter, "comparison.digest_computed", rows.append
        )
        engine = ComparisonEngine(
            provider=FileDigestProvider(logger=mock_logger), emitter=null_emitter
        )

        outcome = engine.run(
            RunConfiguration(
                files=tuple(identical_files), algorithms=(HashAlgorithm.MD5,)
            )
        )

        assert outcome.matched is True
        assert rows == []
        subscription.unsubscribe()
        assert subscription.is_active is False
