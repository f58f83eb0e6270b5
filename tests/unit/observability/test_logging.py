"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from breaker_commons.observability.logging import JsonLoggerFactory
from breaker_commons.resilience.circuit_breaker import FailureClassifier


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self, restore_root_logger: None) -> None:
        handler = JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.handlers == [handler]
        assert root.level == logging.WARNING
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_stdlib_records_rendered_as_json(self, restore_root_logger: None) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, handler=logging.StreamHandler(stream))

        classifier = FailureClassifier(name="orders")
        classifier.frequency = 5

        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "failure_classifier.reconfigured name=orders frequency=5"
        assert payload["level"] == "info"
        assert payload["logger"] == "breaker_commons.resilience.circuit_breaker.classifier"
        assert "timestamp" in payload
