"""Pytest configuration for the buzz test suite."""

from __future__ import annotations

import pytest
from loguru import logger

from buzz.core.exceptions import error_tracker


@pytest.fixture(autouse=True)
def _reset_logging_and_tracking():
    """Drop sinks installed by a test and clear the global error tracker."""

    yield
    logger.remove()
    error_tracker.reset()


@pytest.fixture
def log_records() -> list[dict]:
    """Collect loguru records emitted during the test."""

    records: list[dict] = []
    logger.remove()
    logger.add(lambda message: records.append(message.record), level="DEBUG")
    return records
