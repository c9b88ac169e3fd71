from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger


@pytest.fixture
def sample_info() -> dict[str, Any]:
    return {
        "arguments": ["_id"],
        "record_type": "note",
        "nested": {"retry_after": 3},
    }


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Collect loguru records emitted by the ``skygear`` package."""
    records: list[dict[str, Any]] = []
    logger.enable("skygear")
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(sink_id)
        logger.disable("skygear")
