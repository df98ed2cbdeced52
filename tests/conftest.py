"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from structlog.testing import capture_logs

from adaptive_number.native import INT64_MAX, INT64_MIN

# Values around the narrow/wide boundary, in both representations
BOUNDARY_VALUES = [
    0,
    1,
    -1,
    INT64_MAX,
    INT64_MAX - 1,
    INT64_MIN,
    INT64_MIN + 1,
    INT64_MAX + 1,
    INT64_MIN - 1,
    2**64,
    -(2**64),
]


@pytest.fixture
def boundary_values() -> list[int]:
    """Return integers around the 64-bit boundary."""
    return list(BOUNDARY_VALUES)


@pytest.fixture
def log_events() -> Iterator[list[dict]]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as events:
        yield events
