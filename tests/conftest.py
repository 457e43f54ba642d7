from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from sqlrows import ResultSet

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Sample row data for testing."""
    return [
        {"id": 1, "name": "Alice", "email": "alice@example.com"},
        {"id": 2, "name": "Bob", "email": "bob@example.com"},
        {"id": 3, "name": "Charlie", "email": None},
    ]


@pytest.fixture
def result_set(sample_rows: list[dict[str, Any]]) -> ResultSet:
    """ResultSet over the sample rows."""
    return ResultSet(sample_rows, len(sample_rows))


@pytest.fixture
def empty_result_set() -> ResultSet:
    """ResultSet without rows."""
    return ResultSet([], 0)
