"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from io import BytesIO
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_csv_bytes():
    """Sample rectangular CSV with a header row."""
    return b"id,name,city\n1,Alice,New York\n2,Bob,San Francisco\n3,Carol,Austin\n"


@pytest.fixture
def sample_records():
    """Sample heterogeneous records for JSON to CSV tests."""
    return [
        {"name": "Alice", "age": "30"},
        {"name": "Bob", "city": "NYC"},
    ]


@pytest.fixture
def sample_typed_records():
    """Records holding every JSON value type."""
    return [
        {"id": 1, "active": True, "score": 9.5, "note": None,
         "tags": ["a", "b"], "meta": {"k": "v"}, "name": "Alice"},
        {"id": 2, "active": False, "score": 7, "name": "Bob"},
    ]


@pytest.fixture
def json_stream():
    """Build a readable byte stream holding a JSON document."""
    def _make(document) -> BytesIO:
        return BytesIO(json.dumps(document).encode("utf-8"))
    return _make
