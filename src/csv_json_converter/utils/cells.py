"""Conversion of JSON values into CSV cell text."""

import json
from typing import Any, List


def to_cell_text(value: Any) -> str:
    """
    Convert a JSON value into the text stored in a CSV cell.

    Strings pass through unchanged and null becomes an empty string.
    Every other value uses its compact JSON form, so booleans read
    ``true``/``false`` and nested arrays or objects are serialized
    rather than expanded into columns.

    Args:
        value: Parsed JSON value

    Returns:
        Cell text
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def to_row_text(values: List[Any]) -> List[str]:
    """Convert every value of a JSON array into cell text."""
    return [to_cell_text(value) for value in values]
