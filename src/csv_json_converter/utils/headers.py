"""Header union computation for heterogeneous records."""

from typing import Any, Dict, Iterable, List


def compute_header_union(records: Iterable[Any]) -> List[str]:
    """
    Build the ordered union of keys across records.

    Keys of the first record come first in their own order, then
    keys first seen in later records are appended as they are met.
    Elements that are not dictionaries contribute nothing.

    Args:
        records: Sequence of parsed JSON values

    Returns:
        List of unique keys in first-encountered order
    """
    headers: List[str] = []
    seen: Dict[str, None] = {}

    for record in records:
        if not isinstance(record, dict):
            continue
        for key in record:
            if key not in seen:
                seen[key] = None
                headers.append(key)

    return headers
