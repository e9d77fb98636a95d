"""Table model implementation."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Table:
    """
    Ordered rows of string fields with an optional header row.

    The header is kept apart from the data rows so that both mapping
    directions can decide independently whether to emit it.
    """

    headers: Optional[List[str]] = None
    rows: List[List[str]] = field(default_factory=list)

    def __post_init__(self):
        """Validate table after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate table integrity."""
        if self.headers is not None:
            if not isinstance(self.headers, list):
                raise ValueError("headers must be a list")
            if not all(isinstance(header, str) for header in self.headers):
                raise ValueError("headers must contain only strings")

        if not isinstance(self.rows, list):
            raise ValueError("rows must be a list")

        for index, row in enumerate(self.rows):
            if not isinstance(row, list):
                raise ValueError(f"row {index} must be a list")
            if not all(isinstance(cell, str) for cell in row):
                raise ValueError(f"row {index} must contain only strings")

    @property
    def has_headers(self) -> bool:
        """Check if the table carries a header row."""
        return self.headers is not None

    @property
    def row_count(self) -> int:
        """Number of data rows (the header row is not counted)."""
        return len(self.rows)

    def is_empty(self) -> bool:
        """Check if the table has neither a header nor data rows."""
        return self.headers is None and not self.rows

    def all_rows(self) -> List[List[str]]:
        """Header row (when present) followed by every data row."""
        if self.headers is None:
            return list(self.rows)
        return [self.headers] + self.rows
