"""Mapper from parsed CSV tables to JSON documents."""

import logging
from typing import Any, Dict, List, Optional
from ..models import Table

POSITIONAL_KEY_PREFIX = "field"


class TableToDocumentMapper:
    """
    Mapper that turns a Table into a row-arrays or row-records document.

    Cells are never coerced: every value in the resulting document is
    the string read from the CSV input.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the table mapper.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def map(self, table: Table, array_format: bool) -> List[Any]:
        """
        Map a table into a JSON document.

        Args:
            table: Parsed table
            array_format: Produce row-arrays instead of row-records

        Returns:
            List of row arrays or list of record dictionaries
        """
        if array_format:
            document = self.to_row_arrays(table)
        elif table.headers is not None:
            document = self.to_keyed_records(table)
        else:
            document = self.to_positional_records(table)

        self.logger.info(f"Mapped {table.row_count} rows to "
                         f"{'row-arrays' if array_format else 'row-records'}")
        return document

    def to_row_arrays(self, table: Table) -> List[List[str]]:
        """Header row (when present) followed by data rows, verbatim."""
        return [list(row) for row in table.all_rows()]

    def to_keyed_records(self, table: Table) -> List[Dict[str, str]]:
        """
        Build one record per row keyed by the header at each column.

        Short rows simply lack their trailing keys and cells beyond the
        last header are dropped.
        """
        headers = table.headers or []
        records = []
        truncated = 0

        for row in table.rows:
            if len(row) > len(headers):
                truncated += 1
            records.append({header: value for header, value in zip(headers, row)})

        if truncated:
            self.logger.debug(f"Dropped extra cells from {truncated} rows longer than the header")
        return records

    def to_positional_records(self, table: Table) -> List[Dict[str, str]]:
        """Build one record per row keyed ``field0``, ``field1``, ... by column."""
        return [
            {f"{POSITIONAL_KEY_PREFIX}{index}": value for index, value in enumerate(row)}
            for row in table.rows
        ]
