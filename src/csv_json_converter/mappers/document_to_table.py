"""Mapper from JSON documents to CSV tables."""

import logging
from typing import Any, Dict, List, Optional
from ..models import Table
from ..parser import DocumentParser
from ..types import DocumentShape, ConversionError, ErrorType
from ..utils.cells import to_cell_text, to_row_text
from ..utils.headers import compute_header_union


class DocumentToTableMapper:
    """
    Mapper that flattens a JSON document into a Table.

    Row-arrays documents become header-less tables with each inner array
    as a row. Row-records documents get the ordered union of their keys
    as the header, with missing keys and nulls written as empty cells.
    """

    def __init__(self, parser: Optional[DocumentParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the document mapper.

        Args:
            parser: Optional DocumentParser used for shape detection
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or DocumentParser(self.logger)

    def map(self, document: Any, shape: Optional[DocumentShape] = None) -> Table:
        """
        Map a parsed document into a table.

        Args:
            document: Parsed JSON value
            shape: Shape already detected by the parser, if any

        Returns:
            Table ready for the CSV writer

        Raises:
            ConversionError: If the document shape is invalid
        """
        if shape is None:
            shape = self.parser.detect_shape(document)

        if shape == DocumentShape.EMPTY:
            return Table()
        elif shape == DocumentShape.ROW_ARRAYS:
            return self.from_row_arrays(document)
        else:
            return self.from_row_records(document)

    def from_row_arrays(self, document: List[Any]) -> Table:
        """
        Convert every inner array into a row of cell text.

        Raises:
            ConversionError: If any element is not an array
        """
        rows = []
        for index, row in enumerate(document):
            if not isinstance(row, list):
                raise ConversionError(
                    f"Row {index} is not an array",
                    ErrorType.SHAPE,
                    context={"row": index, "type": type(row).__name__}
                )
            rows.append(to_row_text(row))

        return Table(headers=None, rows=rows)

    def from_row_records(self, document: List[Any]) -> Table:
        """
        Convert records into rows following the header union order.

        Elements that are not objects contribute no row; each one is
        logged as a warning.
        """
        headers = compute_header_union(document)
        rows = []

        for index, record in enumerate(document):
            if not isinstance(record, dict):
                self.logger.warning(f"Skipping element {index}: expected an object, "
                                    f"got {type(record).__name__}")
                continue
            rows.append(self._record_to_row(record, headers))

        self.logger.debug(f"Header union: {headers}")
        return Table(headers=headers, rows=rows)

    def _record_to_row(self, record: Dict[str, Any], headers: List[str]) -> List[str]:
        return [to_cell_text(record[key]) if key in record else "" for key in headers]
