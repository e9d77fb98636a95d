"""CSV writer for converted tables."""

import csv
import io
import logging
from typing import BinaryIO, List, Optional, TextIO
from ..models import Table, JSONToCSVOptions
from ..types import ConversionError, ErrorType, QuoteStyle
from .streams import text_writer

LINE_TERMINATOR = "\n"

_QUOTING = {
    QuoteStyle.ALWAYS: csv.QUOTE_ALL,
    QuoteStyle.NECESSARY: csv.QUOTE_MINIMAL,
}


class CSVWriter:
    """
    Writer that encodes a Table as delimited text.

    Handles the quoting policy and the explicit flush that must succeed
    before a conversion is reported as done.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the CSV writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write(self, stream: BinaryIO, table: Table, options: JSONToCSVOptions) -> int:
        """
        Write a table to a byte stream.

        The header row is written first when the table has one. Embedded
        quotes are doubled under both quoting policies.

        Args:
            stream: Writable byte stream
            table: Table to write
            options: JSON to CSV options

        Returns:
            Number of data rows written

        Raises:
            ConversionError: If writing or flushing fails
        """
        try:
            with text_writer(stream) as text:
                writer = csv.writer(
                    text,
                    delimiter=options.delimiter,
                    quotechar='"',
                    doublequote=True,
                    quoting=_QUOTING[options.quote_style],
                    lineterminator=LINE_TERMINATOR
                )

                if table.headers is not None:
                    self._write_row(text, writer, table.headers, options)
                for row in table.rows:
                    self._write_row(text, writer, row, options)

                text.flush()
            stream.flush()

        except (OSError, csv.Error) as e:
            raise ConversionError(
                f"Failed to write CSV output: {e}",
                ErrorType.IO,
                context={"rows": table.row_count}
            )

        self.logger.info(f"Wrote {table.row_count} CSV rows "
                         f"(quote style: {options.quote_style.value})")
        return table.row_count

    def _write_row(self, text: TextIO, writer, row: List[str], options: JSONToCSVOptions) -> None:
        """
        Write one row, quoting fields that hold a bare carriage return.

        ``csv`` only treats characters of the line terminator as special
        under minimal quoting, so rows containing ``\\r`` are formatted
        against a ``\\r\\n`` terminator and then re-terminated with ``\\n``.
        """
        if options.quote_style != QuoteStyle.NECESSARY or not any("\r" in field for field in row):
            writer.writerow(row)
            return

        buffer = io.StringIO()
        csv.writer(
            buffer,
            delimiter=options.delimiter,
            quotechar='"',
            doublequote=True,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\r\n"
        ).writerow(row)
        text.write(buffer.getvalue()[:-2] + LINE_TERMINATOR)
