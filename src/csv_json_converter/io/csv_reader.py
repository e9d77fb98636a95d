"""CSV reader producing in-memory tables."""

import csv
import logging
import sys
from typing import BinaryIO, List, Optional
from ..models import Table, CSVToJSONOptions
from ..types import ConversionError, ErrorType
from .streams import text_reader

# Lifts csv's default limit of 131072 characters per field.
FIELD_SIZE_LIMIT = min(sys.maxsize, 2 ** 31 - 1)


class CSVReader:
    """
    Reader that decodes a delimited-text byte stream into a Table.

    Uses a strict dialect so unbalanced quoting aborts the whole read
    instead of producing a partially parsed table.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the CSV reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        csv.field_size_limit(FIELD_SIZE_LIMIT)

    def read(self, stream: BinaryIO, options: CSVToJSONOptions) -> Table:
        """
        Read every row from a CSV byte stream.

        The first row becomes the header when ``options.has_headers`` is
        set. Rows are kept at whatever length they were written with and
        blank lines are skipped.

        Args:
            stream: Readable byte stream
            options: CSV to JSON options

        Returns:
            Table with optional headers and data rows

        Raises:
            ConversionError: If the stream cannot be read or decoded
        """
        headers: Optional[List[str]] = None
        rows: List[List[str]] = []
        reader = None

        try:
            with text_reader(stream) as text:
                reader = csv.reader(text, delimiter=options.delimiter, strict=True)

                for record in reader:
                    if not record:
                        continue

                    if options.trim:
                        record = [field.strip() for field in record]

                    if options.has_headers and headers is None:
                        headers = record
                    else:
                        rows.append(record)

        except csv.Error as e:
            line = reader.line_num if reader is not None else 0
            raise ConversionError(
                f"CSV parsing failed at line {line}: {e}",
                ErrorType.DECODE,
                context={"line": line}
            )
        except UnicodeDecodeError as e:
            raise ConversionError(
                f"CSV input is not valid UTF-8: {e}",
                ErrorType.DECODE
            )
        except OSError as e:
            raise ConversionError(
                f"Failed to read CSV input: {e}",
                ErrorType.IO
            )

        if headers is not None:
            self.logger.info(f"Read {len(rows)} CSV rows with {len(headers)} headers")
        else:
            self.logger.info(f"Read {len(rows)} CSV rows without headers")
        return Table(headers=headers, rows=rows)
