"""JSON writer for converted documents."""

import json
import logging
from typing import Any, BinaryIO, Optional
from ..types import ConversionError, ErrorType
from .streams import text_writer

JSON_INDENT = 2


class JSONWriter:
    """Writer that pretty-prints a document to a byte stream."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write(self, stream: BinaryIO, document: Any) -> None:
        """
        Write a document as indented JSON.

        Args:
            stream: Writable byte stream
            document: JSON-serializable document

        Raises:
            ConversionError: If writing or flushing fails
        """
        try:
            with text_writer(stream) as text:
                json.dump(document, text, indent=JSON_INDENT, ensure_ascii=False)
                text.flush()
            stream.flush()

        except OSError as e:
            raise ConversionError(
                f"Failed to write JSON output: {e}",
                ErrorType.IO
            )

        self.logger.debug(f"Wrote JSON document with {len(document)} entries")
