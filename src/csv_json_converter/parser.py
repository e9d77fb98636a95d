"""JSON document parser with shape detection."""

import json
import logging
from typing import Any, BinaryIO, List, Optional, Tuple
from .types import DocumentShape, ConversionError, ErrorType
from .io.streams import text_reader


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON value: {name}")


class DocumentParser:
    """
    JSON parser that decodes a document and detects its shape.

    Only the first element of the top-level array decides the shape;
    later elements are checked by the mapper that consumes them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the document parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, stream: BinaryIO) -> Tuple[Any, DocumentShape]:
        """
        Parse a JSON byte stream and detect the document shape.

        Args:
            stream: Readable byte stream

        Returns:
            Tuple of (parsed_document, document_shape)

        Raises:
            ConversionError: If the stream is unreadable, malformed, or
                not an array of arrays or objects
        """
        try:
            with text_reader(stream) as text:
                data = json.load(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ConversionError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                ErrorType.DECODE,
                context={"line": e.lineno, "column": e.colno}
            )
        except RecursionError:
            raise ConversionError(
                "JSON parsing failed: document is nested too deeply",
                ErrorType.DECODE
            )
        except UnicodeDecodeError as e:
            raise ConversionError(
                f"JSON input is not valid UTF-8: {e}",
                ErrorType.DECODE
            )
        except ValueError as e:
            raise ConversionError(
                f"JSON parsing failed: {e}",
                ErrorType.DECODE
            )
        except OSError as e:
            raise ConversionError(
                f"Failed to read JSON input: {e}",
                ErrorType.IO
            )

        shape = self.detect_shape(data)

        self.logger.info(f"Parsed JSON with shape: {shape.value}")
        return data, shape

    def detect_shape(self, data: Any) -> DocumentShape:
        """
        Detect the shape of a parsed document.

        Args:
            data: Parsed JSON value

        Returns:
            DocumentShape enum indicating the shape

        Raises:
            ConversionError: If the document is not an array of arrays or objects
        """
        if not isinstance(data, list):
            raise ConversionError(
                "JSON must be an array",
                ErrorType.SHAPE,
                context={"root_type": type(data).__name__}
            )

        return self._analyze_list_shape(data)

    def _analyze_list_shape(self, data: List[Any]) -> DocumentShape:
        if not data:
            return DocumentShape.EMPTY

        first = data[0]
        if isinstance(first, list):
            return DocumentShape.ROW_ARRAYS
        elif isinstance(first, dict):
            return DocumentShape.ROW_RECORDS
        else:
            raise ConversionError(
                "JSON array must contain arrays or objects",
                ErrorType.SHAPE,
                context={"first_element_type": type(first).__name__}
            )
