"""Conversion option models."""

from dataclasses import dataclass
from typing import Any, Dict
from ..types import QuoteStyle


def _validate_delimiter(delimiter: Any) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")

    if delimiter == '"':
        raise ValueError("delimiter cannot be the quote character")

    if delimiter in "\r\n":
        raise ValueError("delimiter cannot be a line break")


@dataclass
class CSVToJSONOptions:
    """
    Options for the CSV to JSON pipeline.

    ``array_format`` selects row-arrays output instead of row-records.
    """

    array_format: bool = False
    delimiter: str = ","
    has_headers: bool = True
    trim: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        _validate_delimiter(self.delimiter)

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary for logging."""
        return {
            "arrayFormat": self.array_format,
            "delimiter": self.delimiter,
            "hasHeaders": self.has_headers,
            "trim": self.trim
        }


@dataclass
class JSONToCSVOptions:
    """Options for the JSON to CSV pipeline."""

    delimiter: str = ","
    quote_all: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        _validate_delimiter(self.delimiter)

    @property
    def quote_style(self) -> QuoteStyle:
        """Quoting policy implied by ``quote_all``."""
        return QuoteStyle.ALWAYS if self.quote_all else QuoteStyle.NECESSARY

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary for logging."""
        return {
            "delimiter": self.delimiter,
            "quoteAll": self.quote_all,
            "quoteStyle": self.quote_style.value
        }
