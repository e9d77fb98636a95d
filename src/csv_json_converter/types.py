"""Core type definitions for the CSV/JSON Converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, BinaryIO, Dict, List, Optional


class DocumentShape(Enum):
    """Enumeration of supported JSON document shapes."""
    ROW_ARRAYS = "row-arrays"
    ROW_RECORDS = "row-records"
    EMPTY = "empty"


class QuoteStyle(Enum):
    """Enumeration of CSV quoting policies."""
    ALWAYS = "always"
    NECESSARY = "necessary"


class ErrorType(Enum):
    """Enumeration of error types."""
    IO = "io"
    DECODE = "decode"
    SHAPE = "shape"
    CONFIG = "config"


@dataclass
class ConversionResult:
    """Result of a file conversion."""
    success: bool
    input_path: str
    output_path: str
    rows_written: int
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    context: Optional[Dict[str, Any]] = None


class ConversionError(Exception):
    """Raised when a conversion cannot be completed."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for the CSV/JSON Converter."""

    @abstractmethod
    def csv_to_json_stream(self, source: BinaryIO, destination: BinaryIO, options: Any) -> int:
        """Convert a CSV byte stream into a JSON byte stream."""
        pass

    @abstractmethod
    def json_to_csv_stream(self, source: BinaryIO, destination: BinaryIO, options: Any) -> int:
        """Convert a JSON byte stream into a CSV byte stream."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_delimiter(self, delimiter: str) -> ValidationResult:
        """Validate a delimiter character."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
