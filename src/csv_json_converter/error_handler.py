"""Error handling implementation for the CSV/JSON Converter."""

import logging
from typing import List, Optional, Any
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for CSV/JSON Converter operations.

    Validates conversion parameters before any file is touched and turns
    conversion errors into user-facing suggestions. Every conversion
    error is fatal: nothing here attempts recovery.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_delimiter(self, delimiter: Any) -> ValidationResult:
        """
        Validate a CSV delimiter.

        Args:
            delimiter: Delimiter to validate

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_delimiter(delimiter)
        self._log_warnings(result)
        return result

    def validate_input_path(self, path: str) -> ValidationResult:
        """Validate that an input file exists and is readable."""
        result = ValidationUtils.validate_input_path(path)
        self._log_warnings(result)
        return result

    def validate_output_path(self, path: str) -> ValidationResult:
        """Validate that an output file can be created."""
        result = ValidationUtils.validate_output_path(path)
        self._log_warnings(result)
        return result

    def validate_paths(self, input_path: str, output_path: str) -> ValidationResult:
        """
        Validate both ends of a file conversion.

        Args:
            input_path: Input file path
            output_path: Output file path

        Returns:
            Combined ValidationResult
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        for result in (self.validate_input_path(input_path),
                       self.validate_output_path(output_path)):
            errors.extend(result.errors)
            warnings.extend(result.warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle conversion errors and provide a suggested action.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with the suggested action
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.IO:
            suggested_action = ("Check that the input file exists and is readable, "
                                "and that the output location is writable.")
        elif error.error_type == ErrorType.DECODE:
            suggested_action = ("Check the input syntax: CSV quoting must be balanced, "
                                "JSON must be well formed, and both must be UTF-8.")
        elif error.error_type == ErrorType.SHAPE:
            suggested_action = ("JSON input must be an array of arrays or an array of objects.")
        elif error.error_type == ErrorType.CONFIG:
            suggested_action = "Check the command-line options."
        else:
            suggested_action = "Unknown error type. Please check logs and retry."

        return ErrorResponse(
            can_recover=False,
            suggested_action=suggested_action,
            context=error.context
        )

    def _log_warnings(self, result: ValidationResult) -> None:
        for warning in result.warnings:
            self.logger.warning(warning)
