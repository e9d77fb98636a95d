"""Validation utilities for conversion parameters."""

import os
from pathlib import Path
from typing import Any, List
from ..types import ValidationResult, ValidationError, ErrorType


class ValidationUtils:
    """Utility class for validating conversion parameters."""

    @staticmethod
    def validate_delimiter(delimiter: Any) -> ValidationResult:
        """
        Validate a CSV delimiter.

        Args:
            delimiter: Delimiter to validate

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if not isinstance(delimiter, str) or len(delimiter) != 1:
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message=f"Delimiter must be a single character, got {delimiter!r}",
                location="delimiter"
            ))
        elif delimiter == '"':
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message="Delimiter cannot be the quote character",
                location="delimiter"
            ))
        elif delimiter in "\r\n":
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message="Delimiter cannot be a line break",
                location="delimiter"
            ))
        elif delimiter.isalnum():
            warnings.append(f"Delimiter {delimiter!r} is alphanumeric and may split field values.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_input_path(path: str) -> ValidationResult:
        """
        Validate that an input file can be read.

        Args:
            path: Input file path

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.IO,
                message="Input path cannot be empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        input_path = Path(path)
        if not input_path.exists():
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Input file does not exist: {path}",
                location="input"
            ))
        elif not input_path.is_file():
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Input path is not a file: {path}",
                location="input"
            ))
        elif not os.access(input_path, os.R_OK):
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Input file is not readable: {path}",
                location="input"
            ))
        elif input_path.stat().st_size == 0:
            warnings.append(f"Input file is empty: {path}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_output_path(path: str) -> ValidationResult:
        """
        Validate that an output file can be created.

        Args:
            path: Output file path

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.IO,
                message="Output path cannot be empty",
                location="output"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        output_path = Path(path)
        parent = output_path.parent

        if output_path.is_dir():
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Output path is a directory: {path}",
                location="output"
            ))
        elif not parent.is_dir():
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Output directory does not exist: {parent}",
                location="output"
            ))
        elif not os.access(parent, os.W_OK):
            errors.append(ValidationError(
                type=ErrorType.IO,
                message=f"Output directory is not writable: {parent}",
                location="output"
            ))
        elif output_path.exists():
            warnings.append(f"Output file will be overwritten: {path}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
