"""Main CSV/JSON Converter implementation."""

import logging
from pathlib import Path
from typing import Any, BinaryIO, Callable, List, Optional, Tuple
from .types import (
    ConverterInterface,
    ConversionResult,
    ConversionError,
    ErrorType
)
from .models import Table, CSVToJSONOptions, JSONToCSVOptions
from .parser import DocumentParser
from .mappers import TableToDocumentMapper, DocumentToTableMapper
from .io import CSVReader, CSVWriter, JSONWriter
from .error_handler import ErrorHandler
from .profiler import ConversionProfiler


class CSVJSONConverter(ConverterInterface):
    """
    Main implementation of the converter interface.

    Provides the two conversion pipelines, CSV -> JSON and JSON -> CSV,
    over byte streams and over file paths.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = DocumentParser(self.logger)
        self.csv_reader = CSVReader(self.logger)
        self.csv_writer = CSVWriter(self.logger)
        self.json_writer = JSONWriter(self.logger)
        self.table_mapper = TableToDocumentMapper(self.logger)
        self.document_mapper = DocumentToTableMapper(self.parser, self.logger)
        self.profiler = ConversionProfiler(self.logger)

    def csv_to_json_stream(self, source: BinaryIO, destination: BinaryIO,
                           options: Optional[CSVToJSONOptions] = None) -> int:
        """
        Convert a CSV byte stream into a JSON byte stream.

        Args:
            source: Readable CSV byte stream
            destination: Writable byte stream for the JSON document
            options: CSV to JSON options (defaults when omitted)

        Returns:
            Number of data rows converted

        Raises:
            ConversionError: If reading, decoding or writing fails
        """
        options = options or CSVToJSONOptions()
        document, row_count = self._read_csv_document(source, options)
        self.json_writer.write(destination, document)
        return row_count

    def json_to_csv_stream(self, source: BinaryIO, destination: BinaryIO,
                           options: Optional[JSONToCSVOptions] = None) -> int:
        """
        Convert a JSON byte stream into a CSV byte stream.

        An empty JSON array produces empty output, with no header row.

        Args:
            source: Readable JSON byte stream
            destination: Writable byte stream for the CSV text
            options: JSON to CSV options (defaults when omitted)

        Returns:
            Number of data rows written

        Raises:
            ConversionError: If reading, decoding, shape checks or writing fail
        """
        options = options or JSONToCSVOptions()
        table = self._read_json_table(source)
        return self.csv_writer.write(destination, table, options)

    def csv_to_json(self, input_path: str, output_path: str,
                    options: Optional[CSVToJSONOptions] = None) -> ConversionResult:
        """
        Convert a CSV file into a JSON file.

        The output file is only created once the input has been fully
        parsed, so a malformed input leaves an existing output untouched.

        Args:
            input_path: CSV file to read
            output_path: JSON file to create or overwrite
            options: CSV to JSON options (defaults when omitted)

        Returns:
            ConversionResult with operation details
        """
        options = options or CSVToJSONOptions()
        self.logger.info(f"Starting CSV to JSON conversion: {input_path} -> {output_path}")
        self.logger.debug(f"Options: {options.to_dict()}")

        def run() -> int:
            with open(input_path, "rb") as source:
                document, row_count = self._read_csv_document(source, options)
            with open(output_path, "wb") as destination:
                self.json_writer.write(destination, document)
            return row_count

        return self._run_file_conversion("csv_to_json", input_path, output_path, run)

    def json_to_csv(self, input_path: str, output_path: str,
                    options: Optional[JSONToCSVOptions] = None) -> ConversionResult:
        """
        Convert a JSON file into a CSV file.

        Args:
            input_path: JSON file to read
            output_path: CSV file to create or overwrite
            options: JSON to CSV options (defaults when omitted)

        Returns:
            ConversionResult with operation details
        """
        options = options or JSONToCSVOptions()
        self.logger.info(f"Starting JSON to CSV conversion: {input_path} -> {output_path}")
        self.logger.debug(f"Options: {options.to_dict()}")

        def run() -> int:
            with open(input_path, "rb") as source:
                table = self._read_json_table(source)
            with open(output_path, "wb") as destination:
                return self.csv_writer.write(destination, table, options)

        return self._run_file_conversion("json_to_csv", input_path, output_path, run)

    def _read_csv_document(self, source: BinaryIO,
                           options: CSVToJSONOptions) -> Tuple[List[Any], int]:
        table = self.csv_reader.read(source, options)
        document = self.table_mapper.map(table, options.array_format)
        return document, table.row_count

    def _read_json_table(self, source: BinaryIO) -> Table:
        document, shape = self.parser.parse(source)
        return self.document_mapper.map(document, shape)

    def _run_file_conversion(self, operation: str, input_path: str,
                             output_path: str, run: Callable[[], int]) -> ConversionResult:
        validation = self.error_handler.validate_paths(input_path, output_path)
        if not validation.is_valid:
            return ConversionResult(
                success=False,
                input_path=input_path,
                output_path=output_path,
                rows_written=0,
                errors=[error.message for error in validation.errors]
            )

        try:
            with self.profiler.profile_operation(operation, Path(input_path).stat().st_size) as profiler:
                rows_written = run()
                profiler.record_output(Path(output_path).stat().st_size, rows_written)

        except OSError as e:
            error = ConversionError(str(e), ErrorType.IO, context={"operation": operation})
            return self._failure(error, input_path, output_path)
        except ConversionError as e:
            return self._failure(e, input_path, output_path)

        self.logger.info(f"Converted {rows_written} rows to {output_path}")
        return ConversionResult(
            success=True,
            input_path=input_path,
            output_path=output_path,
            rows_written=rows_written
        )

    def _failure(self, error: ConversionError, input_path: str,
                 output_path: str) -> ConversionResult:
        self.error_handler.handle_conversion_error(error)
        return ConversionResult(
            success=False,
            input_path=input_path,
            output_path=output_path,
            rows_written=0,
            errors=[str(error)]
        )
