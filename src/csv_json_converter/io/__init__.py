"""Stream I/O for the CSV/JSON Converter."""

from .csv_reader import CSVReader
from .csv_writer import CSVWriter
from .json_writer import JSONWriter

__all__ = ["CSVReader", "CSVWriter", "JSONWriter"]
