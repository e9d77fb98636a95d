"""
CSV/JSON Converter - Bidirectional CSV and JSON conversion tool.

Converts delimited text into arrays of objects or arrays of arrays,
and flattens those JSON shapes back into delimited text.
"""

__version__ = "1.0.0"

from .converter import CSVJSONConverter
from .models import Table, CSVToJSONOptions, JSONToCSVOptions
from .types import ConversionResult, ConversionError, DocumentShape, ErrorType, QuoteStyle

__all__ = [
    "CSVJSONConverter",
    "Table",
    "CSVToJSONOptions",
    "JSONToCSVOptions",
    "ConversionResult",
    "ConversionError",
    "DocumentShape",
    "ErrorType",
    "QuoteStyle",
]
