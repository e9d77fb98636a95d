"""Data models for the CSV/JSON Converter."""

from .table import Table
from .options import CSVToJSONOptions, JSONToCSVOptions

__all__ = ["Table", "CSVToJSONOptions", "JSONToCSVOptions"]
