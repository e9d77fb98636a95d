"""Utility modules for the CSV/JSON Converter."""

from .cells import to_cell_text, to_row_text
from .headers import compute_header_union
from .validation import ValidationUtils

__all__ = ["to_cell_text", "to_row_text", "compute_header_union", "ValidationUtils"]
