"""Tests for data models."""

import pytest
from csv_json_converter.models import Table, CSVToJSONOptions, JSONToCSVOptions
from csv_json_converter.types import QuoteStyle


class TestTable:
    """Tests for Table class."""

    def test_create_table_with_headers(self):
        """Test creating a table with a header row."""
        table = Table(headers=["a", "b"], rows=[["1", "2"], ["3"]])

        assert table.has_headers
        assert table.row_count == 2
        assert not table.is_empty()

    def test_create_empty_table(self):
        """Test default table is empty and header-less."""
        table = Table()

        assert table.headers is None
        assert table.rows == []
        assert table.is_empty()
        assert table.all_rows() == []

    def test_all_rows_puts_header_first(self):
        """Test header row precedes data rows."""
        table = Table(headers=["a", "b"], rows=[["1", "2"]])

        assert table.all_rows() == [["a", "b"], ["1", "2"]]

    def test_all_rows_without_headers(self):
        """Test all_rows returns only data rows when there is no header."""
        table = Table(rows=[["1", "2"]])

        assert table.all_rows() == [["1", "2"]]

    def test_non_string_cell_rejected(self):
        """Test validation of non-string cells."""
        with pytest.raises(ValueError, match="row 0 must contain only strings"):
            Table(rows=[["1", 2]])

    def test_non_string_header_rejected(self):
        """Test validation of non-string headers."""
        with pytest.raises(ValueError, match="headers must contain only strings"):
            Table(headers=["a", None])

    def test_non_list_row_rejected(self):
        """Test validation of rows that are not lists."""
        with pytest.raises(ValueError, match="row 1 must be a list"):
            Table(rows=[["1"], "2"])


class TestCSVToJSONOptions:
    """Tests for CSVToJSONOptions class."""

    def test_defaults(self):
        """Test default option values."""
        options = CSVToJSONOptions()

        assert options.array_format is False
        assert options.delimiter == ","
        assert options.has_headers is True
        assert options.trim is False

    def test_multi_character_delimiter_rejected(self):
        """Test validation of multi-character delimiters."""
        with pytest.raises(ValueError, match="single character"):
            CSVToJSONOptions(delimiter=";;")

    def test_quote_delimiter_rejected(self):
        """Test validation of the quote character as delimiter."""
        with pytest.raises(ValueError, match="quote character"):
            CSVToJSONOptions(delimiter='"')

    def test_newline_delimiter_rejected(self):
        """Test validation of line breaks as delimiter."""
        with pytest.raises(ValueError, match="line break"):
            CSVToJSONOptions(delimiter="\n")

    def test_to_dict(self):
        """Test conversion to dictionary."""
        options = CSVToJSONOptions(array_format=True, delimiter="\t", has_headers=False, trim=True)

        assert options.to_dict() == {
            "arrayFormat": True,
            "delimiter": "\t",
            "hasHeaders": False,
            "trim": True
        }


class TestJSONToCSVOptions:
    """Tests for JSONToCSVOptions class."""

    def test_defaults(self):
        """Test default option values."""
        options = JSONToCSVOptions()

        assert options.delimiter == ","
        assert options.quote_all is False
        assert options.quote_style == QuoteStyle.NECESSARY

    def test_quote_all_selects_always(self):
        """Test quote_all maps to the ALWAYS quoting policy."""
        options = JSONToCSVOptions(quote_all=True)

        assert options.quote_style == QuoteStyle.ALWAYS
        assert options.to_dict()["quoteStyle"] == "always"

    def test_empty_delimiter_rejected(self):
        """Test validation of an empty delimiter."""
        with pytest.raises(ValueError, match="single character"):
            JSONToCSVOptions(delimiter="")
