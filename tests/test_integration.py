"""Integration tests for the CSV/JSON Converter."""

import json
import pytest
from io import BytesIO
from csv_json_converter import (
    CSVJSONConverter,
    CSVToJSONOptions,
    JSONToCSVOptions,
    ConversionError,
    ErrorType
)


class TestStreamConversion:
    """Integration tests for the stream pipelines."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = CSVJSONConverter()

    def csv_to_json(self, data: bytes, **options):
        destination = BytesIO()
        self.converter.csv_to_json_stream(BytesIO(data), destination, CSVToJSONOptions(**options))
        return json.loads(destination.getvalue())

    def json_to_csv(self, document, **options) -> str:
        destination = BytesIO()
        source = BytesIO(json.dumps(document).encode("utf-8"))
        self.converter.json_to_csv_stream(source, destination, JSONToCSVOptions(**options))
        return destination.getvalue().decode("utf-8")

    def test_csv_to_records_scenario(self):
        """Test the basic CSV to row-records conversion."""
        assert self.csv_to_json(b"a,b\n1,2\n3,4") == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_records_to_csv_scenario(self, sample_records):
        """Test heterogeneous records produce a header union."""
        assert self.json_to_csv(sample_records) == "name,age,city\nAlice,30,\nBob,,NYC\n"

    def test_csv_to_row_arrays(self):
        """Test array format output keeps the header row first."""
        assert self.csv_to_json(b"a,b\n1,2\n", array_format=True) == [["a", "b"], ["1", "2"]]

    def test_csv_without_headers(self):
        """Test positional keys without a header row."""
        assert self.csv_to_json(b"1,2\n3\n", has_headers=False) == [
            {"field0": "1", "field1": "2"},
            {"field0": "3"},
        ]

    def test_records_round_trip(self, sample_csv_bytes):
        """Test CSV -> records -> CSV keeps header order and cells."""
        records = self.csv_to_json(sample_csv_bytes)

        assert self.json_to_csv(records).encode("utf-8") == sample_csv_bytes

    def test_row_arrays_round_trip(self, sample_csv_bytes):
        """Test CSV -> row arrays -> CSV is byte-identical."""
        rows = self.csv_to_json(sample_csv_bytes, array_format=True)

        assert self.json_to_csv(rows).encode("utf-8") == sample_csv_bytes

    def test_row_arrays_to_csv_round_trip(self):
        """Test row arrays -> CSV -> row arrays is identical."""
        rows = [["name", "note"], ["Alice", "likes, commas"], ["Bob", 'says "hi"']]

        csv_text = self.json_to_csv(rows)
        back = self.csv_to_json(csv_text.encode("utf-8"), array_format=True, has_headers=False)

        assert back == rows

    def test_carriage_return_round_trip(self):
        """Test a bare carriage return survives row arrays -> CSV -> row arrays."""
        rows = [["a\rb", "c"], ["d", "e\r"]]

        csv_text = self.json_to_csv(rows)
        back = self.csv_to_json(csv_text.encode("utf-8"), array_format=True, has_headers=False)

        assert back == rows

    def test_missing_field_asymmetry(self):
        """Test short rows omit keys, while missing keys become empty cells."""
        records = self.csv_to_json(b"a,b,c\n1,2\n")
        assert records == [{"a": "1", "b": "2"}]

        assert self.json_to_csv([{"a": "1", "b": "2", "c": "3"}, {"a": "4"}]) == "a,b,c\n1,2,3\n4,,\n"

    def test_quote_necessary_and_all(self):
        """Test both quoting policies."""
        records = [{"id": "1", "text": "a,b"}]

        assert self.json_to_csv(records) == 'id,text\n1,"a,b"\n'
        assert self.json_to_csv(records, quote_all=True) == '"id","text"\n"1","a,b"\n'

    def test_custom_delimiter_both_ways(self):
        """Test a semicolon delimiter in both directions."""
        csv_text = self.json_to_csv([{"a": "1,5", "b": "x"}], delimiter=";")
        assert csv_text == "a;b\n1,5;x\n"

        assert self.csv_to_json(csv_text.encode("utf-8"), delimiter=";") == [{"a": "1,5", "b": "x"}]

    def test_empty_array(self):
        """Test an empty array writes nothing, not even a header."""
        assert self.json_to_csv([]) == ""

    def test_non_string_values(self, sample_typed_records):
        """Test non-string values use their JSON text."""
        lines = self.json_to_csv(sample_typed_records).splitlines()

        assert lines[0] == "id,active,score,note,tags,meta,name"
        assert lines[1] == '1,true,9.5,,"[""a"",""b""]","{""k"":""v""}",Alice'
        assert lines[2] == "2,false,7,,,,Bob"

    def test_shape_error_propagates(self):
        """Test stream conversions raise on invalid shapes."""
        with pytest.raises(ConversionError, match="JSON must be an array") as exc_info:
            self.json_to_csv({"a": 1})

        assert exc_info.value.error_type == ErrorType.SHAPE

    def test_default_options(self):
        """Test stream conversions work without explicit options."""
        destination = BytesIO()
        count = self.converter.csv_to_json_stream(BytesIO(b"a\n1\n2\n"), destination)

        assert count == 2
        assert json.loads(destination.getvalue()) == [{"a": "1"}, {"a": "2"}]


class TestFileConversion:
    """Integration tests for the file pipelines."""

    def setup_method(self):
        """Set up test fixtures."""
        self.converter = CSVJSONConverter()

    def test_csv_to_json_file(self, temp_dir, sample_csv_bytes):
        """Test converting a CSV file to a JSON file."""
        source = temp_dir / "people.csv"
        source.write_bytes(sample_csv_bytes)
        target = temp_dir / "people.json"

        result = self.converter.csv_to_json(str(source), str(target))

        assert result.success
        assert result.rows_written == 3
        assert result.errors is None
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data[0] == {"id": "1", "name": "Alice", "city": "New York"}
        assert target.read_text(encoding="utf-8").startswith("[\n  {\n")

    def test_json_to_csv_file(self, temp_dir, sample_records):
        """Test converting a JSON file to a CSV file."""
        source = temp_dir / "people.json"
        source.write_text(json.dumps(sample_records), encoding="utf-8")
        target = temp_dir / "people.csv"

        result = self.converter.json_to_csv(str(source), str(target), JSONToCSVOptions())

        assert result.success
        assert result.rows_written == 2
        assert target.read_text(encoding="utf-8") == "name,age,city\nAlice,30,\nBob,,NYC\n"

    def test_empty_array_file(self, temp_dir):
        """Test an empty JSON array creates an empty CSV file."""
        source = temp_dir / "empty.json"
        source.write_text("[]")
        target = temp_dir / "empty.csv"

        result = self.converter.json_to_csv(str(source), str(target))

        assert result.success
        assert result.rows_written == 0
        assert target.read_bytes() == b""

    def test_missing_input(self, temp_dir):
        """Test a missing input file fails without creating output."""
        target = temp_dir / "out.json"

        result = self.converter.csv_to_json(str(temp_dir / "missing.csv"), str(target))

        assert not result.success
        assert "does not exist" in result.errors[0]
        assert not target.exists()

    def test_decode_error_keeps_existing_output(self, temp_dir):
        """Test a malformed input does not clobber an existing output file."""
        source = temp_dir / "bad.json"
        source.write_text('[{"a": 1}')
        target = temp_dir / "out.csv"
        target.write_text("previous")

        result = self.converter.json_to_csv(str(source), str(target))

        assert not result.success
        assert "JSON parsing failed" in result.errors[0]
        assert target.read_text() == "previous"

    def test_shape_error_result(self, temp_dir):
        """Test shape errors are reported in the result."""
        source = temp_dir / "rows.json"
        source.write_text('[["a"], "b"]')

        result = self.converter.json_to_csv(str(source), str(temp_dir / "out.csv"))

        assert not result.success
        assert result.errors == ["Row 1 is not an array"]

    def test_deep_nesting_result(self, temp_dir):
        """Test deeply nested input is reported in the result."""
        source = temp_dir / "deep.json"
        source.write_text("[" * 100000 + "]" * 100000)

        result = self.converter.json_to_csv(str(source), str(temp_dir / "out.csv"))

        assert not result.success
        assert "nested too deeply" in result.errors[0]

    def test_profiler_records_conversions(self, temp_dir):
        """Test each file conversion is profiled."""
        source = temp_dir / "in.csv"
        source.write_text("a\n1\n")

        self.converter.csv_to_json(str(source), str(temp_dir / "out.json"))

        summary = self.converter.profiler.get_summary()
        assert summary["operations"] == ["csv_to_json"]
        assert summary["total_rows_written"] == 1
