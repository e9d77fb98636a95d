#!/usr/bin/env python3
"""
Example usage of the CSV/JSON Converter.

This script converts a small JSON document to CSV and back again,
showing the header union and both JSON output shapes.
"""

import json
import tempfile
from pathlib import Path
from csv_json_converter import CSVJSONConverter, CSVToJSONOptions, JSONToCSVOptions


def main():
    """Main example function."""
    print("CSV/JSON Converter Example")
    print("=" * 50)

    # Records with different keys: the CSV header is their union
    sample_data = [
        {"name": "Alice", "age": 30, "email": "alice@example.com"},
        {"name": "Bob", "city": "San Francisco", "tags": ["admin", "ops"]},
        {"name": "Carol, Jr.", "age": None, "active": True},
    ]

    converter = CSVJSONConverter()

    with tempfile.TemporaryDirectory() as temp_dir:
        json_path = Path(temp_dir) / "people.json"
        csv_path = Path(temp_dir) / "people.csv"
        json_path.write_text(json.dumps(sample_data), encoding="utf-8")

        print("Converting JSON to CSV...")
        result = converter.json_to_csv(str(json_path), str(csv_path), JSONToCSVOptions())
        if not result.success:
            print(f"❌ Failed: {'; '.join(result.errors or [])}")
            return

        print(f"✅ Wrote {result.rows_written} rows")
        print(csv_path.read_text(encoding="utf-8"))

        for array_format in (False, True):
            shape = "arrays" if array_format else "objects"
            out_path = Path(temp_dir) / f"people_{shape}.json"

            print(f"Converting CSV back to JSON (array of {shape})...")
            result = converter.csv_to_json(
                str(csv_path),
                str(out_path),
                CSVToJSONOptions(array_format=array_format)
            )
            if result.success:
                print(out_path.read_text(encoding="utf-8"))
                print()
            else:
                print(f"❌ Failed: {'; '.join(result.errors or [])}")


if __name__ == "__main__":
    main()
