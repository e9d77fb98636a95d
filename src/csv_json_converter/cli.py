"""Command-line interface for the CSV/JSON Converter."""

import logging
import click
from pathlib import Path
from . import __version__
from .converter import CSVJSONConverter
from .models import CSVToJSONOptions, JSONToCSVOptions
from .types import ConversionResult
from .utils.validation import ValidationUtils

DELIMITER_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
}


def _delimiter_callback(ctx: click.Context, param: click.Parameter, value: str) -> str:
    delimiter = DELIMITER_ALIASES.get(value, value)
    validation = ValidationUtils.validate_delimiter(delimiter)
    if not validation.is_valid:
        raise click.BadParameter(validation.errors[0].message)
    return delimiter


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _report(result: ConversionResult, success_message: str) -> None:
    if result.success:
        click.echo(success_message)
        return

    click.echo(f"Error: {'; '.join(result.errors or ['conversion failed'])}", err=True)
    click.get_current_context().exit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """CSV/JSON Converter - Convert between CSV and JSON formats."""
    pass


@main.command("csv-to-json")
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(path_type=Path),
              help='Input CSV file')
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(path_type=Path),
              help='Output JSON file')
@click.option('--array-format', '-a', is_flag=True,
              help='Output an array of arrays instead of an array of objects')
@click.option('--delimiter', '-d', default=',', callback=_delimiter_callback,
              help='CSV delimiter character (default: ,)')
@click.option('--has-headers/--no-headers', default=True,
              help='Whether the first CSV row holds headers (default: headers)')
@click.option('--trim', is_flag=True, help='Trim whitespace from fields')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def csv_to_json(input_file: Path, output_file: Path, array_format: bool, delimiter: str,
                has_headers: bool, trim: bool, verbose: bool):
    """Convert CSV to JSON."""
    _configure_logging(verbose)

    options = CSVToJSONOptions(
        array_format=array_format,
        delimiter=delimiter,
        has_headers=has_headers,
        trim=trim
    )
    result = CSVJSONConverter().csv_to_json(str(input_file), str(output_file), options)
    _report(result, "CSV successfully converted to JSON")


@main.command("json-to-csv")
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(path_type=Path),
              help='Input JSON file')
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(path_type=Path),
              help='Output CSV file')
@click.option('--delimiter', '-d', default=',', callback=_delimiter_callback,
              help='CSV delimiter character (default: ,)')
@click.option('--quote-all', is_flag=True, help='Quote every field')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def json_to_csv(input_file: Path, output_file: Path, delimiter: str, quote_all: bool,
                verbose: bool):
    """Convert JSON to CSV."""
    _configure_logging(verbose)

    options = JSONToCSVOptions(delimiter=delimiter, quote_all=quote_all)
    result = CSVJSONConverter().json_to_csv(str(input_file), str(output_file), options)
    _report(result, "JSON successfully converted to CSV")


if __name__ == '__main__':
    main()
