"""Command-line interface for the Locale Converter."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .converter import LocaleConverter
from .types import ConflictPolicy, ConversionError, Direction

_OUTPUT_SUFFIX = {
    Direction.LITERAL_TO_TABLE: ".xlsx",
    Direction.TABLE_TO_LITERAL: ".ts",
}


@click.group()
@click.version_option(version=__version__)
def main():
    """Locale Converter - Convert translation literals to spreadsheets and back."""
    pass


def _run(direction: Direction, input_file: Path, output: Optional[str],
         strict: bool, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    output_path = Path(output) if output else input_file.with_suffix(_OUTPUT_SUFFIX[direction])
    click.echo(f"Converting {input_file} to {output_path} ({direction.value})...")

    converter = LocaleConverter(
        conflict_policy=ConflictPolicy.ERROR if strict else ConflictPolicy.OVERWRITE,
        enable_profiling=verbose
    )

    try:
        data = converter.convert(direction, input_file.read_bytes())
    except ConversionError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    output_path.write_bytes(data)
    click.echo(f"✅ Wrote {len(data)} bytes to {output_path}")


@main.command(name="to-sheet")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output .xlsx path (default: input name with .xlsx)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_sheet(input_file: Path, output: Optional[str], verbose: bool):
    """Convert a translation literal file into a Key/Value spreadsheet."""
    _run(Direction.LITERAL_TO_TABLE, input_file, output, strict=False, verbose=verbose)


@main.command(name="to-literal")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output .ts path (default: input name with .ts)')
@click.option('--strict', is_flag=True, help='Fail on conflicting key paths instead of overwriting')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_literal(input_file: Path, output: Optional[str], strict: bool, verbose: bool):
    """Convert a Key/Value spreadsheet into a translation literal file."""
    _run(Direction.TABLE_TO_LITERAL, input_file, output, strict=strict, verbose=verbose)


@main.command()
@click.argument('direction')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', help='Output file path')
@click.option('--strict', is_flag=True, help='Fail on conflicting key paths instead of overwriting')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def convert(direction: str, input_file: Path, output: Optional[str], strict: bool, verbose: bool):
    """Convert INPUT_FILE in DIRECTION (literal-to-table or table-to-literal)."""
    try:
        resolved = Direction.from_value(direction)
    except ConversionError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)
    _run(resolved, input_file, output, strict=strict, verbose=verbose)


if __name__ == '__main__':
    main()
