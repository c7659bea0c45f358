#!/usr/bin/env python3
"""
Example usage of the Locale Converter.

This script demonstrates converting a translation literal into a
Key/Value spreadsheet and back again.
"""

import logging
import tempfile
from pathlib import Path
from src.locale_converter import LocaleConverter, parse_literal


SAMPLE_LITERAL = """export default {
  home: {
    title: 'Welcome',
    subtitle: 'It\\'s good to see you',
  },
  'nav-bar': {
    home: 'Home',
    about: 'About us',
  },
  footer: 'Bye',
} as const;
"""


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Locale Converter Example")
    print("=" * 50)

    converter = LocaleConverter()

    with tempfile.TemporaryDirectory() as temp_dir:
        sheet_path = Path(temp_dir) / "translations.xlsx"

        # Literal -> spreadsheet
        output = converter.convert_file("literal-to-table", SAMPLE_LITERAL.encode("utf-8"))
        sheet_path.write_bytes(output.data)
        print(f"\n✅ Wrote {output.filename} ({len(output.data)} bytes, {output.content_type})")

        # Spreadsheet -> literal
        literal = converter.convert("table-to-literal", sheet_path.read_bytes()).decode("utf-8")
        print("\n✅ Regenerated literal:")
        print(literal)

        same = parse_literal(literal) == parse_literal(SAMPLE_LITERAL)
        print(f"Round trip preserved structure: {same}")

    print("\n" + converter.profiler.export_metrics("summary"))


if __name__ == "__main__":
    main()
