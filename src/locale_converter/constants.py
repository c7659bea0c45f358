"""
Constants configuration for locale conversion.

This module contains the defaults used throughout the converter, the
table codec and the CLI.
"""

# Delimiter for flattening nested keys
# Example: {"home": {"title": "Welcome"}} becomes "home.title"
KEY_PATH_DELIMITER = "."

# Wrapper around the serialized object literal
# Example: export default { ... } as const;
LITERAL_PREFIX = "export default "
LITERAL_SUFFIX = " as const;\n"
INDENT_UNIT = "  "

# Table header and sheet title
HEADER_KEY = "Key"
HEADER_VALUE = "Value"
SHEET_NAME = "Translations"

# Column width hints, applied as min(max(longest, floor) + padding, cap)
KEY_WIDTH_FLOOR = 10
KEY_WIDTH_CAP = 60
VALUE_WIDTH_FLOOR = 50
VALUE_WIDTH_CAP = 80
WIDTH_PADDING = 2

# Attachment metadata for the request layer
TABLE_FILENAME = "translations.xlsx"
TABLE_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
LITERAL_FILENAME = "translations.ts"
LITERAL_CONTENT_TYPE = "text/plain"

# Input limits
DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024  # 10MB

# Most recent conversions kept by the profiler
DEFAULT_PROFILE_HISTORY = 100
