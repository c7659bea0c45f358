"""
Locale Converter - Bidirectional translation file conversion tool.

Converts between exported translation object literals
(``export default { ... } as const;``) and two-column Key/Value
spreadsheets with dot-path keys.
"""

from .converter import LocaleConverter, convert
from .models import Leaf, Node, FlatEntry, Table, ColumnWidths
from .parser import LiteralParser, parse_literal
from .serializer import LiteralSerializer, serialize_literal
from .processors import flatten, unflatten
from .io import TableCodec
from .types import (
    ConflictPolicy,
    ConversionError,
    ConversionOutput,
    Direction,
    EmptyInput,
    EmptySheet,
    EmptyTable,
    InputTooLarge,
    InvalidDirection,
    InvalidKeyPath,
    MalformedLiteral,
    MissingColumns,
    PathConflict,
    UnreadableWorkbook,
)

__version__ = "1.0.0"
__all__ = [
    "LocaleConverter",
    "convert",
    "Leaf",
    "Node",
    "FlatEntry",
    "Table",
    "ColumnWidths",
    "LiteralParser",
    "parse_literal",
    "LiteralSerializer",
    "serialize_literal",
    "flatten",
    "unflatten",
    "TableCodec",
    "ConflictPolicy",
    "ConversionError",
    "ConversionOutput",
    "Direction",
    "EmptyInput",
    "EmptySheet",
    "EmptyTable",
    "InputTooLarge",
    "InvalidDirection",
    "InvalidKeyPath",
    "MalformedLiteral",
    "MissingColumns",
    "PathConflict",
    "UnreadableWorkbook",
]
