"""Core type definitions for the Locale Converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Enumeration of error types."""
    DIRECTION = "direction"
    SYNTAX = "syntax"
    EMPTY_TABLE = "empty-table"
    COLUMNS = "columns"
    EMPTY_SHEET = "empty-sheet"
    PATH = "path"
    WORKBOOK = "workbook"
    INPUT = "input"
    SIZE = "size"


class ConflictPolicy(Enum):
    """How the unflattener treats a key path that collides with an earlier one."""
    OVERWRITE = "overwrite"
    ERROR = "error"


class Direction(Enum):
    """Supported conversion directions."""
    LITERAL_TO_TABLE = "literal-to-table"
    TABLE_TO_LITERAL = "table-to-literal"

    @classmethod
    def from_value(cls, value: Any) -> "Direction":
        """
        Resolve a direction tag, accepting the legacy upload-form tags.

        Raises:
            InvalidDirection: If the tag is not recognized
        """
        if isinstance(value, cls):
            return value
        tag = str(value).strip().lower() if value is not None else ""
        tag = _DIRECTION_ALIASES.get(tag, tag)
        for direction in cls:
            if direction.value == tag:
                return direction
        raise InvalidDirection("Invalid conversion direction", context={"direction": value})


_DIRECTION_ALIASES = {
    "ts-to-excel": "literal-to-table",
    "excel-to-ts": "table-to-literal",
}


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response the request layer surfaces for a failed conversion."""
    status_code: int
    message: str
    error_type: Optional[ErrorType] = None


@dataclass
class ConversionOutput:
    """Converted payload plus the attachment metadata for it."""
    data: bytes
    filename: str
    content_type: str


class ConversionError(Exception):
    """Base exception for every failure of a single conversion call."""

    default_type = ErrorType.INPUT

    def __init__(self, message: str, error_type: Optional[ErrorType] = None,
                 context: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type or self.default_type
        self.context = context


class InvalidDirection(ConversionError):
    """Unrecognized conversion direction tag."""
    default_type = ErrorType.DIRECTION


class MalformedLiteral(ConversionError):
    """The structured-text literal does not follow the object-literal grammar."""

    default_type = ErrorType.SYNTAX

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None, context: Optional[Any] = None):
        if line is not None and column is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message, context=context)
        self.line = line
        self.column = column


class EmptyTable(ConversionError):
    """The table has a header but no data rows."""
    default_type = ErrorType.EMPTY_TABLE


class MissingColumns(ConversionError):
    """No resolvable Key/Value column pair."""
    default_type = ErrorType.COLUMNS


class EmptySheet(ConversionError):
    """The decoded workbook contains no sheets."""
    default_type = ErrorType.EMPTY_SHEET


class PathConflict(ConversionError):
    """A key path both terminates in a string and continues as a nested object."""
    default_type = ErrorType.PATH


class InvalidKeyPath(ConversionError):
    """A dot-path key is empty, has an empty segment or nests too deeply."""
    default_type = ErrorType.PATH


class UnreadableWorkbook(ConversionError):
    """The uploaded bytes are not a readable spreadsheet container."""
    default_type = ErrorType.WORKBOOK


class EmptyInput(ConversionError):
    """Nothing was uploaded."""
    default_type = ErrorType.INPUT


class InputTooLarge(ConversionError):
    """The upload exceeds the configured size limit."""
    default_type = ErrorType.SIZE


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for the conversion orchestrator."""

    @abstractmethod
    def convert(self, direction: Any, raw_input: bytes) -> bytes:
        """Convert raw input bytes in the requested direction."""
        pass


class TableCodecInterface(ABC):
    """Abstract interface for the flat entry <-> table codec."""

    @abstractmethod
    def read_table(self, table: "Table") -> List["FlatEntry"]:
        """Map table rows to flat entries."""
        pass

    @abstractmethod
    def write_table(self, entries: List["FlatEntry"]) -> "Table":
        """Map flat entries to table rows."""
        pass
