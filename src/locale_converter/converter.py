"""Main Locale Converter implementation."""

import logging
from contextlib import nullcontext
from typing import Any, List, Optional, Tuple

from .constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_INPUT_SIZE,
    LITERAL_CONTENT_TYPE,
    LITERAL_FILENAME,
    SHEET_NAME,
    TABLE_CONTENT_TYPE,
    TABLE_FILENAME,
)
from .error_handler import ErrorHandler
from .io import TableCodec, WorkbookDecoder, WorkbookEncoder
from .models import FlatEntry, Node, Table
from .parser import LiteralParser
from .processors import Flattener, Unflattener
from .profiler import PerformanceProfiler
from .serializer import LiteralSerializer
from .types import (
    ConflictPolicy,
    ConversionError,
    ConversionOutput,
    ConverterInterface,
    Direction,
    MalformedLiteral,
    PathConflict,
)
from .utils.validation import ValidationUtils


class LocaleConverter(ConverterInterface):
    """
    Main implementation of the converter interface.

    Provides bidirectional conversion between exported translation
    object literals and two-column Key/Value spreadsheets. Every call is
    independent: no state from one conversion is visible to the next.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 conflict_policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 max_input_size: int = DEFAULT_MAX_INPUT_SIZE,
                 sheet_name: str = SHEET_NAME,
                 enable_profiling: bool = True):
        """
        Initialize the Locale Converter.

        Args:
            logger: Optional logger instance
            conflict_policy: Behavior when spreadsheet key paths collide
            max_depth: Maximum object nesting accepted in literal input and
                spreadsheet key paths
            max_input_size: Largest accepted upload in bytes
            sheet_name: Title of the sheet in generated workbooks
            enable_profiling: Record duration and memory per conversion
        """
        self.logger = logger or logging.getLogger(__name__)
        self.conflict_policy = conflict_policy
        self.max_depth = max_depth

        self.error_handler = ErrorHandler(self.logger, max_input_size=max_input_size)
        self.flattener = Flattener(self.logger)
        self.unflattener = Unflattener(conflict_policy=conflict_policy, logger=self.logger)
        self.serializer = LiteralSerializer(self.logger)
        self.table_codec = TableCodec(self.logger, max_depth=max_depth)
        self.encoder = WorkbookEncoder(sheet_name=sheet_name, logger=self.logger)
        self.decoder = WorkbookDecoder(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def convert(self, direction: Any, raw_input: bytes) -> bytes:
        """
        Convert uploaded bytes in the requested direction.

        Args:
            direction: A Direction or its tag ("literal-to-table",
                "table-to-literal", or the legacy "ts-to-excel"/"excel-to-ts")
            raw_input: Uploaded file contents

        Returns:
            Workbook bytes, or UTF-8 literal source text

        Raises:
            ConversionError: Any subclass; the call fails as a whole
        """
        direction = Direction.from_value(direction)
        self.error_handler.check_input(raw_input)

        self.logger.info(f"Starting conversion: {direction.value}, input={len(raw_input)}B")

        profile = (self.profiler.profile_operation(direction.value, len(raw_input))
                   if self.profiler else nullcontext())
        try:
            with profile as session:
                if direction == Direction.LITERAL_TO_TABLE:
                    output, entry_count = self._literal_to_table(raw_input)
                else:
                    output, entry_count = self._table_to_literal(raw_input)
                if session is not None:
                    session.record_output(len(output), entry_count)
        except ConversionError as e:
            self.logger.error(f"Conversion failed ({direction.value}): {e}")
            raise

        self.logger.info(f"Converted {entry_count} entries: {direction.value}, output={len(output)}B")
        return output

    def convert_file(self, direction: Any, raw_input: bytes) -> ConversionOutput:
        """
        Convert uploaded bytes and attach download metadata.

        Returns:
            ConversionOutput with data, filename and content type
        """
        direction = Direction.from_value(direction)
        data = self.convert(direction, raw_input)
        if direction == Direction.LITERAL_TO_TABLE:
            return ConversionOutput(data=data, filename=TABLE_FILENAME,
                                    content_type=TABLE_CONTENT_TYPE)
        return ConversionOutput(data=data, filename=LITERAL_FILENAME,
                                content_type=LITERAL_CONTENT_TYPE)

    def literal_to_entries(self, text: str) -> List[FlatEntry]:
        """Parse literal source text and flatten it."""
        tree = LiteralParser(max_depth=self.max_depth, logger=self.logger).parse(text)
        return self.flattener.flatten(tree)

    def table_to_tree(self, table: Table) -> Node:
        """Read a decoded table and rebuild the translation tree."""
        entries = self.table_codec.read_table(table)

        validation = ValidationUtils.validate_entries(
            entries, strict=self.conflict_policy == ConflictPolicy.ERROR
        )
        for warning in validation.warnings:
            self.logger.warning(warning)
        if not validation.is_valid:
            error = validation.errors[0]
            raise PathConflict(
                f"Key path conflict: {error.message}",
                context={"path": error.location, "conflicts": len(validation.errors)}
            )

        return self.unflattener.unflatten(entries)

    def _literal_to_table(self, raw_input: bytes) -> Tuple[bytes, int]:
        entries = self.literal_to_entries(self._decode_text(raw_input))
        table = self.table_codec.write_table(entries)
        return self.encoder.encode(table), len(entries)

    def _table_to_literal(self, raw_input: bytes) -> Tuple[bytes, int]:
        table = self.decoder.decode(raw_input)
        tree = self.table_to_tree(table)
        return self.serializer.serialize(tree).encode("utf-8"), len(table)

    @staticmethod
    def _decode_text(raw_input: bytes) -> str:
        try:
            return raw_input.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedLiteral(f"Literal source is not valid UTF-8 text: {e.reason}")


def convert(direction: Any, raw_input: bytes, **options: Any) -> bytes:
    """
    Convert ``raw_input`` with a fresh LocaleConverter.

    Keyword options are passed to the LocaleConverter constructor.
    """
    return LocaleConverter(**options).convert(direction, raw_input)
