"""Codec between flat entries and the two-column Key/Value table."""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..constants import (
    DEFAULT_MAX_DEPTH,
    HEADER_KEY,
    HEADER_VALUE,
    KEY_WIDTH_CAP,
    KEY_WIDTH_FLOOR,
    VALUE_WIDTH_CAP,
    VALUE_WIDTH_FLOOR,
    WIDTH_PADDING,
)
from ..models import ColumnWidths, FlatEntry, Table, coerce_leaf
from ..types import EmptyTable, InvalidKeyPath, MissingColumns, TableCodecInterface


# Header cell -> logical column
COLUMN_LOOKUP = {
    "Key": "key",
    "key": "key",
    "Value": "value",
    "value": "value",
}


class TableCodec(TableCodecInterface):
    """
    Reads and writes the Key/Value table carried inside a spreadsheet.

    The first row is the header; every following row is one flattened
    entry, in flatten order.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the table codec.

        Args:
            logger: Optional logger instance
            max_depth: Maximum number of path segments in a key
        """
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth

    def read_table(self, table: Table) -> List[FlatEntry]:
        """
        Map table rows to flat entries.

        Rows are mapped independently and duplicate keys are kept; a later
        unflatten resolves them.

        Args:
            table: Header plus data rows

        Returns:
            One entry per data row, in row order

        Raises:
            EmptyTable: If there are no data rows
            MissingColumns: If the Key/Value columns cannot be resolved
            InvalidKeyPath: If a key is malformed or nests deeper than max_depth
        """
        if table.is_empty():
            raise EmptyTable("Spreadsheet is empty or has no data")

        key_index, value_index = self.resolve_columns(table.header)
        entries = []

        # Sheet row numbers: the header is row 1
        for row_number, row in enumerate(table.rows, start=2):
            key = self._cell(row, key_index)
            value = self._cell(row, value_index)

            if row_number == 2 and (self._is_blank(key) or value is None):
                raise MissingColumns('Spreadsheet must have "Key" and "Value" columns')
            if self._is_blank(key):
                raise MissingColumns(
                    f"Row {row_number} has no key",
                    context={"row": row_number}
                )

            entry = FlatEntry(
                key=coerce_leaf(key).strip(),
                value="" if value is None else coerce_leaf(value)
            )
            if entry.depth > self.max_depth:
                raise InvalidKeyPath(
                    f"Row {row_number} key nests {entry.depth} levels, "
                    f"exceeding the maximum depth of {self.max_depth}",
                    context={"row": row_number, "depth": entry.depth}
                )
            entries.append(entry)

        self.logger.debug(f"Read {len(entries)} entries from table")
        return entries

    def write_table(self, entries: Sequence[FlatEntry]) -> Table:
        """
        Map flat entries to table rows.

        Args:
            entries: Entries in flatten order

        Returns:
            Table with the Key/Value header, one row per entry and width hints
        """
        rows = [entry.to_row() for entry in entries]
        table = Table(
            header=(HEADER_KEY, HEADER_VALUE),
            rows=rows,
            column_widths=self.column_widths(entries)
        )
        self.logger.debug(f"Wrote {len(rows)} entries to table")
        return table

    @staticmethod
    def column_widths(entries: Sequence[FlatEntry]) -> ColumnWidths:
        """Width hints sized to the longest key and value."""
        max_key_length = max((len(entry.key) for entry in entries), default=0)
        max_value_length = max((len(entry.value) for entry in entries), default=0)
        return ColumnWidths(
            key_width=min(max(max_key_length, KEY_WIDTH_FLOOR) + WIDTH_PADDING, KEY_WIDTH_CAP),
            value_width=min(max(max_value_length, VALUE_WIDTH_FLOOR) + WIDTH_PADDING, VALUE_WIDTH_CAP)
        )

    @staticmethod
    def resolve_columns(header: Sequence[Any]) -> Tuple[Optional[int], Optional[int]]:
        """Indexes of the key and value columns, ``None`` when absent."""
        indexes = {}
        for index, name in enumerate(header):
            column = COLUMN_LOOKUP.get(name) if isinstance(name, str) else None
            if column and column not in indexes:
                indexes[column] = index
        return indexes.get("key"), indexes.get("value")

    @staticmethod
    def _cell(row: Sequence[Any], index: Optional[int]) -> Any:
        if index is None or index >= len(row):
            return None
        return row[index]

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())
