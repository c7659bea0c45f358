"""Two-column table model exchanged with the spreadsheet encoder/decoder."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from ..constants import HEADER_KEY, HEADER_VALUE


@dataclass(frozen=True)
class ColumnWidths:
    """Character-width hints for the key and value columns."""

    key_width: int
    value_width: int


@dataclass
class Table:
    """
    A header row plus ordered data rows.

    Rows read back from a spreadsheet may carry more or fewer cells than
    the header and raw cell values (numbers, booleans, ``None``); the
    table codec resolves and coerces them.
    """

    header: Tuple[Any, ...] = (HEADER_KEY, HEADER_VALUE)
    rows: List[Tuple[Any, ...]] = field(default_factory=list)
    column_widths: Optional[ColumnWidths] = None

    def __post_init__(self):
        """Normalize header and rows to tuples."""
        self.header = tuple(self.header)
        self.rows = [tuple(row) for row in self.rows]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Table":
        """Create a table whose first row is the header."""
        if not rows:
            return cls(header=(), rows=[])
        return cls(header=tuple(rows[0]), rows=[tuple(row) for row in rows[1:]])

    def to_rows(self) -> List[List[Any]]:
        """Header followed by every data row."""
        return [list(self.header)] + [list(row) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows
