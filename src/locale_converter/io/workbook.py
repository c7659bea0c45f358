"""Spreadsheet container encoding and decoding backed by openpyxl."""

import io
import logging
import zipfile
from typing import Any, List, Optional, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import IllegalCharacterError, InvalidFileException

from ..constants import SHEET_NAME
from ..models import Table
from ..types import ConversionError, EmptySheet, ErrorType, UnreadableWorkbook


class WorkbookEncoder:
    """Writes a Table into a single-sheet .xlsx workbook."""

    def __init__(self, sheet_name: str = SHEET_NAME,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the workbook encoder.

        Args:
            sheet_name: Title of the generated sheet
            logger: Optional logger instance
        """
        self.sheet_name = sheet_name
        self.logger = logger or logging.getLogger(__name__)

    def encode(self, table: Table) -> bytes:
        """
        Encode a table as workbook bytes.

        Args:
            table: Header plus data rows; width hints are applied when present

        Returns:
            Contents of an .xlsx file

        Carriage returns in text are written as line feeds, since workbook
        XML cannot keep them.
        """
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self.sheet_name

        for row_index, row in enumerate(table.to_rows(), start=1):
            for column_index, value in enumerate(row, start=1):
                if isinstance(value, str) and "\r" in value:
                    value = _normalize_newlines(value)
                try:
                    cell = sheet.cell(row=row_index, column=column_index, value=value)
                except IllegalCharacterError:
                    raise ConversionError(
                        f"Row for key '{row[0]}' contains characters a spreadsheet cannot store",
                        ErrorType.WORKBOOK,
                        context={"key": row[0]}
                    )
                # Translations are text, never formulas
                if cell.data_type == "f":
                    cell.data_type = "s"

        if table.column_widths:
            sheet.column_dimensions["A"].width = table.column_widths.key_width
            sheet.column_dimensions["B"].width = table.column_widths.value_width

        buffer = io.BytesIO()
        workbook.save(buffer)
        data = buffer.getvalue()

        self.logger.debug(f"Encoded {len(table)} rows into {len(data)} byte workbook")
        return data


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class WorkbookDecoder:
    """Reads the first sheet of a workbook into a Table."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, data: bytes) -> Table:
        """
        Decode workbook bytes into a table.

        The first non-blank row of the first sheet is the header; blank
        rows are skipped.

        Raises:
            UnreadableWorkbook: If the bytes are not a readable workbook
            EmptySheet: If the workbook has no sheets
        """
        try:
            workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
            raise UnreadableWorkbook(f"Could not read spreadsheet: {e}")

        try:
            if not workbook.worksheets:
                raise EmptySheet("Spreadsheet contains no sheets")

            sheet = workbook.worksheets[0]
            rows = [row for row in sheet.iter_rows(values_only=True)
                    if not self._is_blank_row(row)]
        finally:
            workbook.close()

        self.logger.debug(f"Decoded {len(rows)} non-blank rows from sheet '{sheet.title}'")
        return Table.from_rows(self._trim(rows))

    @staticmethod
    def _is_blank_row(row: Sequence[Any]) -> bool:
        return all(cell is None or cell == "" for cell in row)

    @staticmethod
    def _trim(rows: List[Sequence[Any]]) -> List[Sequence[Any]]:
        """Drop trailing empty cells so short rows stay short."""
        trimmed = []
        for row in rows:
            cells = list(row)
            while cells and cells[-1] is None:
                cells.pop()
            trimmed.append(cells)
        return trimmed
