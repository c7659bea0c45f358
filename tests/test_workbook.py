"""Tests for the openpyxl workbook encoder and decoder."""

import io
import pytest
from unittest.mock import MagicMock, patch

from openpyxl import load_workbook

from locale_converter.io import TableCodec, WorkbookDecoder, WorkbookEncoder
from locale_converter.models import FlatEntry, Table
from locale_converter.types import ConversionError, EmptySheet, ErrorType, UnreadableWorkbook


class TestWorkbookEncoder:
    """Tests for WorkbookEncoder class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.encoder = WorkbookEncoder()
        self.codec = TableCodec()

    def test_encode_rows_and_sheet_name(self):
        """Test that rows land on a sheet named Translations."""
        table = self.codec.write_table([
            FlatEntry(key="home.title", value="Welcome"),
            FlatEntry(key="footer", value="Bye"),
        ])

        data = self.encoder.encode(table)
        workbook = load_workbook(io.BytesIO(data))

        assert workbook.sheetnames == ["Translations"]
        rows = [list(row) for row in workbook.active.iter_rows(values_only=True)]
        assert rows == [["Key", "Value"], ["home.title", "Welcome"], ["footer", "Bye"]]

    def test_encode_column_widths(self):
        """Test that width hints are applied to columns A and B."""
        table = self.codec.write_table([FlatEntry(key="k" * 20, value="v" * 70)])

        sheet = load_workbook(io.BytesIO(self.encoder.encode(table))).active

        assert sheet.column_dimensions["A"].width == 22
        assert sheet.column_dimensions["B"].width == 72

    def test_encode_custom_sheet_name(self):
        """Test a configured sheet title."""
        encoder = WorkbookEncoder(sheet_name="Strings")

        workbook = load_workbook(io.BytesIO(encoder.encode(Table())))

        assert workbook.sheetnames == ["Strings"]

    def test_encode_formula_like_text(self):
        """Test that values starting with '=' stay text."""
        table = self.codec.write_table([FlatEntry(key="eq", value="=SUM(A1)")])

        decoded = WorkbookDecoder().decode(self.encoder.encode(table))

        assert decoded.rows == [("eq", "=SUM(A1)")]

    def test_encode_normalizes_carriage_returns(self):
        """Test that CRLF and lone CR are stored as line feeds."""
        table = self.codec.write_table([
            FlatEntry(key="crlf", value="x\r\ny"),
            FlatEntry(key="cr", value="p\rq"),
        ])

        decoded = WorkbookDecoder().decode(self.encoder.encode(table))

        assert decoded.rows == [("crlf", "x\ny"), ("cr", "p\nq")]

    def test_encode_illegal_characters(self):
        """Test values a spreadsheet cannot store."""
        table = self.codec.write_table([FlatEntry(key="bad", value="bell\x07")])

        with pytest.raises(ConversionError, match="Row for key 'bad'") as exc_info:
            self.encoder.encode(table)

        assert exc_info.value.error_type == ErrorType.WORKBOOK


class TestWorkbookDecoder:
    """Tests for WorkbookDecoder class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.decoder = WorkbookDecoder()

    def test_decode_first_sheet_only(self, make_workbook):
        """Test that only the first sheet is read."""
        data = make_workbook(
            [["Key", "Value"], ["a", "1"]],
            extra_sheets=[[["Key", "Value"], ["b", "2"]]]
        )

        table = self.decoder.decode(data)

        assert table.header == ("Key", "Value")
        assert table.rows == [("a", "1")]

    def test_decode_skips_blank_rows(self, make_workbook):
        """Test that blank rows before and between data are skipped."""
        data = make_workbook([
            [None, None],
            ["Key", "Value"],
            ["a", "1"],
            [None, None],
            ["b", "2"],
        ])

        table = self.decoder.decode(data)

        assert table.header == ("Key", "Value")
        assert table.rows == [("a", "1"), ("b", "2")]

    def test_decode_raw_cell_values(self, make_workbook):
        """Test that numeric cells are passed through for the codec to coerce."""
        table = self.decoder.decode(make_workbook([["Key", "Value"], ["count", 3]]))

        assert table.rows == [("count", 3)]

    def test_decode_short_rows(self, make_workbook):
        """Test rows with a missing trailing cell."""
        table = self.decoder.decode(make_workbook([["Key", "Value"], ["a", "1"], ["b"]]))

        assert table.rows == [("a", "1"), ("b",)]

    def test_decode_empty_sheet(self, make_workbook):
        """Test a workbook whose sheet has no cells."""
        table = self.decoder.decode(make_workbook([]))

        assert table.is_empty()

    def test_decode_garbage(self):
        """Test bytes that are not a workbook."""
        with pytest.raises(UnreadableWorkbook, match="Could not read spreadsheet") as exc_info:
            self.decoder.decode(b"export default {} as const;")

        assert exc_info.value.error_type == ErrorType.WORKBOOK

    def test_decode_no_sheets(self):
        """Test a workbook without worksheets."""
        workbook = MagicMock()
        workbook.worksheets = []

        with patch("locale_converter.io.workbook.load_workbook", return_value=workbook):
            with pytest.raises(EmptySheet) as exc_info:
                self.decoder.decode(b"PK")

        assert exc_info.value.error_type == ErrorType.EMPTY_SHEET
        workbook.close.assert_called_once()
