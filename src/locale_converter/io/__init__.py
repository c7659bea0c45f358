"""Table and spreadsheet I/O for the Locale Converter."""

from .table_codec import TableCodec, COLUMN_LOOKUP
from .workbook import WorkbookEncoder, WorkbookDecoder

__all__ = ["TableCodec", "COLUMN_LOOKUP", "WorkbookEncoder", "WorkbookDecoder"]
