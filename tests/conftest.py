"""Pytest configuration and fixtures."""

import io
import pytest
import tempfile
from pathlib import Path
from typing import Any, List, Sequence

from openpyxl import Workbook

from locale_converter.models import Leaf, Node


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_literal():
    """Hand-written translation literal, trailing commas included."""
    return """export default {
  home: {
    title: 'Welcome',
  },
  footer: 'Bye',
} as const;
"""


@pytest.fixture
def sample_tree():
    """Tree equivalent of sample_literal."""
    return Node({
        "home": Node({"title": Leaf("Welcome")}),
        "footer": Leaf("Bye"),
    })


@pytest.fixture
def nested_tree():
    """Larger tree with quoted keys, quotes in values and deep nesting."""
    return Node({
        "nav-bar": Node({
            "home": Leaf("Home"),
            "about": Leaf("About us"),
        }),
        "navBar": Leaf("Navigation"),
        "messages": Node({
            "errors": Node({
                "notFound": Leaf("It's not here"),
                "server": Leaf("Line one\nLine two"),
            }),
            "path": Leaf("C:\\Users\\me"),
        }),
        "2fa": Leaf("Two-factor"),
        "$count": Leaf("{n} items"),
    })


@pytest.fixture
def make_workbook():
    """Build .xlsx bytes from rows; each call may pass a custom sheet list."""
    def _make(rows: Sequence[Sequence[Any]], extra_sheets: List[Sequence[Sequence[Any]]] = ()) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Sheet1"
        for row in rows:
            sheet.append(list(row))
        for index, extra_rows in enumerate(extra_sheets):
            extra = workbook.create_sheet(f"Extra{index}")
            for row in extra_rows:
                extra.append(list(row))
        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()
    return _make
