"""Data models for the Locale Converter."""

from .tree import Leaf, Node, TreeValue, coerce_leaf, tree_from_data
from .flat_entry import FlatEntry
from .table import Table, ColumnWidths

__all__ = [
    "Leaf",
    "Node",
    "TreeValue",
    "coerce_leaf",
    "tree_from_data",
    "FlatEntry",
    "Table",
    "ColumnWidths",
]
