"""Serializer rendering translation trees as exported object literals."""

import logging
import re
from typing import List, Optional

from .constants import INDENT_UNIT, LITERAL_PREFIX, LITERAL_SUFFIX
from .models import Leaf, Node, TreeValue


_BARE_KEY = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class LiteralSerializer:
    """
    Renders a tree as ``export default { ... } as const;``.

    Layout is fixed: one entry per line, two-space indentation per level,
    no trailing comma after the last entry. Only single quotes in values
    are escaped; keys are quoted when they are not plain identifiers but
    are never escaped.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def serialize(self, tree: TreeValue) -> str:
        """
        Serialize a tree to literal source text.

        Args:
            tree: Tree to render, normally a Node

        Returns:
            Complete file contents ending with a newline
        """
        if isinstance(tree, Node):
            for key in self._unsafe_keys(tree):
                self.logger.warning(f"Key {key!r} contains a single quote and will not parse back")
        return f"{LITERAL_PREFIX}{self._render(tree, 1)}{LITERAL_SUFFIX}"

    def _render(self, tree: TreeValue, depth: int) -> str:
        if isinstance(tree, Leaf):
            return self.render_string(tree.value)

        indent = INDENT_UNIT * depth
        entries = list(tree.items())
        result = "{\n"
        for index, (key, child) in enumerate(entries):
            result += f"{indent}{self.render_key(key)}: {self._render(child, depth + 1)}"
            result += "\n" if index == len(entries) - 1 else ",\n"
        result += f"{INDENT_UNIT * (depth - 1)}}}"
        return result

    @staticmethod
    def render_key(key: str) -> str:
        """Render a key bare when it is an identifier, quoted otherwise."""
        if _BARE_KEY.match(key) and "-" not in key:
            return key
        return f"'{key}'"

    @staticmethod
    def render_string(value: str) -> str:
        """Render a leaf value as a single-quoted string."""
        return "'" + value.replace("'", "\\'") + "'"

    def _unsafe_keys(self, node: Node) -> List[str]:
        unsafe = []
        for key, child in node.items():
            if "'" in key:
                unsafe.append(key)
            if isinstance(child, Node):
                unsafe.extend(self._unsafe_keys(child))
        return unsafe


def serialize_literal(tree: TreeValue) -> str:
    """Serialize ``tree`` with a default LiteralSerializer."""
    return LiteralSerializer().serialize(tree)
