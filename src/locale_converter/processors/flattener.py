"""Flattener turning a translation tree into ordered dot-path entries."""

import logging
from typing import List, Optional

from ..constants import KEY_PATH_DELIMITER
from ..models import FlatEntry, Leaf, TreeValue
from ..types import InvalidKeyPath


class Flattener:
    """
    Depth-first, pre-order flattener for translation trees.

    Each leaf becomes one FlatEntry whose key is the dot-joined path of
    node keys above it. Sibling order is the node's insertion order.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, tree: TreeValue, prefix: str = "") -> List[FlatEntry]:
        """
        Flatten a tree into dot-path entries.

        A bare leaf at the root has no key path and yields no entries.

        Args:
            tree: Tree to flatten
            prefix: Key path of ``tree`` itself

        Returns:
            Entries in pre-order traversal order

        Raises:
            InvalidKeyPath: If any node has an empty key
        """
        entries: List[FlatEntry] = []
        self._flatten_recursive(tree, prefix, entries)

        if not prefix:
            if isinstance(tree, Leaf):
                self.logger.warning("Root value is a bare string; nothing to flatten")
            else:
                self.logger.debug(f"Flattened tree into {len(entries)} entries")
        return entries

    def _flatten_recursive(self, tree: TreeValue, prefix: str,
                           entries: List[FlatEntry]) -> None:
        if isinstance(tree, Leaf):
            if prefix:
                entries.append(FlatEntry(key=prefix, value=tree.value))
            return

        for key, child in tree.items():
            if not key:
                raise InvalidKeyPath(
                    f"Empty key under '{prefix}'" if prefix else "Empty key at the top level",
                    context={"parent": prefix}
                )
            full_key = f"{prefix}{KEY_PATH_DELIMITER}{key}" if prefix else key
            self._flatten_recursive(child, full_key, entries)


def flatten(tree: TreeValue, prefix: str = "") -> List[FlatEntry]:
    """Flatten ``tree`` with a default Flattener."""
    return Flattener().flatten(tree, prefix)
