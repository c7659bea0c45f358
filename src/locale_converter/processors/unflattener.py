"""Unflattener rebuilding a translation tree from dot-path entries."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..constants import KEY_PATH_DELIMITER
from ..models import FlatEntry, Node, tree_from_data
from ..types import ConflictPolicy, PathConflict


class Unflattener:
    """
    Rebuilds a nested tree from an ordered sequence of flat entries.

    Intermediate nodes are created on first use, so the resulting key
    order follows the order in which each path segment first appears.
    When a key path collides with an earlier one (a string where a nested
    object is needed, or the reverse) the conflict policy decides whether
    the later entry overwrites the earlier value or the call fails.
    """

    def __init__(self, conflict_policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the unflattener.

        Args:
            conflict_policy: Behavior on key path collisions
            logger: Optional logger instance
        """
        self.conflict_policy = conflict_policy
        self.logger = logger or logging.getLogger(__name__)

    def unflatten(self, entries: Iterable[FlatEntry]) -> Node:
        """
        Rebuild a tree from flat entries.

        Args:
            entries: Entries in the order they should be applied

        Returns:
            Root node of the rebuilt tree

        Raises:
            PathConflict: If a collision occurs under ConflictPolicy.ERROR
        """
        overwritten: List[str] = []
        root: Dict[str, Any] = {}
        count = 0

        for entry in entries:
            self._insert(root, entry, overwritten)
            count += 1

        if overwritten:
            self.logger.warning(
                f"Overwrote {len(overwritten)} conflicting key path(s): "
                f"{', '.join(overwritten)}"
            )
        self.logger.debug(f"Unflattened {count} entries into {len(root)} top-level keys")

        return tree_from_data(root)

    def _insert(self, root: Dict[str, Any], entry: FlatEntry,
                overwritten: List[str]) -> None:
        segments = entry.segments
        current = root

        for depth, segment in enumerate(segments[:-1]):
            existing = current.get(segment)
            if not isinstance(existing, dict):
                if existing is not None:
                    path = KEY_PATH_DELIMITER.join(segments[:depth + 1])
                    self._handle_conflict(
                        path, entry, overwritten,
                        f"'{path}' holds a string but '{entry.key}' needs it to be an object"
                    )
                current[segment] = {}
            current = current[segment]

        last = segments[-1]
        if isinstance(current.get(last), dict):
            self._handle_conflict(
                entry.key, entry, overwritten,
                f"'{entry.key}' holds nested keys but is also given a string value"
            )
        current[last] = entry.value

    def _handle_conflict(self, path: str, entry: FlatEntry, overwritten: List[str],
                         message: str) -> None:
        if self.conflict_policy == ConflictPolicy.ERROR:
            raise PathConflict(
                f"Key path conflict: {message}",
                context={"path": path, "key": entry.key}
            )
        overwritten.append(path)


def unflatten(entries: Iterable[FlatEntry],
              conflict_policy: ConflictPolicy = ConflictPolicy.OVERWRITE) -> Node:
    """Unflatten ``entries`` with a default Unflattener."""
    return Unflattener(conflict_policy=conflict_policy).unflatten(entries)
