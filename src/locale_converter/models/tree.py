"""Translation tree model: string leaves under ordered nested nodes."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """A terminal translation string."""

    value: str

    def __post_init__(self):
        """Validate leaf after initialization."""
        if not isinstance(self.value, str):
            raise ValueError(f"Leaf value must be a string, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Node:
    """
    A nested mapping from key to child tree.

    Iteration order of ``children`` is the order keys were written in the
    source and is preserved by every transformation.
    """

    children: Dict[str, "TreeValue"] = field(default_factory=dict)

    def __post_init__(self):
        """Validate node after initialization."""
        for key, child in self.children.items():
            if not isinstance(key, str):
                raise ValueError(f"Node keys must be strings, got {type(key).__name__}")
            if not isinstance(child, (Leaf, Node)):
                raise ValueError(f"Invalid child for key '{key}': {type(child).__name__}")

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, key: str) -> bool:
        return key in self.children

    def __getitem__(self, key: str) -> "TreeValue":
        return self.children[key]

    def items(self) -> Iterator[Tuple[str, "TreeValue"]]:
        """Iterate (key, child) pairs in insertion order."""
        return iter(self.children.items())

    def keys(self):
        return self.children.keys()

    def is_empty(self) -> bool:
        return not self.children

    def depth(self) -> int:
        """Number of nested node levels, counting this one."""
        child_depths = [child.depth() for child in self.children.values()
                        if isinstance(child, Node)]
        return 1 + max(child_depths, default=0)


TreeValue = Union[Leaf, Node]


def coerce_leaf(value: Any) -> str:
    """
    Convert a non-mapping value to its leaf string.

    Follows script-style default string coercion so that values read from
    spreadsheets or plain data render the way the exported files expect:
    lists are comma-joined (never recursed into as structure), booleans
    are lowercase, integral floats drop their fractional part.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else coerce_leaf(item) for item in value)
    return str(value)


def tree_from_data(data: Any) -> TreeValue:
    """Build a tree from plain Python data (dicts become nodes)."""
    if isinstance(data, dict):
        return Node({str(key): tree_from_data(value) for key, value in data.items()})
    return Leaf(coerce_leaf(data))
