"""Flat entry model: one dot-path key and its translation string."""

from dataclasses import dataclass
from typing import List, Tuple

from ..constants import KEY_PATH_DELIMITER
from ..types import InvalidKeyPath


@dataclass(frozen=True)
class FlatEntry:
    """
    A single row of flattened translation data.

    The key is the dot-joined path of nested object keys leading to
    the value, e.g. ``home.title``.
    """

    key: str
    value: str

    def __post_init__(self):
        """Validate entry after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate key path integrity."""
        if not isinstance(self.key, str) or not self.key:
            raise InvalidKeyPath("key cannot be empty", context={"key": self.key})

        if any(segment == "" for segment in self.key.split(KEY_PATH_DELIMITER)):
            raise InvalidKeyPath(
                f"key '{self.key}' contains an empty path segment",
                context={"key": self.key}
            )

        if not isinstance(self.value, str):
            raise ValueError(f"value must be a string, got {type(self.value).__name__}")

    @property
    def segments(self) -> List[str]:
        """Path segments of the key."""
        return self.key.split(KEY_PATH_DELIMITER)

    @property
    def depth(self) -> int:
        """Number of nested objects the key path needs."""
        return len(self.segments)

    def to_row(self) -> Tuple[str, str]:
        return self.key, self.value
