"""Tests for validation utilities."""

from locale_converter.models import FlatEntry
from locale_converter.types import ErrorType
from locale_converter.utils.validation import ValidationUtils


def _entries(*keys):
    return [FlatEntry(key=key, value="x") for key in keys]


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_raw_input(self):
        """Test upload validation."""
        assert ValidationUtils.validate_raw_input(b"data", max_size=10).is_valid

        empty = ValidationUtils.validate_raw_input(b"", max_size=10)
        assert not empty.is_valid
        assert empty.errors[0].location == "input"

        large = ValidationUtils.validate_raw_input(b"x" * 11, max_size=10)
        assert not large.is_valid
        assert "11 bytes, limit 10 bytes" in large.errors[0].message

    def test_validate_clean_entries(self):
        """Test entries without collisions."""
        result = ValidationUtils.validate_entries(_entries("a.b", "a.c", "d"))

        assert result.is_valid
        assert result.warnings == []

    def test_duplicate_keys_warn(self):
        """Test that duplicates are reported once each."""
        result = ValidationUtils.validate_entries(_entries("a", "b", "a", "a"))

        assert result.is_valid
        assert result.warnings == ["Duplicate key 'a'; the last value wins"]

    def test_prefix_conflicts_warn(self):
        """Test that a value used as a parent path is a warning by default."""
        result = ValidationUtils.validate_entries(_entries("menu", "menu.open.now"))

        assert result.is_valid
        assert result.warnings == ["Key 'menu' has a value and nested keys"]

    def test_prefix_conflicts_strict(self):
        """Test that strict validation reports conflicts as errors."""
        result = ValidationUtils.validate_entries(_entries("menu.open", "menu"), strict=True)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.PATH
        assert result.errors[0].location == "menu"

    def test_find_prefix_conflicts(self):
        """Test conflict detection across several levels."""
        keys = {"a", "a.b", "a.b.c", "x.y", "xy"}

        assert ValidationUtils.find_prefix_conflicts(keys) == ["a", "a.b"]
