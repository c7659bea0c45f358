"""Validation utilities for uploads and flattened entries."""

from typing import List, Sequence, Set

from ..constants import KEY_PATH_DELIMITER
from ..models import FlatEntry
from ..types import ValidationResult, ValidationError, ErrorType


class ValidationUtils:
    """Utility class for validating conversion inputs."""

    @staticmethod
    def validate_raw_input(raw_input: bytes, max_size: int) -> ValidationResult:
        """
        Validate an uploaded payload before conversion.

        Args:
            raw_input: Uploaded bytes
            max_size: Maximum accepted size in bytes

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not raw_input:
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="No file provided",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if len(raw_input) > max_size:
            errors.append(ValidationError(
                type=ErrorType.SIZE,
                message=f"File is too large ({len(raw_input)} bytes, limit {max_size} bytes)",
                location="input"
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)

    @staticmethod
    def validate_entries(entries: Sequence[FlatEntry], strict: bool = False) -> ValidationResult:
        """
        Check flattened entries for keys that will collide when unflattened.

        Duplicate keys are always warnings (the last one wins). A key that
        is also the parent path of another key is a warning, or an error
        when ``strict`` is set.

        Args:
            entries: Entries read from a table
            strict: Report path conflicts as errors

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        keys: Set[str] = set()
        duplicates: List[str] = []
        for entry in entries:
            if entry.key in keys and entry.key not in duplicates:
                duplicates.append(entry.key)
            keys.add(entry.key)

        for key in duplicates:
            warnings.append(f"Duplicate key '{key}'; the last value wins")

        for key in ValidationUtils.find_prefix_conflicts(keys):
            message = f"Key '{key}' has a value and nested keys"
            if strict:
                errors.append(ValidationError(type=ErrorType.PATH, message=message, location=key))
            else:
                warnings.append(message)

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)

    @staticmethod
    def find_prefix_conflicts(keys: Set[str]) -> List[str]:
        """Keys that are also a parent path of another key, sorted."""
        conflicts = set()
        for key in keys:
            segments = key.split(KEY_PATH_DELIMITER)
            for end in range(1, len(segments)):
                parent = KEY_PATH_DELIMITER.join(segments[:end])
                if parent in keys:
                    conflicts.add(parent)
        return sorted(conflicts)
