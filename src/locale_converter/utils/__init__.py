"""Utility functions for the Locale Converter."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
