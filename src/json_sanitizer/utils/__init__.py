"""Utility functions for the JSON Schema Sanitizer."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
