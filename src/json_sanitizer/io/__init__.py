"""File I/O operations for the JSON Schema Sanitizer."""

from .file_writer import FileWriter

__all__ = ["FileWriter"]
