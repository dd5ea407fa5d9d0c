"""Data models for the JSON Schema Sanitizer."""

from .schema_document import SchemaDocument
from .externalization import Externalization

__all__ = ["SchemaDocument", "Externalization"]
