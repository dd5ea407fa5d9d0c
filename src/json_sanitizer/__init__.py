"""
JSON Schema Sanitizer - Flatten nested JSON schemas.

Moves nested inline object definitions of a JSON schema into the top-level
'definitions' map and replaces them with '$ref' pointers.
"""

__version__ = "1.0.0"

from .json_sanitizer import JSONSanitizer
from .unnester import Unnester
from .parser import SchemaParser
from .models import SchemaDocument, Externalization
from .types import UnnestReport, SanitizeResult, ExternalizationKind

__all__ = [
    "JSONSanitizer",
    "Unnester",
    "SchemaParser",
    "SchemaDocument",
    "Externalization",
    "UnnestReport",
    "SanitizeResult",
    "ExternalizationKind",
]
