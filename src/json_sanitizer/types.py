"""Core type definitions for the JSON Schema Sanitizer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Externalization, SchemaDocument


# JSON Schema keywords the unnester looks at
PN_PROPERTIES = "properties"
PN_DEFINITIONS = "definitions"
PN_ITEMS = "items"
PN_REF = "$ref"

DEFINITIONS_POINTER = "#/definitions/"
ARRAY_ITEM_SUFFIX = "_item"


class ExternalizationKind(Enum):
    """Enumeration of externalization shapes."""
    OBJECT = "object"
    ARRAY_ITEM = "array_item"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    MISSING_SCHEMA = "missing_schema"
    FILESYSTEM = "filesystem"


@dataclass
class UnnestReport:
    """Result of a single unnest run over one schema root."""
    root: Dict[str, Any]
    externalizations: List['Externalization'] = field(default_factory=list)
    passes: int = 0
    definitions_created: bool = False

    @property
    def externalized_names(self) -> List[str]:
        return [record.name for record in self.externalizations]


@dataclass
class SanitizeResult:
    """Result of sanitizing one schema file."""
    success: bool
    source: Path
    output_path: Optional[Path] = None
    externalized: int = 0
    errors: Optional[List[str]] = None
    rendered: Optional[str] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class UnnesterInterface(ABC):
    """Abstract interface for the schema unnester."""

    @abstractmethod
    def transform(self, document: Optional['SchemaDocument']) -> Optional['SchemaDocument']:
        """Externalize nested inline objects of a schema document."""
        pass

    @abstractmethod
    def unnest_inlined_objects(self, root: Dict[str, Any]) -> UnnestReport:
        """Externalize nested inline objects of a schema root in place."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
