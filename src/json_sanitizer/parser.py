"""Schema parser loading JSON schema documents from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from .types import PN_DEFINITIONS, PN_PROPERTIES
from .error_handler import ErrorHandler
from .models import SchemaDocument
from .utils.validation import ValidationUtils
from .unnester import is_externalizable, is_reference, has_properties


class SchemaParser:
    """
    JSON schema parser with validation.

    Turns files and strings into schema trees. Unreadable or invalid sources
    never raise out of ``load_document``; they produce a document without a
    root instead.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the schema parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = error_handler or ErrorHandler(self.logger)

    def parse(self, json_string: str) -> Dict[str, Any]:
        """
        Parse a JSON string into a schema root.

        Args:
            json_string: JSON string to parse

        Returns:
            The parsed schema root object

        Raises:
            ValueError: If JSON is invalid or its root is not an object
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")

        self.logger.debug(f"Parsed schema with {len(data)} top-level keys")
        return data

    def load_document(self, path: Union[str, Path]) -> SchemaDocument:
        """
        Read and parse the schema stored at ``path``.

        Args:
            path: Location of the schema file

        Returns:
            SchemaDocument whose root is None when the source is unavailable
        """
        path = Path(path)

        try:
            json_string = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Cannot read schema '{path}': {e}")
            return SchemaDocument(origin=path, root=None)

        try:
            root = self.parse(json_string)
        except ValueError as e:
            self.logger.error(f"Cannot parse schema '{path}': {e}")
            return SchemaDocument(origin=path, root=None)

        self.logger.info(f"Loaded schema from {path}")
        return SchemaDocument(origin=path, root=root)

    def get_structure_statistics(self, root: Dict[str, Any]) -> Dict[str, Any]:
        """
        Get statistics about the nesting of a schema.

        Args:
            root: Parsed schema root

        Returns:
            Dictionary with structure statistics
        """
        definitions = root.get(PN_DEFINITIONS)
        if not isinstance(definitions, dict):
            definitions = {}

        stats = {
            "max_depth": ValidationUtils.calculate_max_depth(root),
            "definitions_count": len(definitions),
            "reference_count": 0,
            "inline_object_count": 0,
            "externalizable_count": sum(1 for node in definitions.values() if is_externalizable(node))
        }

        self._count_elements(root, stats, is_root=True)
        return stats

    def _count_elements(self, data: Any, stats: Dict[str, Any], is_root: bool = False) -> None:
        """Recursively count references and inline object schemas."""
        if isinstance(data, dict):
            if is_reference(data):
                stats["reference_count"] += 1
            elif has_properties(data) and not is_root:
                stats["inline_object_count"] += 1

            for key, value in data.items():
                # Keys of these maps are names, not schemas
                if key in (PN_PROPERTIES, PN_DEFINITIONS) and isinstance(value, dict):
                    for schema in value.values():
                        self._count_elements(schema, stats, is_root=(key == PN_DEFINITIONS and is_root))
                else:
                    self._count_elements(value, stats)

        elif isinstance(data, list):
            for item in data:
                self._count_elements(item, stats)
