"""Validation utilities for schema input."""

import json
from typing import Any, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType

# Nesting levels count every object and array, so one nested schema object adds two
DEEP_NESTING_WARNING_DEPTH = 64
MAX_NESTING_DEPTH = 200


class ValidationUtils:
    """Utility class for validating schema input before it is unnested."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Validate structure
        structure_errors, structure_warnings = ValidationUtils.validate_schema_root(data)
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_schema_root(data: Any) -> Tuple[List[ValidationError], List[str]]:
        """Validate the shape of a parsed schema root."""
        errors = []
        warnings = []

        if not isinstance(data, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Schema root must be an object, got {type(data).__name__}",
                location="root"
            ))
            return errors, warnings

        max_depth = ValidationUtils.calculate_max_depth(data)
        if max_depth > MAX_NESTING_DEPTH:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Schema nesting too deep (depth: {max_depth}, limit: {MAX_NESTING_DEPTH})",
                location="root"
            ))
            return errors, warnings

        if max_depth > DEEP_NESTING_WARNING_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). This may impact performance.")

        if "definitions" not in data:
            warnings.append("Schema has no 'definitions' node; an empty one will be created.")
        elif not isinstance(data["definitions"], dict):
            warnings.append("Schema 'definitions' node is not an object and will be left unchanged.")

        if "properties" in data and not isinstance(data["properties"], dict):
            warnings.append("Schema 'properties' node is not an object; nothing will be externalized.")

        return errors, warnings

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            child_depth = ValidationUtils.calculate_max_depth(child, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth
