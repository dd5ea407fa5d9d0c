"""Error handling implementation for the JSON Schema Sanitizer."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for sanitizer operations.

    Validates schema input and classifies failures raised while loading,
    unnesting or writing schemas into recoverable and fatal ones.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_string(input_data)
        except (TypeError, AttributeError, RecursionError) as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide recovery suggestions.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.FILESYSTEM:
            return self._handle_filesystem_error(error)
        elif error.error_type in (ErrorType.SYNTAX, ErrorType.STRUCTURE):
            return ErrorResponse(
                can_recover=False,
                suggested_action="Fix the schema so that it is a valid JSON object of moderate nesting "
                               "and retry.",
                partial_results=None
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                partial_results=None
            )

    def _handle_filesystem_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle filesystem-related errors."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Check file permissions and available disk space next to the input schema. "
                           "The sanitized schema was produced in memory but not written.",
            partial_results=error.context.get('rendered') if error.context else None
        )
