"""File writer utilities for sanitized schema output."""

import json
import logging
from typing import Any, Dict, Optional
from ..models import SchemaDocument
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    File writer for sanitized schemas.

    Output goes next to the input schema, named after it with a suffix
    appended (``schema.json`` becomes ``schema.json.san``).
    """

    def __init__(self, logger: Optional[logging.Logger] = None, indent: int = 2):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
            indent: Indentation used for pretty printing
        """
        self.logger = logger or logging.getLogger(__name__)
        self.indent = indent

    def render(self, root: Dict[str, Any]) -> str:
        """Serialize a schema tree as pretty-printed JSON."""
        return json.dumps(root, indent=self.indent, ensure_ascii=False)

    def write_document(self, document: SchemaDocument, suffix: str = ".san") -> Dict[str, Any]:
        """
        Write a sanitized schema beside its origin.

        Args:
            document: Schema document with a root to write
            suffix: Suffix appended to the origin file name

        Returns:
            Dictionary with file information

        Raises:
            ProcessingError: If writing fails
        """
        rendered = self.render(document.root)
        output_path = document.output_path(suffix)

        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(rendered)
            file_size = output_path.stat().st_size
        except OSError as e:
            raise ProcessingError(
                f"Failed to write sanitized schema {output_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"output_path": str(output_path), "rendered": rendered}
            )

        self.logger.info(f"Wrote sanitized schema to {output_path} ({file_size} bytes)")

        return {
            "path": output_path,
            "size": file_size,
            "rendered": rendered
        }
