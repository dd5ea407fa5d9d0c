"""Main JSON Schema Sanitizer implementation."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
from .types import SanitizeResult, ProcessingError, ErrorType
from .models import SchemaDocument
from .parser import SchemaParser
from .unnester import Unnester
from .io.file_writer import FileWriter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JSONSanitizer:
    """
    Sanitizes JSON schema files by unnesting inline object definitions.

    Wires the schema parser, the unnester and the file writer together and
    runs them per input file. A failing input never stops a batch.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 output_suffix: str = ".san",
                 indent: int = 2,
                 enable_profiling: bool = True):
        """
        Initialize the JSON Schema Sanitizer.

        Args:
            logger: Optional logger instance
            output_suffix: Suffix appended to the input file name for output
            indent: Indentation of the pretty-printed output
            enable_profiling: Record performance metrics per file
        """
        if not output_suffix:
            raise ValueError("output_suffix cannot be empty")

        self.logger = logger or logging.getLogger(__name__)
        self.output_suffix = output_suffix
        self.indent = indent

        self.error_handler = ErrorHandler(self.logger)
        self.parser = SchemaParser(self.error_handler, self.logger)
        self.unnester = Unnester(self.logger)
        self.file_writer = FileWriter(self.logger, indent=indent)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def sanitize(self, document: Optional[SchemaDocument]) -> Optional[SchemaDocument]:
        """Unnest an already loaded schema document; None when there is nothing to write."""
        return self.unnester.transform(document)

    def sanitize_string(self, json_string: str) -> Dict[str, Any]:
        """
        Parse and unnest a schema given as JSON text.

        Args:
            json_string: Schema JSON text

        Returns:
            The sanitized schema root

        Raises:
            ValueError: If the text is not a JSON object
        """
        root = self.parser.parse(json_string)
        return self.unnester.unnest_inlined_objects(root).root

    def sanitize_file(self, path: Union[str, Path]) -> SanitizeResult:
        """
        Sanitize one schema file and write the result beside it.

        Args:
            path: Location of the schema file

        Returns:
            SanitizeResult with operation details
        """
        path = Path(path)
        input_size = path.stat().st_size if path.is_file() else 0

        if self.profiler:
            with self.profiler.profile_operation(f"sanitize:{path.name}", input_size):
                result = self._sanitize_file(path)
                self.profiler.sample_performance()
                if result.success:
                    self.profiler.stop_profiling(
                        output_size=len(result.rendered.encode('utf-8')),
                        definitions_created=result.externalized
                    )
            return result

        return self._sanitize_file(path)

    def sanitize_files(self, paths: Iterable[Union[str, Path]]) -> List[SanitizeResult]:
        """
        Sanitize a batch of schema files one after another.

        Args:
            paths: Locations of the schema files

        Returns:
            One SanitizeResult per input, in input order
        """
        results = [self.sanitize_file(path) for path in paths]

        failed = sum(1 for result in results if not result.success)
        self.logger.info(f"Sanitized {len(results) - failed} of {len(results)} schemas")
        return results

    def _sanitize_file(self, path: Path) -> SanitizeResult:
        document = self.parser.load_document(path)
        sanitized = self.unnester.transform(document)

        if sanitized is None:
            if not document.is_present():
                return SanitizeResult(
                    success=False,
                    source=path,
                    errors=[f"No JSON found at path '{path}'"]
                )

            error = ProcessingError(
                f"Schema at path '{path}' could not be unnested",
                ErrorType.STRUCTURE,
                context={"origin": str(path)}
            )
            response = self.error_handler.handle_processing_error(error)
            return SanitizeResult(
                success=False,
                source=path,
                errors=[str(error), response.suggested_action]
            )

        report = self.unnester.last_report

        try:
            write_result = self.file_writer.write_document(sanitized, self.output_suffix)
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            return SanitizeResult(
                success=False,
                source=path,
                output_path=sanitized.output_path(self.output_suffix),
                externalized=len(report.externalizations),
                errors=[str(e), response.suggested_action],
                rendered=response.partial_results
            )

        return SanitizeResult(
            success=True,
            source=path,
            output_path=write_result["path"],
            externalized=len(report.externalizations),
            rendered=write_result["rendered"]
        )
