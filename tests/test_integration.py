"""Integration tests for the JSON Schema Sanitizer."""

import json
import pytest
from json_sanitizer import JSONSanitizer, SchemaDocument


class TestJSONSanitizerIntegration:
    """Integration tests for the complete sanitizer."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sanitizer = JSONSanitizer()

    def test_sanitize_file(self, schema_file):
        """Test sanitizing a schema file end to end."""
        result = self.sanitizer.sanitize_file(schema_file)

        assert result.success
        assert result.errors is None
        assert result.externalized == 2
        assert result.output_path == schema_file.with_name("customer.json.san")

        written = json.loads(result.output_path.read_text(encoding="utf-8"))
        assert written["properties"]["address"] == {"$ref": "#/definitions/address"}
        assert written["definitions"]["address"]["properties"]["geo"] == {"$ref": "#/definitions/geo"}
        assert json.loads(result.rendered) == written

    def test_input_file_unchanged(self, schema_file, nested_object_schema):
        """Test that the input schema file is not modified."""
        self.sanitizer.sanitize_file(schema_file)

        assert json.loads(schema_file.read_text(encoding="utf-8")) == nested_object_schema

    def test_sanitize_missing_file(self, temp_dir):
        """Test that a missing input produces no output."""
        path = temp_dir / "missing.json"

        result = self.sanitizer.sanitize_file(path)

        assert not result.success
        assert result.output_path is None
        assert "No JSON found" in result.errors[0]
        assert not (temp_dir / "missing.json.san").exists()

    def test_sanitize_invalid_file(self, temp_dir):
        """Test that an unparseable input produces no output."""
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = self.sanitizer.sanitize_file(path)

        assert not result.success
        assert not (temp_dir / "broken.json.san").exists()

    def test_write_failure_reported(self, schema_file):
        """Test that a write failure is reported instead of raised."""
        # A directory in place of the output file makes the write fail
        schema_file.with_name("customer.json.san").mkdir()

        result = self.sanitizer.sanitize_file(schema_file)

        assert not result.success
        assert result.externalized == 2
        assert "Failed to write" in result.errors[0]
        assert "$ref" in result.rendered

    def test_batch_continues_after_failure(self, temp_dir, schema_file):
        """Test that one bad input does not stop the batch."""
        missing = temp_dir / "missing.json"
        flat = temp_dir / "flat.json"
        flat.write_text('{"type": "string"}', encoding="utf-8")

        results = self.sanitizer.sanitize_files([missing, schema_file, flat])

        assert [result.success for result in results] == [False, True, True]
        assert [result.source for result in results] == [missing, schema_file, flat]
        assert json.loads((temp_dir / "flat.json.san").read_text(encoding="utf-8")) == {
            "type": "string",
            "definitions": {}
        }

    def test_batch_continues_after_deep_schema(self, deep_schema_file, schema_file):
        """Test that an over-deep schema is reported and the batch goes on."""
        results = self.sanitizer.sanitize_files([deep_schema_file, schema_file])

        assert [result.success for result in results] == [False, True]
        assert "No JSON found" in results[0].errors[0]
        assert not deep_schema_file.with_name("deep.json.san").exists()
        assert results[1].output_path.exists()

    def test_unnest_failure_reported(self, monkeypatch, deep_schema_file, schema_file):
        """Test that a loaded schema too deep to unnest does not abort the batch."""
        monkeypatch.setattr("json_sanitizer.utils.validation.MAX_NESTING_DEPTH", 10000)

        results = self.sanitizer.sanitize_files([deep_schema_file, schema_file])

        assert [result.success for result in results] == [False, True]
        assert "could not be unnested" in results[0].errors[0]
        assert "valid JSON object" in results[0].errors[1]
        assert not deep_schema_file.with_name("deep.json.san").exists()

    def test_custom_suffix_and_indent(self, schema_file):
        """Test configuring the output name and indentation."""
        sanitizer = JSONSanitizer(output_suffix=".out", indent=4)

        result = sanitizer.sanitize_file(schema_file)

        assert result.output_path == schema_file.with_name("customer.json.out")
        assert '\n    "$schema"' in result.output_path.read_text(encoding="utf-8")

    def test_empty_suffix_rejected(self):
        """Test that output would never overwrite the input."""
        with pytest.raises(ValueError, match="output_suffix cannot be empty"):
            JSONSanitizer(output_suffix="")

    def test_sanitize_string(self):
        """Test sanitizing schema text."""
        root = self.sanitizer.sanitize_string(
            '{"properties": {"tags": {"items": {"properties": {"name": {"type": "string"}}}}}}'
        )

        assert root == {
            "properties": {"tags": {"items": {"$ref": "#/definitions/tags_item"}}},
            "definitions": {"tags_item": {"properties": {"name": {"type": "string"}}}}
        }

    def test_sanitize_string_invalid(self):
        """Test sanitizing invalid schema text."""
        with pytest.raises(ValueError, match="Invalid JSON input"):
            self.sanitizer.sanitize_string("[]")

    def test_sanitize_document(self, nested_object_schema):
        """Test sanitizing an already loaded document."""
        document = SchemaDocument(origin="customer.json", root=nested_object_schema)

        result = self.sanitizer.sanitize(document)

        assert result.root is nested_object_schema
        assert self.sanitizer.sanitize(SchemaDocument(origin="missing.json")) is None

    def test_profiling_records_files(self, temp_dir, schema_file):
        """Test that every sanitized file is profiled."""
        self.sanitizer.sanitize_files([schema_file, temp_dir / "missing.json"])

        summary = self.sanitizer.profiler.get_performance_summary()

        assert summary["total_operations"] == 2
        assert summary["total_definitions_created"] == 2
        assert summary["operations"][0]["name"] == "sanitize:customer.json"

    def test_profiling_disabled(self, schema_file):
        """Test running without a profiler."""
        sanitizer = JSONSanitizer(enable_profiling=False)

        result = sanitizer.sanitize_file(schema_file)

        assert result.success
        assert sanitizer.profiler is None
