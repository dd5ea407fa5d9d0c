"""Tests for the command-line interface."""

import json
from click.testing import CliRunner
from json_sanitizer import __version__
from json_sanitizer.cli import main


class TestCLI:
    """Tests for the json-sanitizer command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_sanitize_file(self, schema_file):
        """Test sanitizing a file from the command line."""
        result = self.runner.invoke(main, ["sanitize", str(schema_file)])

        assert result.exit_code == 0
        assert '"$ref": "#/definitions/address"' in result.output
        output_path = schema_file.with_name("customer.json.san")
        assert json.loads(output_path.read_text(encoding="utf-8"))["definitions"]["geo"]

    def test_sanitize_quiet(self, schema_file):
        """Test suppressing the printed schema."""
        result = self.runner.invoke(main, ["sanitize", "--quiet", str(schema_file)])

        assert result.exit_code == 0
        assert '"$ref"' not in result.output
        assert schema_file.with_name("customer.json.san").exists()

    def test_sanitize_suffix(self, schema_file):
        """Test overriding the output suffix."""
        result = self.runner.invoke(main, ["sanitize", "-q", "--suffix", ".flat", str(schema_file)])

        assert result.exit_code == 0
        assert schema_file.with_name("customer.json.flat").exists()

    def test_sanitize_without_files(self):
        """Test that no inputs is an error."""
        result = self.runner.invoke(main, ["sanitize"])

        assert result.exit_code == 1
        assert "Please provide full path to JSON schema file" in result.output

    def test_sanitize_missing_file(self, temp_dir, schema_file):
        """Test that unreadable inputs are reported without failing the run."""
        missing = temp_dir / "missing.json"

        result = self.runner.invoke(main, ["sanitize", "-q", str(missing), str(schema_file)])

        assert result.exit_code == 0
        assert "No JSON found" in result.output
        assert not (temp_dir / "missing.json.san").exists()
        assert schema_file.with_name("customer.json.san").exists()

    def test_stats(self, schema_file):
        """Test printing structure statistics."""
        result = self.runner.invoke(main, ["stats", str(schema_file)])

        assert result.exit_code == 0
        assert '"inline_object_count": 2' in result.output
        assert '"definitions_count": 0' in result.output

    def test_stats_invalid_file(self, temp_dir):
        """Test statistics of an unparseable file."""
        path = temp_dir / "broken.json"
        path.write_text("[", encoding="utf-8")

        result = self.runner.invoke(main, ["stats", str(path)])

        assert result.exit_code == 1
        assert "No JSON found" in result.output
