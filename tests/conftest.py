"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path
from typing import Dict, Any


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def nested_object_schema() -> Dict[str, Any]:
    """Schema with an object property nested two levels deep."""
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Customer",
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "address": {
                "type": "object",
                "properties": {
                    "city": {"type": "string"},
                    "geo": {
                        "type": "object",
                        "properties": {
                            "lat": {"type": "number"},
                            "lng": {"type": "number"}
                        }
                    }
                }
            }
        }
    }


@pytest.fixture
def array_schema() -> Dict[str, Any]:
    """Schema with an array of objects whose items nest further objects."""
    return {
        "type": "object",
        "properties": {
            "orders": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "lines": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "sku": {"type": "string"},
                                    "qty": {"type": "integer"}
                                }
                            }
                        }
                    }
                }
            }
        },
        "definitions": {}
    }


@pytest.fixture
def schema_file(temp_dir, nested_object_schema):
    """Write the nested object schema to a file."""
    path = temp_dir / "customer.json"
    path.write_text(json.dumps(nested_object_schema), encoding="utf-8")
    return path


@pytest.fixture
def deep_schema() -> Dict[str, Any]:
    """Schema nesting 300 object properties inside each other."""
    root = {"type": "string"}
    for i in reversed(range(300)):
        root = {"properties": {f"level_{i}": root}}
    return root


@pytest.fixture
def deep_schema_file(temp_dir):
    """Write a 300 level object chain as JSON text."""
    path = temp_dir / "deep.json"
    text = "".join(f'{{"properties": {{"level_{i}": ' for i in range(300))
    text += '{"type": "string"}' + "}}" * 300
    path.write_text(text, encoding="utf-8")
    return path
