"""Schema document model pairing a parsed tree with its origin."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class SchemaDocument:
    """
    A parsed JSON schema tagged with the location it was read from.

    ``root`` is ``None`` when the source could not be read or parsed. The
    origin is only used for diagnostics and to derive the output file name.
    """

    origin: Path
    root: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if not isinstance(self.origin, Path):
            self.origin = Path(self.origin)

        if self.root is not None and not isinstance(self.root, dict):
            raise ValueError(f"Schema root must be an object, got {type(self.root).__name__}")

    def is_present(self) -> bool:
        """Check if a parsed schema tree is available."""
        return self.root is not None

    def output_path(self, suffix: str = ".san") -> Path:
        """Sibling path of the origin with ``suffix`` appended to the file name."""
        return self.origin.with_name(self.origin.name + suffix)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the schema tree as pretty-printed JSON."""
        if self.root is None:
            raise ValueError(f"No schema loaded from '{self.origin}'")
        return json.dumps(self.root, indent=indent, ensure_ascii=False)
