"""Record of a single node moved into the definitions map."""

from dataclasses import dataclass
from typing import Dict
from ..types import ExternalizationKind, DEFINITIONS_POINTER


@dataclass
class Externalization:
    """
    Describes one externalized schema fragment.

    ``name`` is the key under ``definitions`` the fragment was copied to and
    ``reference`` the pointer left behind at the original location.
    """

    name: str
    kind: ExternalizationKind
    property_name: str
    reference: str
    overwrote: bool = False

    def __post_init__(self):
        """Validate record after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")

        if self.kind not in ExternalizationKind:
            raise ValueError(f"Invalid kind: {self.kind}")

        if self.reference != DEFINITIONS_POINTER + self.name:
            raise ValueError(f"reference must point to '{DEFINITIONS_POINTER}{self.name}'")

    def to_reference_node(self) -> Dict[str, str]:
        """Build the node that replaces the externalized fragment."""
        return {"$ref": self.reference}
