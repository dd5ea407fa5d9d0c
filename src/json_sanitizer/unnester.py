"""Unnester moving nested inline schema objects into the definitions map."""

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple
from .types import (
    UnnesterInterface,
    UnnestReport,
    ExternalizationKind,
    ErrorType,
    PN_PROPERTIES,
    PN_DEFINITIONS,
    PN_ITEMS,
    PN_REF,
    DEFINITIONS_POINTER,
    ARRAY_ITEM_SUFFIX
)
from .models import Externalization, SchemaDocument


def is_reference(node: Any) -> bool:
    """Check if a node is an object already holding a ``$ref``."""
    return isinstance(node, dict) and PN_REF in node


def has_properties(node: Any) -> bool:
    """Check if a node is an object with a ``properties`` object."""
    return isinstance(node, dict) and isinstance(node.get(PN_PROPERTIES), dict)


def is_object_property(value: Any) -> bool:
    """A non-reference property value describing a nested object."""
    return not is_reference(value) and has_properties(value)


def is_array_property(value: Any) -> bool:
    """A non-reference property value whose ``items`` schema can be externalized."""
    if not isinstance(value, dict) or is_reference(value):
        return False
    items = value.get(PN_ITEMS)
    return isinstance(items, dict) and not is_reference(items)


def is_externalizable(node: Any) -> bool:
    """
    Check if a schema node still holds nested objects to externalize.

    A node qualifies when it is not a reference, has a ``properties`` object
    and at least one property is a nested object or an array of objects.
    """
    if is_reference(node) or not has_properties(node):
        return False

    for value in node[PN_PROPERTIES].values():
        if is_object_property(value):
            return True
        if is_array_property(value) and has_properties(value[PN_ITEMS]):
            return True

    return False


class Unnester(UnnesterInterface):
    """
    Rewrites a JSON schema so nested inline objects live under ``definitions``.

    Root level properties are externalized first. The definitions map is then
    swept repeatedly, externalizing from the first qualifying entry each round,
    until no entry qualifies any more.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the unnester.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.last_report: Optional[UnnestReport] = None

    def transform(self, document: Optional[SchemaDocument]) -> Optional[SchemaDocument]:
        """
        Unnest the schema held by ``document``.

        A root nested too deeply to copy is reported and yields None; its
        tree may be left partially rewritten.

        Args:
            document: Origin tagged schema, possibly without a parsed root

        Returns:
            The document with its root rewritten in place, or None when there
            is nothing to write
        """
        self.last_report = None
        if document is None or not document.is_present():
            origin = document.origin if document is not None else "<unknown>"
            self.logger.error(f"{ErrorType.MISSING_SCHEMA.value}: No JSON found at path '{origin}'")
            return None

        try:
            report = self.unnest_inlined_objects(document.root)
        except RecursionError:
            self.logger.error(f"{ErrorType.STRUCTURE.value}: Schema at path '{document.origin}' "
                              "is nested too deeply to unnest")
            return None

        self.last_report = report
        self.logger.info(f"Unnested '{document.origin}': {len(report.externalizations)} "
                         f"externalizations in {report.passes} passes")
        return SchemaDocument(origin=document.origin, root=report.root)

    def unnest_inlined_objects(self, root: Dict[str, Any]) -> UnnestReport:
        """
        Move nested object properties to ``definitions`` and reference them.

        Args:
            root: Schema root object, mutated in place

        Returns:
            UnnestReport holding the same root and the externalizations made
        """
        report = UnnestReport(root=root)

        if PN_DEFINITIONS not in root:
            self.logger.warning("root node has no 'definitions' node, creating an empty 'definitions' node")
            root[PN_DEFINITIONS] = {}
            report.definitions_created = True

        definitions = root[PN_DEFINITIONS]
        if not isinstance(definitions, dict):
            self.logger.warning(f"'definitions' node is a {type(definitions).__name__}, not an object; "
                                "leaving schema unchanged")
            return report

        # Move root properties to definitions
        self.replace_with_reference(definitions, root, report.externalizations)

        # Sweep definitions until none holds nested objects
        while True:
            nodes_to_externalize = self._get_processable_nodes(definitions)
            if not nodes_to_externalize:
                break

            report.passes += 1
            name, node = nodes_to_externalize[0]
            self.logger.debug(f"Pass {report.passes}: {len(nodes_to_externalize)} definitions pending, "
                              f"processing '{name}'")
            self.replace_with_reference(definitions, node, report.externalizations)

        return report

    def replace_with_reference(self, definitions: Dict[str, Any], node: Any,
                               records: Optional[List[Externalization]] = None) -> List[Externalization]:
        """
        Externalize the object and array properties of a single node.

        Args:
            definitions: Definitions map receiving copies of nested fragments
            node: Schema node whose ``properties`` are rewritten
            records: Optional list the new externalizations are appended to

        Returns:
            The externalizations made for this node
        """
        made = []
        if not has_properties(node):
            return made

        properties = node[PN_PROPERTIES]

        # Object properties
        for key, value in list(properties.items()):
            self.logger.debug(f"Checking key '{key}'")
            if is_object_property(value):
                made.append(self._move_to_definitions(definitions, properties, key))

        # Array item properties
        for key, value in list(properties.items()):
            self.logger.debug(f"Checking key '{key}'")
            if is_array_property(value):
                made.append(self._move_array_item_to_definitions(definitions, value, key))

        if records is not None:
            records.extend(made)
        return made

    def _get_processable_nodes(self, definitions: Dict[str, Any]) -> List[Tuple[str, Dict[str, Any]]]:
        return [(name, node) for name, node in definitions.items() if is_externalizable(node)]

    def _move_to_definitions(self, definitions: Dict[str, Any],
                             properties: Dict[str, Any], key: str) -> Externalization:
        record = self._add_definition(definitions, key, properties[key],
                                      ExternalizationKind.OBJECT, key)
        properties[key] = record.to_reference_node()
        self.logger.info(f"Externalized key: {key}")
        return record

    def _move_array_item_to_definitions(self, definitions: Dict[str, Any],
                                        array_node: Dict[str, Any], key: str) -> Externalization:
        record = self._add_definition(definitions, key + ARRAY_ITEM_SUFFIX, array_node[PN_ITEMS],
                                      ExternalizationKind.ARRAY_ITEM, key)
        array_node[PN_ITEMS] = record.to_reference_node()
        self.logger.info(f"Externalized key: {key}")
        return record

    def _add_definition(self, definitions: Dict[str, Any], name: str, fragment: Dict[str, Any],
                        kind: ExternalizationKind, property_name: str) -> Externalization:
        overwrote = name in definitions
        if overwrote:
            # Last write wins
            self.logger.warning(f"Definition '{name}' already exists and is replaced")

        # Full copy before the original location is replaced
        definitions[name] = copy.deepcopy(fragment)

        return Externalization(
            name=name,
            kind=kind,
            property_name=property_name,
            reference=DEFINITIONS_POINTER + name,
            overwrote=overwrote
        )
