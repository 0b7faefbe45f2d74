"""
JSON document form of a schema registry.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..model.representations import CollectionRepresentation, ConcreteRepresentation, TypeRepresentation
from ..model.types import TypeIdentifier


def representation_to_dict(representation: TypeRepresentation, sort_properties: bool = True) -> dict[str, Any]:
    """Convert one representation to a JSON-serializable dictionary."""
    result: dict[str, Any] = {"kind": representation.kind.value}

    if isinstance(representation, CollectionRepresentation):
        result["element"] = representation.element.name if representation.element else None

    elif isinstance(representation, ConcreteRepresentation):
        items = list(representation.properties.items())
        if sort_properties:
            items.sort()
        result["properties"] = {name: identifier.name for name, identifier in items}
        annotated = [name for name, identifier in items if identifier.annotated]
        if annotated:
            result["annotated"] = annotated

    return result


def registry_to_dict(
    type_representations: Mapping[TypeIdentifier, TypeRepresentation],
    roots: Sequence[TypeIdentifier] = (),
    sort_properties: bool = True,
) -> dict[str, Any]:
    """
    Convert a schema registry to a JSON-serializable dictionary.

    Args:
        type_representations: The schema registry
        roots: Identifiers returned for the analyzed root types
        sort_properties: Whether to order properties and types by name

    Returns:
        ``{"roots": [...], "types": {name: representation}}``
    """
    identifiers = list(type_representations)
    if sort_properties:
        identifiers.sort(key=lambda identifier: identifier.name)

    return {
        "roots": [root.name for root in roots],
        "types": {identifier.name: representation_to_dict(type_representations[identifier], sort_properties) for identifier in identifiers},
    }
