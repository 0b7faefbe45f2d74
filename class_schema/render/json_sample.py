"""
JSON sample values.

Builds an example JSON value for a registered type by walking its
representation. Each concrete type is expanded once per sample; later
occurrences, including cyclic ones, are rendered as an empty object so the
sample stays proportional to the registry size.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..model.representations import CollectionRepresentation, ConcreteRepresentation, TypeRepresentation
from ..model.types import TypeIdentifier

# Sample values of well-known opaque types
OPAQUE_SAMPLES: dict[str, Any] = {
    "boolean": False,
    "java.lang.Boolean": False,
    "byte": 0,
    "short": 0,
    "int": 0,
    "long": 0,
    "java.lang.Byte": 0,
    "java.lang.Short": 0,
    "java.lang.Integer": 0,
    "java.lang.Long": 0,
    "java.math.BigInteger": 0,
    "float": 0.0,
    "double": 0.0,
    "java.lang.Float": 0.0,
    "java.lang.Double": 0.0,
    "java.math.BigDecimal": 0.0,
    "char": "string",
    "java.lang.Character": "string",
    "java.lang.String": "string",
    "java.util.UUID": "string",
    "java.net.URI": "string",
    "java.net.URL": "string",
    "java.util.Date": "date",
    "java.time.Instant": "date",
    "java.time.LocalDate": "date",
    "java.time.LocalDateTime": "date",
    "java.time.OffsetDateTime": "date",
    "java.time.ZonedDateTime": "date",
}


class JsonSampleBuilder:
    """Builds sample JSON values from a schema registry."""

    def __init__(
        self,
        type_representations: Mapping[TypeIdentifier, TypeRepresentation],
        enum_constants: Mapping[str, list[str]] | None = None,
        sort_properties: bool = True,
    ):
        """
        Args:
            type_representations: The schema registry
            enum_constants: Constant names per enum class name
            sort_properties: Whether sample objects list properties by name
        """
        self.type_representations = type_representations
        self.enum_constants = enum_constants or {}
        self.sort_properties = sort_properties

    def build(self, identifier: TypeIdentifier) -> Any:
        return self._build(identifier, set())

    def _build(self, identifier: TypeIdentifier, expanded: set[TypeIdentifier]) -> Any:
        representation = self.type_representations.get(identifier)
        if representation is None:
            return self._opaque_sample(identifier)

        if isinstance(representation, CollectionRepresentation):
            if representation.element is None:
                return []
            return [self._build(representation.element, expanded)]

        if isinstance(representation, ConcreteRepresentation):
            if identifier in expanded:
                return {}
            expanded.add(identifier)

            items = representation.properties.items()
            if self.sort_properties:
                items = sorted(items)
            return {name: self._build(property_id, expanded) for name, property_id in items}

        raise TypeError(f"Unsupported representation: {type(representation).__name__}")

    def _opaque_sample(self, identifier: TypeIdentifier) -> Any:
        name = identifier.type.name
        if name in OPAQUE_SAMPLES:
            return OPAQUE_SAMPLES[name]

        constants = self.enum_constants.get(name)
        if constants is not None:
            return constants[0] if constants else "string"

        return {}
