"""
Type representations stored in the schema registry.

A representation is either concrete (a class with named properties) or a
collection (wrapping the identifier of its element type). Nested types are
always referenced through their identifiers so cyclic graphs can be stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .types import TypeIdentifier


class RepresentationKind(str, Enum):
    """Kind of a registered representation."""

    CONCRETE = "concrete"
    COLLECTION = "collection"


@dataclass(frozen=True)
class TypeRepresentation:
    """Base class of the two representation forms."""

    identifier: TypeIdentifier

    @property
    def kind(self) -> RepresentationKind:
        raise NotImplementedError

    def referenced_identifiers(self) -> list[TypeIdentifier]:
        """Identifiers of all types this representation points to."""
        raise NotImplementedError


@dataclass(frozen=True)
class ConcreteRepresentation(TypeRepresentation):
    """A class with its flattened properties."""

    properties: Mapping[str, TypeIdentifier] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def kind(self) -> RepresentationKind:
        return RepresentationKind.CONCRETE

    def referenced_identifiers(self) -> list[TypeIdentifier]:
        return list(self.properties.values())


@dataclass(frozen=True)
class CollectionRepresentation(TypeRepresentation):
    """A collection of elements of one type."""

    element: TypeIdentifier | None = None

    @property
    def kind(self) -> RepresentationKind:
        return RepresentationKind.COLLECTION

    def referenced_identifiers(self) -> list[TypeIdentifier]:
        return [self.element] if self.element is not None else []


def of_concrete(identifier: TypeIdentifier, properties: Mapping[str, TypeIdentifier]) -> ConcreteRepresentation:
    return ConcreteRepresentation(identifier=identifier, properties=properties)


def of_collection(identifier: TypeIdentifier, element: TypeIdentifier) -> CollectionRepresentation:
    return CollectionRepresentation(identifier=identifier, element=element)
