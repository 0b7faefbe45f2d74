"""
Analysis context.

Holds the state shared by every recursive call of one analysis run: the
caller-owned schema registry and the set of types whose structural analysis
has already started.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..model.representations import TypeRepresentation
from ..model.types import Type, TypeIdentifier


@dataclass
class AnalysisContext:
    """Registry and visited set of one analysis run."""

    # identifier -> representation, only ever added to
    type_representations: dict[TypeIdentifier, TypeRepresentation] = field(default_factory=dict)

    # types whose structural analysis has started
    analyzed_types: set[Type] = field(default_factory=set)

    # current number of nested structural analyses
    depth: int = 0

    def is_analyzed(self, type_: Type) -> bool:
        return type_ in self.analyzed_types

    def mark_analyzed(self, type_: Type) -> None:
        self.analyzed_types.add(type_)

    def register(self, representation: TypeRepresentation) -> None:
        """Store a representation under its identifier."""
        identifier = representation.identifier
        if identifier in self.type_representations:
            raise ValueError(f"{identifier} is already registered")
        self.type_representations[identifier] = representation

    def get(self, identifier: TypeIdentifier) -> TypeRepresentation | None:
        return self.type_representations.get(identifier)

    def dangling_identifiers(self) -> set[TypeIdentifier]:
        """Identifiers referenced by registered representations without an entry of their own."""
        return {
            referenced
            for representation in self.type_representations.values()
            for referenced in representation.referenced_identifiers()
            if referenced not in self.type_representations
        }
