"""
Type model.

Types, identifiers, registry representations and signature parsing.
"""

from __future__ import annotations

from .representations import (
    CollectionRepresentation,
    ConcreteRepresentation,
    RepresentationKind,
    TypeRepresentation,
)
from .signatures import SignatureSyntaxError, TypeSignature, parse_signature
from .triple import Triple
from .types import PRIMITIVE_TYPES, Type, TypeIdentifier

__all__ = [
    "Type",
    "TypeIdentifier",
    "TypeRepresentation",
    "ConcreteRepresentation",
    "CollectionRepresentation",
    "RepresentationKind",
    "TypeSignature",
    "SignatureSyntaxError",
    "parse_signature",
    "Triple",
    "PRIMITIVE_TYPES",
]
