"""
Reflected class structure.

These nodes describe what the analyzer needs to know about a compiled class:
its declared members, supertypes, modifiers and annotations. Type references
are kept as unresolved signature strings; the generic resolver concretizes
them against an owning Type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any


class Modifier(IntFlag):
    """Member and class access flags (JVM values)."""

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SYNCHRONIZED = 0x0020
    VOLATILE = 0x0040
    TRANSIENT = 0x0080
    NATIVE = 0x0100
    INTERFACE = 0x0200
    ABSTRACT = 0x0400
    STRICT = 0x0800
    SYNTHETIC = 0x1000

    @staticmethod
    def from_names(names: list[str]) -> Modifier:
        """Combine modifier keywords (e.g. ``["public", "static"]``) into flags."""
        flags = Modifier(0)
        for name in names:
            try:
                flags |= Modifier[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown modifier: {name}") from None
        return flags


class ClassKind(str, Enum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"


@dataclass
class MemberInfo:
    """Common part of fields and methods."""

    name: str = ""
    modifiers: Modifier = Modifier(0)

    # annotation name -> annotation values
    annotations: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def is_public(self) -> bool:
        return Modifier.PUBLIC in self.modifiers

    @property
    def is_static(self) -> bool:
        return Modifier.STATIC in self.modifiers

    @property
    def is_synthetic(self) -> bool:
        return Modifier.SYNTHETIC in self.modifiers

    def has_annotation(self, name: str) -> bool:
        return name in self.annotations


@dataclass
class FieldInfo(MemberInfo):
    """A declared field."""

    type_signature: str = ""

    @property
    def is_transient(self) -> bool:
        return Modifier.TRANSIENT in self.modifiers


@dataclass
class MethodInfo(MemberInfo):
    """A declared method."""

    return_type: str = "void"
    parameter_types: list[str] = field(default_factory=list)

    # Method-level type variables (e.g. <T> T getValue())
    type_parameters: list[str] = field(default_factory=list)


@dataclass
class ClassInfo:
    """A reflected class, interface or enum."""

    name: str = ""
    kind: ClassKind = ClassKind.CLASS
    modifiers: Modifier = Modifier.PUBLIC

    # Declared type variables, in order (e.g. ["K", "V"])
    type_parameters: list[str] = field(default_factory=list)

    # Supertype signatures, may reference the type parameters above
    superclass: str | None = None
    interfaces: list[str] = field(default_factory=list)

    fields: list[FieldInfo] = field(default_factory=list)
    methods: list[MethodInfo] = field(default_factory=list)
    annotations: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def is_enum(self) -> bool:
        return self.kind == ClassKind.ENUM

    @property
    def is_interface(self) -> bool:
        return self.kind == ClassKind.INTERFACE

    def has_annotation(self, name: str) -> bool:
        return name in self.annotations

    def get_annotation(self, name: str) -> dict[str, Any] | None:
        return self.annotations.get(name)
