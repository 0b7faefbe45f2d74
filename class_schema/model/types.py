"""
Type descriptors and identifiers.

A Type is the semantic descriptor of a reflected class: its fully-qualified
name plus the concrete type arguments bound to it. A TypeIdentifier is the
hashable key under which a type's representation is stored in the registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Java primitive type keywords
PRIMITIVE_TYPES = frozenset({"boolean", "byte", "char", "short", "int", "long", "float", "double", "void"})

ARRAY_SUFFIX = "[]"

OBJECT = "java.lang.Object"
STRING = "java.lang.String"


@dataclass(frozen=True)
class Type:
    """A reflected type with its bound type arguments.

    Examples:
        Type("com.acme.Order")
        Type("java.util.List", (Type("com.acme.Item"),))
        Type("long[]")
    """

    name: str
    type_arguments: tuple[Type, ...] = ()

    @staticmethod
    def parse(signature: str) -> Type:
        """Build a Type from a signature such as ``java.util.Map<java.lang.String, com.acme.Item>``."""
        from .signatures import parse_signature

        return parse_signature(signature).to_type()

    @property
    def is_primitive(self) -> bool:
        return self.name in PRIMITIVE_TYPES

    @property
    def is_array(self) -> bool:
        return self.name.endswith(ARRAY_SUFFIX)

    @property
    def component_type(self) -> Type:
        """The component type of an array type."""
        if not self.is_array:
            raise ValueError(f"{self} is not an array type")
        return Type(self.name[: -len(ARRAY_SUFFIX)], self.type_arguments)

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]

    def __str__(self) -> str:
        if self.is_array:
            return f"{self.component_type}{ARRAY_SUFFIX}"
        if not self.type_arguments:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.type_arguments)}>"


@dataclass(frozen=True)
class TypeIdentifier:
    """Registry key of a type.

    ``annotated`` records whether the member referencing the type carried
    member-level annotations. It is informational only and does not take part
    in equality, so a property's identifier always matches the registry key of
    the same type.
    """

    type: Type
    name: str
    annotated: bool = field(default=False, compare=False)

    @staticmethod
    def of_type(type_: Type, annotated: bool = False) -> TypeIdentifier:
        return TypeIdentifier(type=type_, name=str(type_), annotated=annotated)

    def with_annotations(self, annotated: bool) -> TypeIdentifier:
        return TypeIdentifier(type=self.type, name=self.name, annotated=annotated)

    def __str__(self) -> str:
        return self.name
