"""
Accessor modes and member relevance rules.

The accessor mode of a class decides whether its fields, its getter methods,
or only its public members become schema properties. Members annotated with
the configured element annotation are always exposed; members annotated with
the transient annotation never are (unless also annotated as elements).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..config import AnalyzerConfig
from ..reflection.nodes import FieldInfo, MethodInfo


class AccessType(str, Enum):
    """Member exposure policy of a class."""

    FIELD = "FIELD"  # every non-static, non-transient field
    PROPERTY = "PROPERTY"  # every getter
    PUBLIC_MEMBER = "PUBLIC_MEMBER"  # public fields and public getters
    NONE = "NONE"  # only explicitly annotated members

    @staticmethod
    def from_annotation(values: dict[str, Any] | None) -> AccessType:
        """Read the mode from annotation values (``{"value": "FIELD"}`` or ``"XmlAccessType.FIELD"``)."""
        value = (values or {}).get("value", AccessType.PUBLIC_MEMBER.value)
        try:
            return AccessType(str(value).rsplit(".", 1)[-1].upper())
        except ValueError:
            raise ValueError(f"Unknown accessor type: {value}") from None

    def is_field_relevant(self, field: FieldInfo, config: AnalyzerConfig) -> bool:
        if field.is_synthetic:
            return False

        if field.has_annotation(config.element_annotation):
            return True

        hidden = field.has_annotation(config.transient_annotation)
        if self == AccessType.FIELD:
            return not field.is_transient and not field.is_static and not hidden
        if self == AccessType.PUBLIC_MEMBER:
            return field.is_public and not field.is_static and not hidden

        return False

    def is_getter_relevant(self, method: MethodInfo, config: AnalyzerConfig) -> bool:
        if method.is_synthetic or not is_getter(method, config.ignored_getter_names):
            return False

        if method.has_annotation(config.element_annotation):
            return True

        hidden = method.has_annotation(config.transient_annotation)
        if self == AccessType.PROPERTY:
            return not hidden
        if self == AccessType.PUBLIC_MEMBER:
            return method.is_public and not hidden

        return False


def is_getter(method: MethodInfo, ignored_names: list[str] | tuple[str, ...] = ("getClass",)) -> bool:
    """
    Check whether a method follows the getter naming convention.

    ``getX`` must return something, ``isX`` must return a primitive boolean.
    Static methods, methods taking parameters and ignored names never qualify.
    """
    if method.is_static or method.parameter_types:
        return False

    name = method.name
    if name in ignored_names:
        return False

    if name.startswith("get") and len(name) > 3:
        return method.return_type != "void"

    return name.startswith("is") and len(name) > 2 and method.return_type == "boolean"


def normalize_getter(name: str) -> str:
    """
    Convert a getter name to its property name.

    Only the first character after the prefix is lowercased, so
    ``getURL`` becomes ``uRL``.

    Args:
        name: The method name (``get[A-Z]...`` or ``is[A-Z]...``)

    Returns:
        The property name
    """
    size = 2 if name.startswith("is") else 3
    remainder = name[size:]
    return remainder[0].lower() + remainder[1:]
