"""
Reflection module.

Reflected class nodes, the class pool and the class model parser.
"""

from __future__ import annotations

from .class_pool import ClassNotFoundError, ClassPool
from .nodes import ClassInfo, ClassKind, FieldInfo, MethodInfo, Modifier
from .parser import ClassModelError, ClassModelParser

__all__ = [
    "ClassInfo",
    "ClassKind",
    "FieldInfo",
    "MethodInfo",
    "Modifier",
    "ClassPool",
    "ClassNotFoundError",
    "ClassModelParser",
    "ClassModelError",
]
