"""
Type normalization.

Strips envelope types down to their payload and collapses collection-like
types to their element type before they are analyzed.
"""

from __future__ import annotations

from ..config import AnalyzerConfig
from ..model.signatures import parse_signature
from ..model.types import Type
from ..reflection.class_pool import ClassPool


class TypeNormalizer:
    """Normalizes wrapper and collection types."""

    def __init__(self, config: AnalyzerConfig, class_pool: ClassPool):
        self.config = config
        self.class_pool = class_pool
        self._wrapper_types = frozenset(config.wrapper_types)
        self._collection_types = frozenset(config.collection_types)

    def normalize_wrapper(self, type_: Type) -> Type:
        """Return the payload of an envelope type, or the type itself."""
        if type_.name in self._wrapper_types and type_.type_arguments:
            return type_.type_arguments[0]
        return type_

    def is_opaque_platform(self, type_: Type) -> bool:
        """Whether the type is a primitive or belongs to a reserved namespace."""
        if type_.is_primitive:
            return True
        return any(type_.name.startswith(prefix) for prefix in self.config.opaque_prefixes)

    def is_collection(self, type_: Type) -> bool:
        """Whether the type is an array or assignable to a configured collection type."""
        if type_.is_array or type_.name in self._collection_types:
            return True
        if self.is_opaque_platform(type_):
            return False

        # Walk the supertypes of analyzable classes
        pending = [type_.name]
        seen = set()
        while pending:
            name = pending.pop()
            if name in seen:
                continue
            seen.add(name)
            if name in self._collection_types:
                return True

            class_info = self.class_pool.find(name)
            if class_info is None:
                continue
            supertypes = list(class_info.interfaces)
            if class_info.superclass:
                supertypes.append(class_info.superclass)
            pending.extend(parse_signature(s).name for s in supertypes)

        return False

    def normalize_collection(self, type_: Type) -> Type:
        """
        Return the element type of a collection-like type.

        Args:
            type_: A type for which is_collection() holds

        Returns:
            The array component, the first type argument, or the configured
            default element type for raw collections

        Raises:
            ValueError: If the type is not collection-like
        """
        if not self.is_collection(type_):
            raise ValueError(f"{type_} is not a collection type")

        if type_.is_array:
            return type_.component_type
        if type_.type_arguments:
            return type_.type_arguments[0]
        return Type(self.config.default_element_type)
