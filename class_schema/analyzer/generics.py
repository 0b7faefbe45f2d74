"""
Generic type resolution.

Concretizes a member's declared type signature against the type arguments
bound to its owning type, e.g. field ``T value`` of ``Box<T>`` analyzed as
``Box<com.acme.Item>`` resolves to ``com.acme.Item``.
"""

from __future__ import annotations

from ..model.signatures import TypeSignature, parse_signature
from ..model.types import ARRAY_SUFFIX, OBJECT, Type
from ..reflection.class_pool import ClassPool


class _UnresolvedVariable(Exception):
    pass


class GenericTypeResolver:
    """Substitutes type variables with the owner's bound type arguments."""

    def __init__(self, class_pool: ClassPool):
        self.class_pool = class_pool

    def bindings(self, owner: Type) -> dict[str, Type]:
        """Type variable bindings of an owner type (empty for raw or unknown types)."""
        class_info = self.class_pool.find(owner.name)
        if class_info is None or len(class_info.type_parameters) != len(owner.type_arguments):
            return {}
        return dict(zip(class_info.type_parameters, owner.type_arguments))

    def resolve(self, signature: str, owner: Type, method_type_parameters: list[str] | tuple[str, ...] = ()) -> Type | None:
        """
        Resolve a declared signature in the context of an owner type.

        Args:
            signature: Declared type signature of the member
            owner: The concrete type declaring the member
            method_type_parameters: Type variables declared by the member itself

        Returns:
            The concrete Type, or None if a type variable cannot be bound
        """
        class_info = self.class_pool.find(owner.name)
        type_parameters = set(class_info.type_parameters) if class_info else set()
        try:
            return self._substitute(parse_signature(signature), self.bindings(owner), type_parameters, set(method_type_parameters))
        except _UnresolvedVariable:
            return None

    def resolve_supertype(self, signature: str, owner: Type) -> Type:
        """Resolve a superclass or interface signature, falling back to the raw type."""
        resolved = self.resolve(signature, owner)
        if resolved is not None:
            return resolved
        return Type(parse_signature(signature).name)

    def _substitute(
        self,
        signature: TypeSignature,
        bindings: dict[str, Type],
        type_parameters: set[str],
        method_type_parameters: set[str],
    ) -> Type:
        if signature.wildcard is not None:
            if signature.wildcard == "extends" and signature.bound is not None:
                return self._substitute(signature.bound, bindings, type_parameters, method_type_parameters)
            return Type(OBJECT)

        name = signature.name
        # Method-level variables shadow class-level ones
        if name in method_type_parameters:
            raise _UnresolvedVariable(name)

        if name in type_parameters:
            bound = bindings.get(name)
            if bound is None:
                raise _UnresolvedVariable(name)
            if not signature.array_dimensions:
                return bound
            return Type(bound.name + ARRAY_SUFFIX * signature.array_dimensions, bound.type_arguments)

        arguments = tuple(self._substitute(a, bindings, type_parameters, method_type_parameters) for a in signature.arguments)
        return Type(name + ARRAY_SUFFIX * signature.array_dimensions, arguments)
