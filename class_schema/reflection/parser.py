"""
Class model parser.

Reads the JSON class model document (the serialized output of a bytecode
reflection pass) and builds a ClassPool of ClassInfo nodes.
"""

from __future__ import annotations

from typing import Any

from ..model.signatures import SignatureSyntaxError, parse_signature
from ..model.types import OBJECT
from .class_pool import ClassPool
from .nodes import ClassInfo, ClassKind, FieldInfo, MethodInfo, Modifier


class ClassModelError(ValueError):
    """Raised when a class model document is malformed."""

    pass


class ClassModelParser:
    """Parses a class model document into a ClassPool."""

    def parse(self, model: dict[str, Any]) -> ClassPool:
        """
        Parse a class model.

        Args:
            model: The class model dictionary (``{"classes": [...]}``)

        Returns:
            ClassPool containing every described class

        Raises:
            ClassModelError: If the document is malformed
        """
        if not isinstance(model, dict):
            raise ClassModelError("Class model must be a JSON object")

        classes = model.get("classes", [])
        if not isinstance(classes, list):
            raise ClassModelError("'classes' must be a list")

        pool = ClassPool()
        for index, class_data in enumerate(classes):
            class_info = self._parse_class(class_data, f"classes[{index}]")
            if class_info.name in pool:
                raise ClassModelError(f"{class_info.name} is declared more than once")
            pool.add(class_info)

        return pool

    def _parse_class(self, data: Any, path: str) -> ClassInfo:
        if not isinstance(data, dict):
            raise ClassModelError(f"{path}: class entry must be an object")

        name = data.get("name")
        if not name or not isinstance(name, str):
            raise ClassModelError(f"{path}: missing class name")

        try:
            kind = ClassKind(data.get("kind", "class"))
        except ValueError:
            raise ClassModelError(f"{path}: unknown class kind {data.get('kind')!r}") from None

        # Unlike interfaces, classes and enums always have a superclass
        if "superclass" in data:
            superclass = data["superclass"]
        elif kind == ClassKind.ENUM:
            superclass = f"java.lang.Enum<{name}>"
        elif kind == ClassKind.CLASS:
            superclass = OBJECT
        else:
            superclass = None

        class_info = ClassInfo(
            name=name,
            kind=kind,
            modifiers=self._parse_modifiers(data.get("modifiers", ["public"]), path),
            type_parameters=list(data.get("type_parameters", [])),
            superclass=self._check_signature(superclass, f"{path}.superclass") if superclass else None,
            interfaces=[self._check_signature(i, f"{path}.interfaces") for i in data.get("interfaces", [])],
            annotations=self._parse_annotations(data.get("annotations", {}), path),
        )

        for index, field_data in enumerate(data.get("fields", [])):
            field_info = self._parse_field(field_data, f"{path}.fields[{index}]")
            if class_info.is_interface:
                # Interface constants are implicitly public static final
                field_info.modifiers |= Modifier.PUBLIC | Modifier.STATIC | Modifier.FINAL
            class_info.fields.append(field_info)

        for index, method_data in enumerate(data.get("methods", [])):
            method_info = self._parse_method(method_data, f"{path}.methods[{index}]")
            if class_info.is_interface and Modifier.PRIVATE not in method_info.modifiers:
                method_info.modifiers |= Modifier.PUBLIC
            class_info.methods.append(method_info)

        return class_info

    def _parse_field(self, data: Any, path: str) -> FieldInfo:
        if not isinstance(data, dict) or "name" not in data or "type" not in data:
            raise ClassModelError(f"{path}: field needs a name and a type")

        modifiers = self._parse_modifiers(data.get("modifiers", []), path)
        if data.get("synthetic"):
            modifiers |= Modifier.SYNTHETIC

        return FieldInfo(
            name=data["name"],
            type_signature=self._check_signature(data["type"], path),
            modifiers=modifiers,
            annotations=self._parse_annotations(data.get("annotations", {}), path),
        )

    def _parse_method(self, data: Any, path: str) -> MethodInfo:
        if not isinstance(data, dict) or "name" not in data:
            raise ClassModelError(f"{path}: method needs a name")

        modifiers = self._parse_modifiers(data.get("modifiers", []), path)
        if data.get("synthetic"):
            modifiers |= Modifier.SYNTHETIC

        return MethodInfo(
            name=data["name"],
            return_type=self._check_signature(data.get("return_type", "void"), path),
            parameter_types=[self._check_signature(p, path) for p in data.get("parameters", [])],
            type_parameters=list(data.get("type_parameters", [])),
            modifiers=modifiers,
            annotations=self._parse_annotations(data.get("annotations", {}), path),
        )

    def _parse_modifiers(self, names: Any, path: str) -> Modifier:
        if not isinstance(names, list):
            raise ClassModelError(f"{path}: modifiers must be a list")
        try:
            return Modifier.from_names(names)
        except ValueError as e:
            raise ClassModelError(f"{path}: {e}") from e

    def _parse_annotations(self, annotations: Any, path: str) -> dict[str, dict[str, Any]]:
        # Marker annotations may be given as a plain list of names
        if isinstance(annotations, list):
            return {name: {} for name in annotations}
        if not isinstance(annotations, dict):
            raise ClassModelError(f"{path}: annotations must be an object or a list")
        return {name: dict(values or {}) for name, values in annotations.items()}

    def _check_signature(self, signature: Any, path: str) -> str:
        if not isinstance(signature, str):
            raise ClassModelError(f"{path}: type signature must be a string")
        try:
            parse_signature(signature)
        except SignatureSyntaxError as e:
            raise ClassModelError(f"{path}: {e}") from e
        return signature
