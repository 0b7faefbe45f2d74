"""
Class lookup.

The pool is the analyzer's only view of the compiled classes. Looking up a
class that is not available raises ClassNotFoundError.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .nodes import ClassInfo


class ClassNotFoundError(LookupError):
    """Raised when a class cannot be located in the pool."""

    def __init__(self, name: str):
        super().__init__(f"Class not found: {name}")
        self.name = name


class ClassPool:
    """In-memory collection of reflected classes, keyed by qualified name."""

    def __init__(self, classes: Iterable[ClassInfo] = ()):
        self._classes: dict[str, ClassInfo] = {}
        for class_info in classes:
            self.add(class_info)

    def add(self, class_info: ClassInfo) -> None:
        self._classes[class_info.name] = class_info

    def get(self, name: str) -> ClassInfo:
        """
        Look up a class.

        Args:
            name: Fully-qualified class name (without type arguments)

        Returns:
            The reflected class

        Raises:
            ClassNotFoundError: If the class is not in the pool
        """
        try:
            return self._classes[name]
        except KeyError:
            raise ClassNotFoundError(name) from None

    def find(self, name: str) -> ClassInfo | None:
        return self._classes.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[ClassInfo]:
        return iter(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)
