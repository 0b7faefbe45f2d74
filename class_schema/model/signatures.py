"""
Parser for Java-style type signatures.

Turns strings such as ``java.util.Map<K, java.util.List<? extends V>>[]``
into a small tree that can be converted into a Type or have its type
variables substituted by the generic resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .types import ARRAY_SUFFIX, OBJECT, Type

_TOKEN_PATTERN = re.compile(r"\s*(?:(\[\])|([<>,?])|([A-Za-z_$][\w.$]*))")


@dataclass(frozen=True)
class TypeSignature:
    """A parsed signature.

    ``wildcard`` is None for a plain type, ``"?"`` for an unbounded wildcard,
    or ``"extends"`` / ``"super"`` for a bounded one (``bound`` then holds the
    bound signature).
    """

    name: str = ""
    arguments: tuple[TypeSignature, ...] = ()
    array_dimensions: int = 0
    wildcard: str | None = None
    bound: TypeSignature | None = None

    def to_type(self) -> Type:
        """Convert to a Type, treating every name as a class name."""
        if self.wildcard is not None:
            if self.wildcard == "extends" and self.bound is not None:
                return self.bound.to_type()
            return Type(OBJECT)
        return Type(self.name + ARRAY_SUFFIX * self.array_dimensions, tuple(a.to_type() for a in self.arguments))


class SignatureSyntaxError(ValueError):
    """Raised when a type signature cannot be parsed."""

    pass


class _SignatureParser:
    def __init__(self, signature: str):
        self.signature = signature
        self.tokens = self._tokenize(signature)
        self.position = 0

    def _tokenize(self, signature: str) -> list[str]:
        tokens = []
        index = 0
        stripped = signature.rstrip()
        while index < len(stripped):
            match = _TOKEN_PATTERN.match(stripped, index)
            if not match:
                raise SignatureSyntaxError(f"Unexpected character in type signature {signature!r} at {index}")
            tokens.append(match.group(match.lastindex))
            index = match.end()
        return tokens

    def _peek(self) -> str | None:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise SignatureSyntaxError(f"Unexpected end of type signature {self.signature!r}")
        self.position += 1
        return token

    def _expect(self, expected: str) -> None:
        token = self._next()
        if token != expected:
            raise SignatureSyntaxError(f"Expected {expected!r} in type signature {self.signature!r}, got {token!r}")

    def parse(self) -> TypeSignature:
        result = self._parse_signature()
        if self._peek() is not None:
            raise SignatureSyntaxError(f"Trailing tokens in type signature {self.signature!r}")
        return result

    def _parse_signature(self) -> TypeSignature:
        token = self._next()

        if token == "?":
            kind = self._peek()
            if kind in ("extends", "super"):
                self.position += 1
                return TypeSignature(wildcard=kind, bound=self._parse_signature())
            return TypeSignature(wildcard="?")

        if token in ("<", ">", ",", ARRAY_SUFFIX):
            raise SignatureSyntaxError(f"Expected a type name in type signature {self.signature!r}, got {token!r}")

        arguments: list[TypeSignature] = []
        if self._peek() == "<":
            self.position += 1
            arguments.append(self._parse_signature())
            while self._peek() == ",":
                self.position += 1
                arguments.append(self._parse_signature())
            self._expect(">")

        dimensions = 0
        while self._peek() == ARRAY_SUFFIX:
            self.position += 1
            dimensions += 1

        return TypeSignature(name=token, arguments=tuple(arguments), array_dimensions=dimensions)


def parse_signature(signature: str) -> TypeSignature:
    """
    Parse a type signature.

    Args:
        signature: The signature text

    Returns:
        The parsed TypeSignature

    Raises:
        SignatureSyntaxError: If the signature is malformed
    """
    if not signature or not signature.strip():
        raise SignatureSyntaxError("Empty type signature")
    return _SignatureParser(signature).parse()
