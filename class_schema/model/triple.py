"""
Generic immutable three-element tuple.
"""

from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

L = TypeVar("L")
M = TypeVar("M")
R = TypeVar("R")


class Triple(NamedTuple, Generic[L, M, R]):
    """A tuple of a left, middle and right value (any of them may be None)."""

    left: L
    middle: M
    right: R

    @staticmethod
    def of(left: L, middle: M, right: R) -> Triple[L, M, R]:
        return Triple(left, middle, right)
