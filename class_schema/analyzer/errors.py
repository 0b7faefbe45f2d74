"""
Analysis errors.
"""

from __future__ import annotations

from ..model.types import Type


class AnalysisError(Exception):
    """Raised when the analysis of a type fails fatally.

    This can happen when:
    - A superclass or implemented interface is not available
    - The class of a member type is not available
    - The type graph nests deeper than the configured maximum depth

    The underlying lookup error, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, type_: Type | None = None):
        super().__init__(message)
        self.type = type_
