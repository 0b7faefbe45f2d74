"""
Analyzer module.

Contains type normalization, generic resolution, accessor rules and the
recursive type analyzer that fills the schema registry.
"""

from __future__ import annotations

from .access import AccessType, is_getter, normalize_getter
from .context import AnalysisContext
from .errors import AnalysisError
from .generics import GenericTypeResolver
from .normalizer import TypeNormalizer
from .type_analyzer import TypeAnalyzer

__all__ = [
    "AccessType",
    "AnalysisContext",
    "AnalysisError",
    "GenericTypeResolver",
    "TypeAnalyzer",
    "TypeNormalizer",
    "is_getter",
    "normalize_getter",
]
