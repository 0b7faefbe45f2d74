"""Class Schema

A Python package for deriving flat, cycle-safe schema registries from
reflected class graphs. Inheritance is flattened, JAXB-style accessor rules
decide which members become properties, and every reachable type is
registered exactly once for JSON/XML documentation.
"""

__version__ = "1.0.1"

from .analyzer import AccessType, AnalysisContext, AnalysisError, TypeAnalyzer
from .config import AnalyzerConfig, RenderConfig
from .generator import OutputFormat, SchemaGenerator, SchemaResult
from .model import (
    CollectionRepresentation,
    ConcreteRepresentation,
    Triple,
    Type,
    TypeIdentifier,
    TypeRepresentation,
)
from .reflection import ClassModelError, ClassModelParser, ClassNotFoundError, ClassPool

__all__ = [
    "SchemaGenerator",
    "SchemaResult",
    "OutputFormat",
    "AnalyzerConfig",
    "RenderConfig",
    "TypeAnalyzer",
    "AnalysisContext",
    "AnalysisError",
    "AccessType",
    "Type",
    "TypeIdentifier",
    "TypeRepresentation",
    "ConcreteRepresentation",
    "CollectionRepresentation",
    "Triple",
    "ClassPool",
    "ClassModelParser",
    "ClassModelError",
    "ClassNotFoundError",
]
