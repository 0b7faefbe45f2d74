"""
Configuration for the type analyzer and the registry renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AnalyzerConfig:
    """Configuration options for type analysis."""

    # Envelope types normalized to their first type argument
    wrapper_types: list[str] = field(default_factory=lambda: ["javax.ws.rs.core.GenericEntity"])

    # Types (and their subtypes) treated as collections
    collection_types: list[str] = field(
        default_factory=lambda: [
            "java.util.Collection",
            "java.util.List",
            "java.util.Set",
            "java.util.SortedSet",
            "java.util.NavigableSet",
            "java.util.Queue",
            "java.util.Deque",
            "java.util.ArrayList",
            "java.util.LinkedList",
            "java.util.HashSet",
            "java.util.LinkedHashSet",
            "java.util.TreeSet",
            "java.util.ArrayDeque",
        ]
    )

    # Reserved namespaces whose types are never expanded
    opaque_prefixes: list[str] = field(default_factory=lambda: ["java.", "javax."])

    # Element type of raw (untyped) collections
    default_element_type: str = "java.lang.Object"

    # Getter-like methods that never become properties
    ignored_getter_names: list[str] = field(default_factory=lambda: ["getClass"])

    # Class annotation selecting the accessor mode
    accessor_type_annotation: str = "javax.xml.bind.annotation.XmlAccessorType"

    # Member annotation forcing a member to be exposed
    element_annotation: str = "javax.xml.bind.annotation.XmlElement"

    # Member annotation hiding a member
    transient_annotation: str = "javax.xml.bind.annotation.XmlTransient"

    # Maximum number of nested structural analyses (None = unlimited)
    max_depth: int | None = 128

    @staticmethod
    def from_dict(d: dict) -> AnalyzerConfig:
        """Create a config from a dictionary."""
        config = AnalyzerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "wrapper_types": self.wrapper_types,
            "collection_types": self.collection_types,
            "opaque_prefixes": self.opaque_prefixes,
            "default_element_type": self.default_element_type,
            "ignored_getter_names": self.ignored_getter_names,
            "accessor_type_annotation": self.accessor_type_annotation,
            "element_annotation": self.element_annotation,
            "transient_annotation": self.transient_annotation,
            "max_depth": self.max_depth,
        }


@dataclass
class RenderConfig:
    """Configuration options for registry rendering."""

    # Add generation comment at top of rendered documents
    add_generation_comment: bool = True

    # Sort properties by name (otherwise discovery order)
    sort_properties: bool = True

    # JSON indentation
    indent: int = 2

    @staticmethod
    def from_dict(d: dict) -> RenderConfig:
        """Create a config from a dictionary."""
        config = RenderConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "sort_properties": self.sort_properties,
            "indent": self.indent,
        }
