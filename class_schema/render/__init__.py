"""
Rendering of schema registries: JSON documents, JSON samples and markdown.
"""

from __future__ import annotations

from .json_sample import JsonSampleBuilder
from .markdown_renderer import MarkdownRenderer
from .registry_document import registry_to_dict, representation_to_dict

__all__ = [
    "JsonSampleBuilder",
    "MarkdownRenderer",
    "registry_to_dict",
    "representation_to_dict",
]
