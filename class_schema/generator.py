"""
Schema generator.

Wires the class pool, analyzer and renderers together: analyze one or more
root types of a class model into a shared registry, then render it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from . import __version__
from .analyzer import AnalysisContext, TypeAnalyzer
from .cli_utils import COMMAND_NAME, reconstruct_command_line
from .config import AnalyzerConfig, RenderConfig
from .model.representations import TypeRepresentation
from .model.types import Type, TypeIdentifier
from .reflection import ClassModelParser, ClassPool
from .render import JsonSampleBuilder, MarkdownRenderer, registry_to_dict


class OutputFormat(str, Enum):
    """Rendered output format."""

    JSON = "json"  # the registry document
    SAMPLE = "sample"  # one JSON sample value per root
    MARKDOWN = "markdown"  # human-readable documentation


@dataclass
class SchemaResult:
    """Registry and root identifiers of one analysis run."""

    type_representations: dict[TypeIdentifier, TypeRepresentation] = field(default_factory=dict)
    roots: list[TypeIdentifier] = field(default_factory=list)


class SchemaGenerator:
    """Analyzes root types of a class model and renders the resulting registry."""

    def __init__(
        self,
        class_model: dict[str, Any] | ClassPool,
        config: AnalyzerConfig | None = None,
        render_config: RenderConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            class_model: Class model document, or an already built ClassPool
            config: Analyzer configuration
            render_config: Rendering configuration
        """
        self.class_pool = class_model if isinstance(class_model, ClassPool) else ClassModelParser().parse(class_model)
        self.config = config or AnalyzerConfig()
        self.render_config = render_config or RenderConfig()

    def analyze(self, *roots: str | Type) -> SchemaResult:
        """
        Analyze root types into one registry.

        Args:
            roots: Root types, as Type or signature strings

        Returns:
            SchemaResult with the registry and one identifier per root

        Raises:
            AnalysisError: If a referenced class cannot be located
        """
        context = AnalysisContext()
        analyzer = TypeAnalyzer(self.class_pool, self.config, context)

        result = SchemaResult(type_representations=context.type_representations)
        for root in roots:
            root_type = Type.parse(root) if isinstance(root, str) else root
            result.roots.append(analyzer.analyze(root_type))

        return result

    def enum_constants(self) -> dict[str, list[str]]:
        """Constant names of every enum in the class pool."""
        return {
            class_info.name: [f.name for f in class_info.fields if f.is_static and f.type_signature == class_info.name]
            for class_info in self.class_pool
            if class_info.is_enum
        }

    def render(self, result: SchemaResult, output_format: OutputFormat | str = OutputFormat.JSON) -> str:
        """
        Render an analysis result.

        Args:
            result: The result returned by analyze()
            output_format: json, sample or markdown

        Returns:
            The rendered text
        """
        output_format = OutputFormat(output_format)

        if output_format == OutputFormat.MARKDOWN:
            return MarkdownRenderer(self.render_config).render(
                result.type_representations,
                result.roots,
                self.enum_constants(),
                self._generate_command_comment(),
            )

        if output_format == OutputFormat.SAMPLE:
            samples = JsonSampleBuilder(result.type_representations, self.enum_constants(), self.render_config.sort_properties)
            document: Any = {root.name: samples.build(root) for root in result.roots}
        else:
            document = registry_to_dict(result.type_representations, result.roots, self.render_config.sort_properties)

        return json.dumps(document, indent=self.render_config.indent) + "\n"

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the rendered document"""
        if not self.render_config.add_generation_comment:
            return ""

        try:
            from .class_schema import class_schema as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = COMMAND_NAME

        return f"Generated by {COMMAND_NAME} v{__version__} : {command_line}"
