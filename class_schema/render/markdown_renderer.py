"""
Markdown documentation of a schema registry.

Renders every registered type with its properties and a JSON sample using
the Jinja2 templates shipped in ``class_schema/templates/markdown``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import jinja2

from ..config import RenderConfig
from ..model.representations import CollectionRepresentation, ConcreteRepresentation, TypeRepresentation
from ..model.types import TypeIdentifier
from .json_sample import JsonSampleBuilder


class MarkdownRenderer:
    """Renders a schema registry as markdown."""

    TEMPLATE_LANG = "markdown"

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.registry_template = self.jinja_env.get_template("registry.md.jinja2")

    def render(
        self,
        type_representations: Mapping[TypeIdentifier, TypeRepresentation],
        roots: Sequence[TypeIdentifier] = (),
        enum_constants: Mapping[str, list[str]] | None = None,
        generation_comment: str = "",
    ) -> str:
        """
        Render the registry.

        Args:
            type_representations: The schema registry
            roots: Identifiers of the analyzed root types (documented first)
            enum_constants: Constant names per enum class, used in samples
            generation_comment: Optional comment placed at the top

        Returns:
            Markdown text
        """
        samples = JsonSampleBuilder(type_representations, enum_constants, self.config.sort_properties)

        ordered = [root for root in dict.fromkeys(roots) if root in type_representations]
        others = [identifier for identifier in type_representations if identifier not in ordered]
        if self.config.sort_properties:
            others.sort(key=lambda identifier: identifier.name)

        types = [self._prepare_type_context(type_representations[identifier], identifier in roots, samples) for identifier in ordered + others]
        opaque_roots = [root.name for root in roots if root not in type_representations]

        return self.registry_template.render(
            generation_comment=generation_comment if self.config.add_generation_comment else "",
            types=types,
            opaque_roots=opaque_roots,
        )

    def _prepare_type_context(self, representation: TypeRepresentation, is_root: bool, samples: JsonSampleBuilder) -> dict[str, Any]:
        identifier = representation.identifier
        context: dict[str, Any] = {
            "name": identifier.name,
            "simple_name": identifier.type.simple_name,
            "kind": representation.kind.value,
            "is_root": is_root,
            "sample": json.dumps(samples.build(identifier), indent=self.config.indent),
        }

        if isinstance(representation, CollectionRepresentation):
            context["element"] = representation.element.name if representation.element else ""

        elif isinstance(representation, ConcreteRepresentation):
            items = list(representation.properties.items())
            if self.config.sort_properties:
                items.sort()
            context["properties"] = [{"name": name, "type": property_id.name, "annotated": property_id.annotated} for name, property_id in items]

        return context
