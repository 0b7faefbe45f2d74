"""
Functional tests for SchemaGenerator over a realistic class model.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from class_schema import AnalysisError, AnalyzerConfig, RenderConfig, SchemaGenerator, Type, TypeIdentifier
from class_schema.generator import OutputFormat
from class_schema.reflection import ClassModelParser

TEST_DATA = Path(__file__).parent / "test_data"


def load_model():
    with open(TEST_DATA / "order_model.json") as f:
        return json.load(f)


def identifier(signature: str) -> TypeIdentifier:
    return TypeIdentifier.of_type(Type.parse(signature))


@pytest.fixture
def generator():
    return SchemaGenerator(load_model(), render_config=RenderConfig(add_generation_comment=False))


class TestAnalyze:
    """Tests for SchemaGenerator.analyze"""

    def test_registry(self, generator):
        result = generator.analyze("com.acme.shop.Order")

        assert result.roots == [identifier("com.acme.shop.Order")]
        assert set(result.type_representations) == {
            identifier("com.acme.shop.Order"),
            identifier("com.acme.shop.Customer"),
            identifier("com.acme.shop.Item"),
            identifier("java.util.List<com.acme.shop.Item>"),
            identifier("java.util.Set<com.acme.shop.Order>"),
        }

    def test_flattened_properties(self, generator):
        result = generator.analyze("com.acme.shop.Order")
        order = result.type_representations[identifier("com.acme.shop.Order")]
        item = result.type_representations[identifier("com.acme.shop.Item")]

        assert set(order.properties) == {"id", "status", "items", "customer"}
        assert order.properties["customer"].annotated
        assert set(item.properties) == {"sku", "quantity", "gift"}

    def test_multiple_roots_share_registry(self, generator):
        result = generator.analyze("com.acme.shop.Order", Type("com.acme.shop.Customer"), "java.util.List<com.acme.shop.Item>")

        assert result.roots == [
            identifier("com.acme.shop.Order"),
            identifier("com.acme.shop.Customer"),
            identifier("java.util.List<com.acme.shop.Item>"),
        ]
        assert len(result.type_representations) == 5

    def test_runs_are_independent(self, generator):
        generator.analyze("com.acme.shop.Order")

        assert len(generator.analyze("com.acme.shop.Item").type_representations) == 1

    def test_accepts_class_pool(self):
        pool = ClassModelParser().parse(load_model())

        result = SchemaGenerator(pool, AnalyzerConfig()).analyze("com.acme.shop.Item")

        assert list(result.type_representations) == [identifier("com.acme.shop.Item")]

    def test_missing_class(self, generator):
        with pytest.raises(AnalysisError):
            generator.analyze("com.acme.shop.Invoice")

    def test_enum_constants(self, generator):
        assert generator.enum_constants() == {"com.acme.shop.Status": ["OPEN", "SHIPPED"]}


class TestRender:
    """Tests for SchemaGenerator.render"""

    def test_json(self, generator):
        out = generator.render(generator.analyze("com.acme.shop.Order"), OutputFormat.JSON)
        document = json.loads(out)

        assert document["roots"] == ["com.acme.shop.Order"]
        assert document["types"]["java.util.Set<com.acme.shop.Order>"] == {"kind": "collection", "element": "com.acme.shop.Order"}
        assert document["types"]["com.acme.shop.Order"]["annotated"] == ["customer"]

    def test_sample(self, generator):
        out = generator.render(generator.analyze("com.acme.shop.Order"), "sample")

        assert json.loads(out) == {
            "com.acme.shop.Order": {
                "customer": {"name": "string", "orders": [{}]},
                "id": 0,
                "items": [{"gift": False, "quantity": 0, "sku": "string"}],
                "status": "OPEN",
            }
        }

    def test_markdown(self, generator):
        out = generator.render(generator.analyze("com.acme.shop.Order"), OutputFormat.MARKDOWN)

        assert out.startswith("# Type representations")
        assert "## Order" in out
        assert "| `customer` * | `com.acme.shop.Customer` |" in out

    def test_markdown_generation_comment(self):
        out = SchemaGenerator(load_model()).render(SchemaGenerator(load_model()).analyze("com.acme.shop.Item"), "markdown")

        assert out.startswith("<!-- Generated by class_schema v")

    def test_unknown_format(self, generator):
        with pytest.raises(ValueError):
            generator.render(generator.analyze("com.acme.shop.Item"), "xml")
