"""
Tests for generic type resolution.
"""

from __future__ import annotations

import pytest

from class_schema.analyzer import GenericTypeResolver
from class_schema.model import Type
from class_schema.reflection import ClassModelParser

MODEL = {
    "classes": [
        {"name": "com.acme.Pair", "type_parameters": ["K", "V"]},
        {"name": "com.acme.Item"},
    ]
}

PAIR = Type.parse("com.acme.Pair<java.lang.String, com.acme.Item>")


@pytest.fixture
def resolver():
    return GenericTypeResolver(ClassModelParser().parse(MODEL))


class TestResolve:
    """Tests for GenericTypeResolver.resolve"""

    @pytest.mark.parametrize(
        "signature,expected",
        [
            ("K", "java.lang.String"),
            ("V", "com.acme.Item"),
            ("V[]", "com.acme.Item[]"),
            ("java.util.Map<K, java.util.List<V>>", "java.util.Map<java.lang.String, java.util.List<com.acme.Item>>"),
            ("java.util.List<? extends V>", "java.util.List<com.acme.Item>"),
            ("java.util.List<?>", "java.util.List<java.lang.Object>"),
            ("long", "long"),
            ("com.acme.Item", "com.acme.Item"),
        ],
    )
    def test_bound_owner(self, resolver, signature, expected):
        assert resolver.resolve(signature, PAIR) == Type.parse(expected)

    def test_raw_owner_fails_on_variables(self, resolver):
        raw = Type("com.acme.Pair")

        assert resolver.resolve("K", raw) is None
        assert resolver.resolve("java.util.List<V>", raw) is None
        assert resolver.resolve("java.lang.String", raw) == Type("java.lang.String")

    def test_method_type_parameters_shadow_class_parameters(self, resolver):
        assert resolver.resolve("K", PAIR, ["K"]) is None
        assert resolver.resolve("java.util.List<T>", PAIR, ("T",)) is None

    def test_unknown_owner(self, resolver):
        assert resolver.resolve("com.acme.Item", Type("com.acme.Unknown")) == Type("com.acme.Item")

    def test_bindings(self, resolver):
        assert resolver.bindings(PAIR) == {"K": Type("java.lang.String"), "V": Type("com.acme.Item")}
        assert resolver.bindings(Type("com.acme.Pair", (Type("java.lang.String"),))) == {}


class TestResolveSupertype:
    """Tests for GenericTypeResolver.resolve_supertype"""

    def test_bound_arguments(self, resolver):
        assert resolver.resolve_supertype("com.acme.Base<V>", PAIR) == Type.parse("com.acme.Base<com.acme.Item>")

    def test_falls_back_to_raw_type(self, resolver):
        assert resolver.resolve_supertype("com.acme.Base<V>", Type("com.acme.Pair")) == Type("com.acme.Base")
