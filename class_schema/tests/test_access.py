"""
Tests for accessor modes and getter detection.
"""

from __future__ import annotations

import pytest

from class_schema.analyzer import AccessType, is_getter, normalize_getter
from class_schema.config import AnalyzerConfig
from class_schema.reflection import FieldInfo, MethodInfo, Modifier

CONFIG = AnalyzerConfig()
ELEMENT = {CONFIG.element_annotation: {}}
TRANSIENT = {CONFIG.transient_annotation: {}}


def make_field(modifiers=Modifier.PRIVATE, annotations=None):
    return FieldInfo(name="value", type_signature="java.lang.String", modifiers=modifiers, annotations=annotations or {})


def make_method(name="getValue", return_type="java.lang.String", modifiers=Modifier.PUBLIC, annotations=None):
    return MethodInfo(name=name, return_type=return_type, modifiers=modifiers, annotations=annotations or {})


class TestFromAnnotation:
    """Tests for reading the mode from annotation values"""

    @pytest.mark.parametrize(
        "values,expected",
        [
            ({"value": "FIELD"}, AccessType.FIELD),
            ({"value": "XmlAccessType.PROPERTY"}, AccessType.PROPERTY),
            ({"value": "javax.xml.bind.annotation.XmlAccessType.NONE"}, AccessType.NONE),
            ({"value": "public_member"}, AccessType.PUBLIC_MEMBER),
            ({}, AccessType.PUBLIC_MEMBER),
            (None, AccessType.PUBLIC_MEMBER),
        ],
    )
    def test_values(self, values, expected):
        assert AccessType.from_annotation(values) == expected

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            AccessType.from_annotation({"value": "EVERYTHING"})


class TestFieldRelevance:
    """Field rules per mode"""

    @pytest.mark.parametrize(
        "modifiers,annotations,expected",
        [
            (Modifier.PRIVATE, None, {AccessType.FIELD}),
            (Modifier.PUBLIC, None, {AccessType.FIELD, AccessType.PUBLIC_MEMBER}),
            (Modifier.PUBLIC | Modifier.STATIC, None, set()),
            (Modifier.PRIVATE | Modifier.TRANSIENT, None, set()),
            (Modifier.PUBLIC | Modifier.TRANSIENT, None, {AccessType.PUBLIC_MEMBER}),
            (Modifier.PUBLIC, TRANSIENT, set()),
            (Modifier.PRIVATE | Modifier.STATIC, ELEMENT, set(AccessType)),
            (Modifier.PRIVATE | Modifier.SYNTHETIC, ELEMENT, set()),
        ],
    )
    def test_rules(self, modifiers, annotations, expected):
        field = make_field(modifiers, annotations)

        relevant = {mode for mode in AccessType if mode.is_field_relevant(field, CONFIG)}

        assert relevant == expected


class TestGetterRelevance:
    """Getter rules per mode"""

    @pytest.mark.parametrize(
        "modifiers,annotations,expected",
        [
            (Modifier.PUBLIC, None, {AccessType.PROPERTY, AccessType.PUBLIC_MEMBER}),
            (Modifier.PRIVATE, None, {AccessType.PROPERTY}),
            (Modifier.PUBLIC, TRANSIENT, set()),
            (Modifier.PRIVATE, ELEMENT, set(AccessType)),
            (Modifier.PUBLIC | Modifier.SYNTHETIC, ELEMENT, set()),
            (Modifier.PUBLIC | Modifier.STATIC, ELEMENT, set()),
        ],
    )
    def test_rules(self, modifiers, annotations, expected):
        method = make_method(modifiers=modifiers, annotations=annotations)

        relevant = {mode for mode in AccessType if mode.is_getter_relevant(method, CONFIG)}

        assert relevant == expected

    def test_custom_annotation_names(self):
        config = AnalyzerConfig(element_annotation="com.fasterxml.jackson.annotation.JsonProperty")
        method = make_method(modifiers=Modifier.PRIVATE, annotations={"com.fasterxml.jackson.annotation.JsonProperty": {}})

        assert AccessType.FIELD.is_getter_relevant(method, config)
        assert not AccessType.FIELD.is_getter_relevant(method, CONFIG)


class TestGetterConvention:
    """Getter naming rules"""

    @pytest.mark.parametrize(
        "name,return_type,expected",
        [
            ("getName", "java.lang.String", True),
            ("getName", "void", False),
            ("get", "int", False),
            ("isActive", "boolean", True),
            ("isActive", "java.lang.Boolean", False),
            ("is", "boolean", False),
            ("getClass", "java.lang.Class<?>", False),
            ("hasChildren", "boolean", False),
            ("name", "java.lang.String", False),
        ],
    )
    def test_is_getter(self, name, return_type, expected):
        assert is_getter(make_method(name, return_type)) is expected

    def test_static_is_not_getter(self):
        assert not is_getter(make_method(modifiers=Modifier.PUBLIC | Modifier.STATIC))

    def test_method_with_parameters_is_not_getter(self):
        indexed = MethodInfo(name="getItem", return_type="com.acme.Item", parameter_types=["int"], modifiers=Modifier.PUBLIC)

        assert not is_getter(indexed)
        assert not AccessType.PUBLIC_MEMBER.is_getter_relevant(indexed, CONFIG)

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("getUserName", "userName"),
            ("isActive", "active"),
            ("isEnabled", "enabled"),
            ("getX", "x"),
            # Only the first character is lowercased
            ("getURL", "uRL"),
        ],
    )
    def test_normalize_getter(self, name, expected):
        assert normalize_getter(name) == expected
