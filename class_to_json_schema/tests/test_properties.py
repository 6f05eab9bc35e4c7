"""
Tests for per-property fragment rendering.
"""

import pytest
from schema_models import Catalog, Draft, Person

from class_to_json_schema.config import SchemaGeneratorConfig
from class_to_json_schema.discovery import PropertyDescriptor, find_properties
from class_to_json_schema.properties import render_property
from class_to_json_schema.references import ExpansionContext
from class_to_json_schema.schema import ObjectSchema


@pytest.fixture(scope="module")
def catalog():
    return ObjectSchema(Catalog).node["properties"]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("names", {"type": "array", "items": {"type": "string"}}),
        ("tags", {"type": "array", "items": {"type": "string"}, "uniqueItems": True}),
        ("prices", {"type": "object", "additionalProperties": {"type": "number"}}),
        ("pair", {"type": "array", "items": [{"type": "integer"}, {"type": "string"}]}),
        ("created", {"type": "string", "format": "date-time"}),
        ("note", {"type": ["string", "null"]}),
        ("color", {"type": "string", "enum": ["red", "green"]}),
        ("mode", {"type": "string", "enum": ["a", "b"]}),
        ("raw", {}),
        ("choice", {"anyOf": [{"type": "integer"}, {"type": "string"}]}),
    ],
)
def test_type_fragments(catalog, name, expected):
    assert catalog[name] == {**expected, "readonly": True}


def test_catalog_property_order(catalog):
    assert list(catalog) == ["choice", "color", "created", "mode", "names", "note", "pair", "prices", "raw", "tags"]


class TestRenderProperty:
    def descriptor(self, index):
        accessor, field = find_properties(Person)[index]
        return PropertyDescriptor(name=accessor.name[3:].lower(), accessor=accessor, field=field, readonly=True)

    def test_renders_fragment(self):
        owner = ObjectSchema(Person)
        prop = render_property(owner, owner.context, self.descriptor(1))
        assert prop.name == "name"
        assert prop.as_json() == {"type": "string", "readonly": True}
        assert prop.required is False

    def test_fieldless_type_comes_from_accessor(self):
        owner = ObjectSchema(Person)
        prop = render_property(owner, owner.context, self.descriptor(0))
        assert prop.node == {"type": "integer", "readonly": True}

    def test_ignored_name_is_empty(self):
        context = ExpansionContext(SchemaGeneratorConfig(global_ignore_fields=["name"]))
        owner = ObjectSchema(Person, context)
        assert render_property(owner, context, self.descriptor(1)) is None

    def test_explicit_enums(self):
        owner = ObjectSchema(Person)
        descriptor = self.descriptor(1)
        descriptor.enums = ["ann", "bob"]
        prop = render_property(owner, owner.context, descriptor)
        assert prop.node == {"type": "string", "readonly": True, "enum": ["ann", "bob"]}


class TestNullable:
    @pytest.fixture(scope="class")
    def draft(self):
        return ObjectSchema(Draft).node["properties"]

    def test_optional_simple_type(self, catalog):
        assert catalog["note"]["type"] == ["string", "null"]

    def test_field_attribute(self, draft):
        assert draft["body"] == {"type": ["string", "null"], "readonly": True}

    def test_union_with_none(self, draft):
        assert draft["count"] == {
            "anyOf": [{"type": "integer"}, {"type": "string"}, {"type": "null"}],
            "readonly": True,
        }

    def test_optional_enum_keeps_null_out_of_enum(self, draft):
        assert draft["status"] == {
            "anyOf": [{"type": "string", "enum": ["red", "green"]}, {"type": "null"}],
            "readonly": True,
        }

    def test_optional_object(self, draft):
        assert draft["plain"] == {
            "type": ["object", "null"],
            "properties": {"count": {"type": "integer", "readonly": True}},
            "readonly": True,
        }

    def test_optional_nullable_class(self, draft):
        assert draft["memo"] == {
            "type": ["object", "null"],
            "title": "Memo",
            "properties": {"text": {"type": "string", "readonly": True}},
            "readonly": True,
        }

    def test_optional_reference(self, draft):
        assert draft["parent"] == {"anyOf": [{"$ref": "#"}, {"type": "null"}], "readonly": True}
