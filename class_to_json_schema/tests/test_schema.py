"""
Tests for object schema assembly.
"""

from schema_models import (
    A,
    Account,
    Address,
    Bounded,
    Customer,
    Degenerate,
    Memo,
    Order,
    Person,
    Plain,
    Snake,
    Switch,
    TreeNode,
    Unordered,
    WithIgnored,
)

from class_to_json_schema.config import SchemaGeneratorConfig
from class_to_json_schema.references import ExpansionContext
from class_to_json_schema.schema import ObjectSchema


class TestObjectSchema:
    def test_person(self):
        schema = ObjectSchema(Person)
        assert schema.node == {
            "type": "object",
            "properties": {
                "age": {"type": "integer", "readonly": True},
                "name": {"type": "string", "readonly": False},
            },
        }
        assert list(schema.node["properties"]) == ["age", "name"]

    def test_no_metadata_only_type_and_properties(self):
        schema = ObjectSchema(Plain)
        assert set(schema.node) == {"type", "properties"}
        assert schema.required is False

    def test_class_attributes(self):
        schema = ObjectSchema(Bounded)
        assert schema.node == {
            "type": "object",
            "description": "A bounded value",
            "title": "Bounded",
            "maximum": 10,
            "minimum": 5,
        }
        # Type-level required stays on the schema object
        assert schema.required is True
        assert "required" not in schema.node

    def test_nullable_class(self):
        schema = ObjectSchema(Memo)
        assert schema.node == {
            "type": ["object", "null"],
            "title": "Memo",
            "properties": {"text": {"type": "string", "readonly": True}},
        }
        assert list(schema.node)[0] == "type"

    def test_property_order_follows_accessor_names(self):
        schema = ObjectSchema(Unordered)
        assert list(schema.node["properties"]) == ["alpha", "beta", "zeta"]
        assert [prop.name for prop in schema] == ["alpha", "beta", "zeta"]

    def test_required_properties(self):
        schema = ObjectSchema(Account)
        assert schema.node["required"] == ["email", "id"]
        assert schema.node["properties"]["id"] == {"type": "string", "readonly": True, "title": "Identifier"}
        assert schema.node["properties"]["email"] == {"type": "string", "readonly": False, "pattern": "^.+@.+$"}

    def test_required_is_not_duplicated(self):
        schema = ObjectSchema(Account)
        schema.add_required("id")
        schema.add_required("id")
        assert schema.node["required"] == ["email", "id"]

    def test_re_adding_property_overwrites(self):
        schema = ObjectSchema(Account)
        email = next(prop for prop in schema if prop.name == "email")
        schema.add_property(email)
        assert list(schema.node["properties"]) == ["email", "id"]
        assert schema.node["required"] == ["email", "id"]
        assert len(schema) == 2

    def test_enum_holder(self):
        schema = ObjectSchema(Order)
        assert schema.node["properties"]["status"] == {
            "type": "string",
            "readonly": True,
            "enum": ["open", "closed"],
        }

    def test_is_accessor_is_readonly(self):
        schema = ObjectSchema(Switch)
        assert schema.node["properties"] == {"active": {"type": "boolean", "readonly": True}}

    def test_snake_case_accessors(self):
        schema = ObjectSchema(Snake)
        assert schema.node["properties"] == {"user_name": {"type": "string", "readonly": False}}

    def test_no_properties(self):
        assert ObjectSchema(Degenerate).node == {"type": "object"}
        assert ObjectSchema(WithIgnored).node == {"type": "object"}

    def test_global_ignore_fields(self):
        context = ExpansionContext(SchemaGeneratorConfig(global_ignore_fields=["age"]))
        schema = ObjectSchema(Person, context)
        assert list(schema.node["properties"]) == ["name"]

    def test_fieldless_accessors_disabled(self):
        context = ExpansionContext(SchemaGeneratorConfig(include_fieldless_accessors=False))
        schema = ObjectSchema(Person, context)
        assert list(schema.node["properties"]) == ["name"]


class TestRelativeId:
    def test_default_is_root(self):
        assert ObjectSchema(Plain).relative_id == "#"

    def test_token_is_appended(self):
        assert ObjectSchema(Plain, relative_id="definitions/plain").relative_id == "#/definitions/plain"

    def test_absolute_token_replaces(self):
        assert ObjectSchema(Plain, relative_id="#/custom").relative_id == "#/custom"

    def test_token_composition(self):
        schema = ObjectSchema(Plain, relative_id="definitions")
        schema.add_token_to_relative_id("plain")
        assert schema.relative_id == "#/definitions/plain"


class TestRecursion:
    def test_mutual_references_terminate(self):
        context = ExpansionContext()
        schema = ObjectSchema(A, context)
        assert schema.node == {
            "type": "object",
            "properties": {
                "b": {
                    "type": "object",
                    "properties": {"a": {"$ref": "#", "readonly": True}},
                    "readonly": True,
                }
            },
        }
        assert len(context) == 0

    def test_self_reference_in_items(self):
        schema = ObjectSchema(TreeNode)
        assert schema.node["properties"]["children"] == {
            "type": "array",
            "items": {"$ref": "#"},
            "readonly": True,
        }

    def test_same_class_expands_twice_when_not_nested(self):
        schema = ObjectSchema(Customer)
        address = schema.node["properties"]["address"]
        previous = schema.node["properties"]["previous"]
        assert address["properties"] == {"city": {"type": "string", "readonly": True}}
        assert previous["items"]["properties"] == {"city": {"type": "string", "readonly": True}}

    def test_nested_required_class(self):
        schema = ObjectSchema(Customer)
        assert schema.node["required"] == ["address"]
        assert ObjectSchema(Address).required is True

    def test_reference_points_at_expansion_site(self):
        schema = ObjectSchema(A, relative_id="definitions/A")
        inner = schema.node["properties"]["b"]["properties"]["a"]
        assert inner["$ref"] == "#/definitions/A"

    def test_iteration_yields_property_schemas(self):
        schema = ObjectSchema(A)
        (b,) = list(schema)
        assert b.name == "b"
        assert b.required is False
