import re

import pytest

from json_schema_builder import S, SchemaValidator
from json_schema_builder.object import ObjectSchema, strip_required


@pytest.fixture
def validate():
    return SchemaValidator().is_valid


class TestObjectSchema:
    def test_prop_tracks_required(self):
        assert S.object().prop("x", S.string()).node["required"] == ["x"]
        assert "required" not in S.object().prop("x", S.string().optional()).node

    def test_prop_keeps_insertion_order(self):
        schema = S.object().prop("b", S.string()).prop("a", S.string()).prop("c", S.string().optional())
        assert list(schema.node["properties"]) == ["b", "a", "c"]
        assert schema.node["required"] == ["b", "a"]

    def test_prop_replaces_a_property_wholesale(self):
        schema = S.object().prop("x", S.string().min_length(1)).prop("x", S.number())
        assert schema.node["properties"] == {"x": {"type": "number"}}
        assert schema.node["required"] == ["x"]

    def test_prop_stores_a_copy_of_the_child(self):
        child = S.string()
        parent = S.object().prop("x", child)
        child_longer = child.min_length(5)
        assert parent.node["properties"]["x"] == {"type": "string"}
        assert child_longer.node["minLength"] == 5

    def test_partial(self, validate):
        attributes = S.shape({"str": S.string()})
        schema = S.shape(
            {
                "arr": S.array().items(attributes).optional(),
                "prop": S.shape(
                    {
                        "str": S.string().optional(),
                        "obj": S.object(),
                        "arr": S.array().items(attributes).optional(),
                    }
                ),
            }
        )
        partial = schema.partial()
        assert validate(partial, {})
        assert validate(partial, {"prop": {}})
        assert not validate(schema, {})

    def test_partial_does_not_descend_into_arrays(self):
        schema = S.shape({"a": S.shape({"b": S.string()}), "arr": S.list(S.shape({"c": S.string()}))})
        node = schema.partial().node
        assert "required" not in node
        assert "required" not in node["properties"]["a"]
        assert node["properties"]["arr"]["items"]["required"] == ["c"]

    def test_partial_keeps_class_and_flag(self):
        schema = S.shape({"a": S.string()}).optional().partial()
        assert isinstance(schema, ObjectSchema)
        assert not schema.is_required

    def test_partial_skips_nullable_objects(self):
        node = {
            "type": "object",
            "properties": {"n": {"type": ["null", "object"], "required": ["x"]}},
            "required": ["n"],
        }
        assert strip_required(node) == {
            "type": "object",
            "properties": {"n": {"type": ["null", "object"], "required": ["x"]}},
        }

    def test_property_names(self, validate):
        schema = S.object().property_names(S.string().pattern(re.compile(r"^some$")))
        assert validate(schema, {})
        assert validate(schema, {"some": "string"})
        assert not validate(schema, {"other": "string"})

    def test_min_properties(self, validate):
        schema = S.object().min_properties(1)
        assert not validate(schema, {})
        assert validate(schema, {"some": "string"})

    def test_max_properties(self, validate):
        schema = S.object().max_properties(0)
        assert validate(schema, {})
        assert not validate(schema, {"some": "string"})

    def test_dependencies(self, validate):
        schema = S.shape({"some": S.string().optional(), "any": S.string().optional()}).dependencies({"some": ["any"]})
        assert schema.node["dependencies"] == {"some": ["any"]}
        assert validate(schema, {"some": "some", "any": "any"})
        assert not validate(schema, {"some": "string"})
        assert validate(schema, {"any": "string"})

    def test_dependencies_with_object_schema(self, validate):
        schema = S.shape({"some": S.string().optional(), "any": S.string().optional()}).dependencies(
            {"some": S.shape({"any": S.string()}, True)}
        )
        assert validate(schema, {"some": "some", "any": "any"})
        assert not validate(schema, {"some": "string"})
        assert validate(schema, {"any": "string"})

    def test_pattern_properties(self, validate):
        schema = S.object().pattern_properties({"^str": S.string(), re.compile("^num"): S.number()})
        assert list(schema.node["patternProperties"]) == ["^str", "^num"]
        assert validate(schema, {"strSome": "some", "numAny": 0})
        assert not validate(schema, {"numAny": "string"})
        assert not validate(schema, {"strSome": 0})

    def test_required(self, validate):
        schema = S.object().prop("some", S.string().optional()).prop("any", S.string().optional()).required("some")
        assert schema.node["required"] == ["some"]
        assert validate(schema, {"some": "some", "any": "any"})
        assert not validate(schema, {"any": "any"})

    def test_required_is_a_union(self):
        schema = S.shape({"a": S.string(), "b": S.string().optional()}).required("b", "a", "unknown")
        assert schema.node["required"] == ["a", "b", "unknown"]

    def test_optional(self):
        assert not S.object().optional().is_required

    def test_not_required(self, validate):
        schema = S.shape({"some": S.string()}).not_required("some")
        assert schema.node["required"] == []
        assert validate(schema, {"some": "some"})
        assert validate(schema, {})

    def test_not_required_without_required(self):
        schema = S.object().not_required("x")
        assert "required" not in schema.node

    def test_additional_properties(self, validate):
        schema = S.object().additional_properties(S.string())
        assert not validate(schema, {"strSome": "some", "numAny": 0})
        assert validate(schema, {"numAny": "string"})
        assert not validate(schema, {"strSome": 0})

    def test_additional_properties_bool(self):
        assert S.object().additional_properties(True).node["additionalProperties"] is True
