"""
Tests for the Schema Node merge primitive, independent of builder chaining.
"""

from __future__ import annotations

import pytest

from json_schema_builder.merge import KEYWORD_RULES, MergeRule, merge_node, rule_for, unique


class TestRuleTable:
    def test_properties_merge_as_mapping(self):
        assert KEYWORD_RULES["properties"] is MergeRule.MERGE_MAPPING

    def test_required_is_a_union(self):
        assert KEYWORD_RULES["required"] is MergeRule.UNION

    @pytest.mark.parametrize("keyword", ["type", "format", "minimum", "anyOf", "if", "enum", "title", "custom"])
    def test_other_keywords_overwrite(self, keyword):
        assert rule_for(keyword) is MergeRule.OVERWRITE


class TestMergeNode:
    def test_scalar_keywords_overwrite(self):
        node = merge_node({"type": "string", "minLength": 1}, {"minLength": 3, "format": "email"})
        assert node == {"type": "string", "minLength": 3, "format": "email"}

    def test_properties_shallow_merge_new_child_wins_whole(self):
        node = {"properties": {"a": {"type": "string", "minLength": 1}, "b": {"type": "number"}}}
        merged = merge_node(node, {"properties": {"a": {"type": "integer"}, "c": {"type": "null"}}})
        assert merged["properties"] == {
            "a": {"type": "integer"},
            "b": {"type": "number"},
            "c": {"type": "null"},
        }
        assert list(merged["properties"]) == ["a", "b", "c"]

    def test_required_concatenates_and_deduplicates(self):
        merged = merge_node({"required": ["a", "b"]}, {"required": ["b", "c", "c"]})
        assert merged["required"] == ["a", "b", "c"]

    def test_required_without_previous_value(self):
        assert merge_node({}, {"required": ["x", "x"]}) == {"required": ["x"]}

    def test_replace_overrides_the_rule(self):
        merged = merge_node({"required": ["a", "b"]}, {"required": ["b"]}, replace=("required",))
        assert merged["required"] == ["b"]

    def test_combinators_are_not_deep_merged(self):
        merged = merge_node({"anyOf": [{"type": "string"}]}, {"anyOf": [{"type": "number"}]})
        assert merged["anyOf"] == [{"type": "number"}]

    def test_inconsistent_keywords_are_accepted(self):
        merged = merge_node({"type": "string"}, {"minimum": 4, "uniqueItems": True})
        assert merged == {"type": "string", "minimum": 4, "uniqueItems": True}

    def test_none_is_a_value(self):
        assert merge_node({}, {"const": None}) == {"const": None}

    def test_inputs_are_not_mutated(self):
        node = {"properties": {"a": {"type": "string"}}, "required": ["a"]}
        update = {"properties": {"b": {"type": "string"}}, "required": ["b"]}
        merge_node(node, update)
        assert node == {"properties": {"a": {"type": "string"}}, "required": ["a"]}
        assert update == {"properties": {"b": {"type": "string"}}, "required": ["b"]}

    def test_update_values_are_copied(self):
        child = {"type": "string"}
        merged = merge_node({}, {"properties": {"a": child}})
        child["type"] = "number"
        assert merged["properties"]["a"] == {"type": "string"}

    def test_empty_update_returns_a_copy(self):
        node = {"type": "string"}
        merged = merge_node(node, None)
        assert merged == node
        assert merged is not node

    def test_key_order_is_preserved(self):
        merged = merge_node({"type": "object", "title": "t"}, {"type": "array", "description": "d"})
        assert list(merged) == ["type", "title", "description"]


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
