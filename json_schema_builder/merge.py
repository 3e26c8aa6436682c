"""
Merge primitive for Schema Nodes.

A Schema Node is a plain dict keyed by JSON Schema keywords. Every builder
operation funnels through merge_node, which applies a per-keyword rule
taken from KEYWORD_RULES. Keywords without an entry are overwritten.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

SchemaNode = dict[str, Any]


class MergeRule(str, Enum):
    """How a keyword from an update is combined with the existing value."""

    OVERWRITE = "overwrite"  # new value replaces old value
    MERGE_MAPPING = "merge_mapping"  # shallow dict merge, new entries win whole
    UNION = "union"  # concatenate old + new, drop duplicates


KEYWORD_RULES: dict[str, MergeRule] = {
    "properties": MergeRule.MERGE_MAPPING,
    "required": MergeRule.UNION,
}


def rule_for(keyword: str) -> MergeRule:
    """Return the merge rule for a keyword."""
    return KEYWORD_RULES.get(keyword, MergeRule.OVERWRITE)


def unique(values: Iterable[Any]) -> list[Any]:
    """Deduplicate values, keeping the first occurrence of each."""
    result: list[Any] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def merge_node(
    node: Mapping[str, Any],
    update: Mapping[str, Any] | None = None,
    *,
    replace: Iterable[str] = (),
) -> SchemaNode:
    """
    Merge a partial node into a node and return the result.

    Neither input is mutated. Values taken from the update are deep copied
    so the returned node never shares mutable state with the caller.

    Args:
        node: The existing node
        update: Partial node
        replace: Keywords that are overwritten regardless of their rule

    Returns:
        A new node
    """
    result = dict(node)
    if not update:
        return result

    replaced = set(replace)
    for keyword, value in update.items():
        value = copy.deepcopy(value)
        rule = MergeRule.OVERWRITE if keyword in replaced else rule_for(keyword)
        current = result.get(keyword)

        if rule is MergeRule.MERGE_MAPPING and isinstance(current, Mapping):
            result[keyword] = {**current, **value}
        elif rule is MergeRule.UNION and isinstance(current, list):
            result[keyword] = unique([*current, *value])
        elif rule is MergeRule.UNION:
            result[keyword] = unique(value)
        else:
            result[keyword] = value
    return result
