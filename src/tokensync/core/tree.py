"""
Accessors for the raw token tree.

A node is either a token leaf (has a value key and a type key, in the
Tokens Studio ``value``/``type`` or DTCG ``$value``/``$type`` spelling)
or a group mapping names to child nodes.
"""

from __future__ import annotations

from typing import Any

# Keys that describe a group rather than naming a child token
RESERVED_KEYS = frozenset({"type", "description", "$type", "$description"})


def is_token_node(node: Any) -> bool:
    """Check whether a node is a token leaf."""
    return (
        isinstance(node, dict)
        and ("value" in node or "$value" in node)
        and ("type" in node or "$type" in node)
    )


def is_group(node: Any) -> bool:
    """Check whether a node is a group of child nodes."""
    return isinstance(node, dict) and not is_token_node(node)


def token_value(node: dict[str, Any]) -> Any:
    value = node.get("value")
    if value is None:
        value = node.get("$value")
    return value


def token_type(node: dict[str, Any]) -> str | None:
    kind = node.get("type")
    if kind is None:
        kind = node.get("$type")
    return kind


def stringify(value: Any) -> str:
    """Render a resolved literal as text.

    Integral floats print without a fractional part so ``16.0`` from the
    JSON parser comes out as ``16``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_path(root: Any, *keys: str) -> Any:
    """Walk nested groups by exact key, returning None when any step is missing."""
    node = root
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def count_tokens(tree: dict[str, Any]) -> int:
    """Count leaf entries in an extracted map."""
    count = 0
    for value in tree.values():
        if isinstance(value, dict):
            count += count_tokens(value)
        else:
            count += 1
    return count
