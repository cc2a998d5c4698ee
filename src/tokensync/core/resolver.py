"""
Alias resolution over the raw token tree.

Aliases are strings of the form ``{dotted.path}``. A path is not anchored
at the document root: exports place the same token under several
plausible anchors (the root, a primitive set, a semantic set), so the
resolver tries every group in the tree as a starting point, in a fixed
pre-order, and takes the first one under which the whole path exists.

Resolution never raises. Dead aliases and reference cycles are recorded
on the ResolutionReport and the alias text is passed through unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from .keys import loose_key
from .report import ResolutionReport
from .tree import is_group, is_token_node, token_value

logger = logging.getLogger(__name__)


def is_alias(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("{") and value.endswith("}")


def collect_search_roots(tree: Any) -> list[Any]:
    """Collect candidate anchor nodes for path lookup.

    The tree itself comes first, followed by every descendant group in
    pre-order. Token leaves are never descended into.

    Args:
        tree: Raw token tree (or any subtree)

    Returns:
        Ordered list of anchor nodes
    """
    roots: list[Any] = []

    def visit(node: Any) -> None:
        roots.append(node)
        if not is_group(node):
            return
        for child in node.values():
            if is_group(child):
                visit(child)

    if tree is not None:
        visit(tree)
    return roots


def _child(group: dict[str, Any], part: str) -> tuple[bool, Any]:
    """Look up one path segment: exact key first, then a loose match."""
    if part in group:
        return True, group[part]
    wanted = loose_key(part)
    for key, child in group.items():
        if loose_key(key) == wanted:
            return True, child
    return False, None


def _walk(root: Any, parts: list[str]) -> tuple[bool, Any]:
    current = root
    for part in parts:
        if not is_group(current):
            return False, None
        found, current = _child(current, part)
        if not found:
            return False, None
    return True, current


def find_value_by_path(path: str, tree: Any) -> Any | None:
    """Find the value a dotted alias path points at.

    Args:
        path: Dotted path without braces, e.g. ``"color.base.white"``
        tree: Raw token tree

    Returns:
        The token's raw value (or a literal reached directly), or None if
        no anchor resolves the full path
    """
    parts = path.split(".")

    for root in collect_search_roots(tree):
        found, node = _walk(root, parts)
        if not found or node is None:
            continue
        if is_token_node(node):
            return token_value(node)
        if isinstance(node, (str, int, float)) and not isinstance(node, bool):
            return node

    return None


def resolve_reference(
    value: Any,
    tree: Any,
    report: ResolutionReport,
    visited: set[str] | None = None,
) -> Any:
    """Resolve a token value, following alias chains to a literal.

    Args:
        value: Raw token value (literal or ``{alias}``)
        tree: Raw token tree used for lookups
        report: Diagnostics sink for this run
        visited: Alias paths already followed on this chain

    Returns:
        The resolved literal, or the alias text if the chain is broken or
        cyclic
    """
    if not is_alias(value):
        return value

    if visited is None:
        visited = set()

    ref_path = value[1:-1]
    if ref_path in visited:
        logger.warning("Circular reference detected: %s", ref_path)
        report.add_cycle(ref_path)
        return value
    visited.add(ref_path)

    resolved = find_value_by_path(ref_path, tree)
    if resolved is not None:
        return resolve_reference(resolved, tree, report, visited)

    logger.debug("Unresolved reference: {%s}", ref_path)
    report.add_unresolved(ref_path)
    return value
