"""
Typed extractors for colour, dimension and typography token groups.

Each extractor walks a raw group depth-first, normalises keys, resolves
alias values against the full tree and builds its output map in source
order.
"""

from __future__ import annotations

import re
from typing import Any

from .ir import TypographyPreset
from .keys import font_weight_to_slug, normalize_key
from .report import ResolutionReport
from .resolver import resolve_reference
from .tree import (
    RESERVED_KEYS,
    is_group,
    is_token_node,
    stringify,
    token_type,
    token_value,
)

DEFAULT_UNIT = "px"

DIMENSION_TYPES = frozenset({"dimension", "number"})

_NUMERIC = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")

# Group-level typography overrides
GROUP_LETTER_SPACING = "letter spacing"
GROUP_FONT_WEIGHT = "font weight"


# =============================================================================
# Colours
# =============================================================================


def extract_colors(
    group: dict[str, Any], tree: Any, report: ResolutionReport
) -> dict[str, Any]:
    """Extract colour tokens from a group into a nested map.

    Non-colour leaves are ignored and groups without any colour descendant
    are omitted.

    Args:
        group: Raw group to walk
        tree: Full raw tree for alias lookups
        report: Diagnostics sink

    Returns:
        Nested map of normalised key -> colour string or sub-map
    """
    result: dict[str, Any] = {}

    for key, node in group.items():
        if key in RESERVED_KEYS or not isinstance(node, dict):
            continue

        name = normalize_key(key)
        if is_token_node(node):
            if token_type(node) == "color":
                resolved = resolve_reference(_raw_value(node), tree, report)
                result[name] = stringify(resolved)
        else:
            nested = extract_colors(node, tree, report)
            if nested:
                result[name] = nested

    return result


# =============================================================================
# Dimensions
# =============================================================================


def format_dimension_value(value: Any, unit: str | None = DEFAULT_UNIT) -> str:
    """Format a resolved dimension for CSS.

    Numbers get the unit appended. Strings get it only when the trimmed
    text is a plain integer or decimal, so ``"auto"`` and ``"1fr"`` pass
    through. ``unit=None`` disables suffixing.

    Examples:
        >>> format_dimension_value("8")
        '8px'
        >>> format_dimension_value("auto")
        'auto'
        >>> format_dimension_value("8", unit=None)
        '8'
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        text = stringify(value)
        return text if unit is None else f"{text}{unit}"

    trimmed = stringify(value).strip()
    if unit is None:
        return trimmed
    if _NUMERIC.match(trimmed):
        return f"{trimmed}{unit}"
    return trimmed


def extract_dimensions(
    group: dict[str, Any],
    tree: Any,
    report: ResolutionReport,
    unit: str | None = DEFAULT_UNIT,
) -> dict[str, str]:
    """Extract dimension/number tokens into a flat map.

    Keys are the hyphen-joined normalised path from ``group``, e.g.
    ``{"space": {"16": ...}}`` yields ``"space-16"``.
    """
    result: dict[str, str] = {}

    def visit(node: dict[str, Any], prefix: str) -> None:
        for key, child in node.items():
            if key in RESERVED_KEYS or not isinstance(child, dict):
                continue

            name = normalize_key(key)
            full_key = f"{prefix}-{name}" if prefix else name

            if not is_token_node(child):
                visit(child, full_key)
            elif token_type(child) in DIMENSION_TYPES:
                resolved = resolve_reference(_raw_value(child), tree, report)
                result[full_key] = format_dimension_value(resolved, unit)

    visit(group, "")
    return result


# =============================================================================
# Typography
# =============================================================================


def extract_typography_presets(
    group: dict[str, Any],
    tree: Any,
    report: ResolutionReport,
    unit: str | None = DEFAULT_UNIT,
) -> dict[str, TypographyPreset]:
    """Extract typography presets, fanning out group-level weight variants.

    The group's children are named presets ("Display", "Body Large").
    Two optional group-level entries apply to every preset that does not
    declare its own value:

    - ``letter spacing``: a single token
    - ``font weight``: a single token, or a group of weight name -> token.
      A group produces one output preset per weight, keyed
      ``<preset>-<weight slug>``.

    Args:
        group: Raw typography group (e.g. semantic ``Heading``)
        tree: Full raw tree for alias lookups
        report: Diagnostics sink
        unit: Suffix for unitless sizes (font weights never get one)

    Returns:
        Presets keyed by normalised name, in declaration order then weight
        order
    """
    result: dict[str, TypographyPreset] = {}

    def dimension(node: dict[str, Any], with_unit: bool = True) -> str:
        resolved = resolve_reference(_raw_value(node), tree, report)
        return format_dimension_value(resolved, unit if with_unit else None)

    group_letter_spacing: str | None = None
    letter_spacing_node = group.get(GROUP_LETTER_SPACING)
    if is_token_node(letter_spacing_node):
        group_letter_spacing = dimension(letter_spacing_node)

    group_weight: str | None = None
    group_weights: dict[str, str] = {}
    weight_node = group.get(GROUP_FONT_WEIGHT)
    if is_token_node(weight_node):
        group_weight = dimension(weight_node, with_unit=False)
    elif is_group(weight_node):
        for weight_name, node in weight_node.items():
            if is_token_node(node):
                group_weights[weight_name] = dimension(node, with_unit=False)

    for key, preset_group in group.items():
        if key in (GROUP_LETTER_SPACING, GROUP_FONT_WEIGHT) or not isinstance(preset_group, dict):
            continue

        name = normalize_key(key)
        fields: dict[str, str] = {}

        if is_token_node(node := preset_group.get("font size")):
            fields["font_size"] = dimension(node)
        if is_token_node(node := preset_group.get("line height")):
            fields["line_height"] = dimension(node)
        if is_token_node(node := preset_group.get("letter spacing")):
            fields["letter_spacing"] = dimension(node)
        if not fields.get("letter_spacing") and group_letter_spacing:
            fields["letter_spacing"] = group_letter_spacing

        own_weight = preset_group.get("font weight")
        has_own_weight = is_token_node(own_weight)
        if has_own_weight:
            fields["font_weight"] = dimension(own_weight, with_unit=False)

        if not fields:
            continue

        if has_own_weight:
            result[name] = TypographyPreset(**fields)
        elif group_weights:
            for weight_name, weight in group_weights.items():
                slug = font_weight_to_slug(weight_name)
                # Preset names like "Title Bold" already carry the weight
                composite = name if name.endswith(f"-{slug}") else f"{name}-{slug}"
                result[composite] = TypographyPreset(**fields, font_weight=weight)
        elif group_weight:
            result[name] = TypographyPreset(**fields, font_weight=group_weight)
        else:
            result[name] = TypographyPreset(**fields)

    return result


# =============================================================================
# Helpers
# =============================================================================


def _raw_value(node: dict[str, Any]) -> Any:
    value = token_value(node)
    return "" if value is None else value
