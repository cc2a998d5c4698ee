"""
Token set assembler.

Locates the known token groups in a Tokens Studio export and runs the
typed extractors over them to build one UnifiedTokenModel.

Two export conventions are supported. The current one nests everything
under a single set (``TokenStudio.primitive`` / ``TokenStudio.semantic``);
the legacy one uses one top-level set per collection and mode
(``"Semantic: Color/Mode 1"``). For each bucket the current location is
tried first and the legacy one only when it is absent. Primitive colours
are the exception: every source found is merged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .extractors import (
    DEFAULT_UNIT,
    extract_colors,
    extract_dimensions,
    extract_typography_presets,
)
from .ir import ColorBuckets, TypographyBuckets, UnifiedTokenModel
from .merge import deep_merge
from .report import ResolutionReport
from .tree import get_path

logger = logging.getLogger(__name__)

DEFAULT_SET_NAME = "TokenStudio"

# Legacy per-collection sets
LEGACY_PRIMITIVE_COLOR = "Primitive: Color/Mode 1"
LEGACY_SEMANTIC_COLOR = "Semantic: Color/Mode 1"
LEGACY_PRIMITIVE_SIZE = "Primitive: Size/Mode 1"
LEGACY_PRIMITIVE_TYPOGRAPHY = "Primitive: Typography/Mode 1"
LEGACY_SEMANTIC_TYPOGRAPHY = "Semantic: Typography/Mode 1"

SEMANTIC_COLOR_USAGES = ("text", "bg", "border", "icon")

# Primitive typography subgroup -> (output bucket, key prefix, unit suffixing)
PRIMITIVE_TYPOGRAPHY_SCALES: tuple[tuple[str, str, str, bool], ...] = (
    ("font size", "font_size", "font-size", True),
    ("line height", "line_height", "line-height", True),
    ("letter spacing", "letter_spacing", "letter-spacing", True),
    ("font weight", "font_weight", "font-weight", False),
)


@dataclass
class AssemblerOptions:
    """
    Options for a transformation run.

    Attributes:
        unit: Suffix for unitless dimensions; None leaves them bare
        set_name: Name of the top-level set in the current export convention
    """

    unit: str | None = DEFAULT_UNIT
    set_name: str = DEFAULT_SET_NAME


@dataclass
class AssemblyResult:
    """Unified model plus the diagnostics collected while building it."""

    model: UnifiedTokenModel
    report: ResolutionReport = field(default_factory=ResolutionReport)


def _first_group(raw: dict[str, Any], *paths: tuple[str, ...]) -> dict[str, Any] | None:
    """Return the first candidate path that holds a group."""
    for path in paths:
        node = get_path(raw, *path)
        if isinstance(node, dict):
            logger.debug("Using source %s", ".".join(repr(p) for p in path))
            return node
    return None


def _all_groups(raw: dict[str, Any], *paths: tuple[str, ...]) -> list[dict[str, Any]]:
    return [node for path in paths if isinstance(node := get_path(raw, *path), dict)]


def transform_tokens(
    raw: dict[str, Any], options: AssemblerOptions | None = None
) -> AssemblyResult:
    """
    Build the unified model from a raw token tree.

    Missing groups leave their buckets empty. Unresolved aliases and
    reference cycles are recorded on the returned report.

    Args:
        raw: Parsed tokens.json
        options: Unit and set name overrides

    Returns:
        AssemblyResult with the model and its resolution report
    """
    options = options or AssemblerOptions()
    report = ResolutionReport()
    ts = options.set_name

    def dimensions(name: str, group: dict[str, Any], with_unit: bool = True) -> dict[str, str]:
        unit = options.unit if with_unit else None
        return extract_dimensions({name: group}, raw, report, unit=unit)

    # Colours ----------------------------------------------------------------
    primitive: dict[str, Any] = {}
    for source in _all_groups(
        raw,
        (ts, "primitive", "color"),
        (ts, "color"),
        ("", LEGACY_PRIMITIVE_COLOR),
        ("." + LEGACY_PRIMITIVE_COLOR,),
    ):
        primitive = deep_merge(primitive, extract_colors(source, raw, report))

    semantic_colors: dict[str, dict[str, Any]] = {}
    semantic_color = _first_group(raw, (ts, "semantic", "color"), (LEGACY_SEMANTIC_COLOR,))
    if semantic_color is not None:
        for usage in SEMANTIC_COLOR_USAGES:
            if isinstance(group := semantic_color.get(usage), dict):
                semantic_colors[usage] = extract_colors(group, raw, report)
        if isinstance(group := semantic_color.get("etc"), dict):
            primitive["etc"] = extract_colors(group, raw, report)

    colors = ColorBuckets(primitive=primitive, **semantic_colors)

    # Sizes ------------------------------------------------------------------
    sizes: dict[str, dict[str, str]] = {}
    primitive_set = get_path(raw, ts, "primitive")
    semantic_size = get_path(raw, ts, "semantic", "size")
    legacy_size = raw.get(LEGACY_PRIMITIVE_SIZE)

    def size_group(key: str, *sources: Any) -> dict[str, Any] | None:
        for source in sources:
            node = source.get(key) if isinstance(source, dict) else None
            if isinstance(node, dict):
                return node
        return None

    spacing: dict[str, str] = {}
    size_unit = size_group("size-unit", primitive_set, legacy_size)
    if size_unit is not None:
        spacing = dimensions("size-unit", size_unit)
    space = size_group("space", semantic_size, legacy_size)
    if space is not None:
        spacing = deep_merge(spacing, dimensions("space", space))
    sizes["spacing"] = spacing

    for bucket, key in (("border_radius", "border-radius"), ("border_width", "border-width")):
        source = size_group(key, semantic_size, legacy_size)
        if source is not None:
            sizes[bucket] = dimensions(key, source)

    container = size_group("container", semantic_size)
    if container is not None:
        sizes["container"] = dimensions("container", container)

    # Primitive typography scales --------------------------------------------
    primitive_typography = _first_group(
        raw,
        (ts, "primitive", "typography"),
        ("", LEGACY_PRIMITIVE_TYPOGRAPHY),
        ("." + LEGACY_PRIMITIVE_TYPOGRAPHY,),
    )
    if primitive_typography is not None:
        for source_key, bucket, prefix, with_unit in PRIMITIVE_TYPOGRAPHY_SCALES:
            scale = primitive_typography.get(source_key)
            if isinstance(scale, dict):
                sizes[bucket] = dimensions(prefix, scale, with_unit)

    # Semantic typography presets --------------------------------------------
    presets: dict[str, Any] = {}
    semantic_typography = _first_group(
        raw, (ts, "semantic", "typography"), (LEGACY_SEMANTIC_TYPOGRAPHY,)
    )
    if semantic_typography is not None:
        for bucket, key in (("heading", "Heading"), ("body", "Body")):
            if isinstance(group := semantic_typography.get(key), dict):
                presets[bucket] = extract_typography_presets(
                    group, raw, report, unit=options.unit
                )

    model = UnifiedTokenModel(
        colors=colors,
        typography=TypographyBuckets(**presets),
        **sizes,
    )

    if report.unresolved:
        logger.info("%d unresolved reference(s)", len(report.unresolved))

    return AssemblyResult(model=model, report=report)
