"""
CSS generator for design tokens.

Produces an ``@theme inline`` block of custom properties followed by an
``@layer utilities`` block with one class per colour, spacing, container
and typography entry, each reading its custom property.
"""

from __future__ import annotations

from typing import Any

from tokensync.core.ir import TypographyPreset, UnifiedTokenModel

HEADER = """/**
 * Design Token CSS Variables - Auto-generated from Figma (Tokens Studio)
 * Generated at: {generated_at}
 *
 * This file is generated. Do not edit it by hand.
 * Change the tokens in Figma, export tokens.json and run `tokensync sync`.
 *
 * Usage: @import './design-tokens.css'; in globals.css
 */
"""

COLOR_USAGES: tuple[tuple[str, str, str], ...] = (
    ("text", "Text Colors", "color"),
    ("bg", "Background Colors", "background-color"),
    ("border", "Border Colors", "border-color"),
    ("icon", "Icon Colors", "color"),
)


def generate_css(tokens: UnifiedTokenModel, generated_at: str) -> str:
    """
    Generate the CSS artifact.

    Args:
        tokens: Unified token model
        generated_at: Timestamp written into the header comment

    Returns:
        CSS document text
    """
    lines: list[str] = [HEADER.format(generated_at=generated_at), "@theme inline {"]
    lines.extend(_theme_variables(tokens))
    lines.append("}")
    lines.append("")
    lines.append("@layer utilities {")
    lines.extend(_utility_classes(tokens))
    lines.append("}")
    return "\n".join(lines) + "\n"


def _section(title: str) -> list[str]:
    return ["", f"  /* {title} */"]


def _theme_variables(tokens: UnifiedTokenModel) -> list[str]:
    lines: list[str] = []

    # Primitive families are emitted two levels deep (family-shade-sub)
    lines.extend(_section("Primitive Colors"))
    for family, shades in tokens.colors.primitive.items():
        if not isinstance(shades, dict):
            continue
        for shade, value in shades.items():
            if isinstance(value, str):
                lines.append(f"  --color-{family}-{shade}: {value};")
            elif isinstance(value, dict):
                for sub, sub_value in value.items():
                    if isinstance(sub_value, str):
                        lines.append(f"  --color-{family}-{shade}-{sub}: {sub_value};")

    for usage, title, _ in COLOR_USAGES:
        lines.extend(_section(title))
        for path, value in _color_leaves(getattr(tokens.colors, usage)):
            lines.append(f"  --color-{usage}-{path}: {value};")

    lines.extend(_section("Spacing"))
    lines.extend(f"  --spacing-{key}: {value};" for key, value in tokens.spacing.items())

    lines.extend(_section("Container Sizes"))
    for key, value in tokens.container.items():
        lines.append(f"  --container-{_strip_prefix(key, 'container-')}: {value};")

    lines.extend(_section("Font Sizes"))
    lines.extend(f"  --font-size-{key}: {value};" for key, value in tokens.font_size.items())

    lines.extend(_section("Line Heights"))
    lines.extend(f"  --line-height-{key}: {value};" for key, value in tokens.line_height.items())

    lines.extend(_section("Border Radius"))
    lines.extend(f"  --radius-{key}: {value};" for key, value in tokens.border_radius.items())

    for group, title in (("heading", "Heading"), ("body", "Body")):
        lines.extend(_section(f"Typography - {title}"))
        for key, preset in getattr(tokens.typography, group).items():
            for prop, value in preset.css_fields():
                lines.append(f"  --typography-{group}-{key}-{prop}: {value};")

    return lines


def _utility_classes(tokens: UnifiedTokenModel) -> list[str]:
    lines: list[str] = []

    for group in ("heading", "body"):
        presets: dict[str, TypographyPreset] = getattr(tokens.typography, group)
        for key, preset in presets.items():
            lines.extend(_rule(f".text-{group}-{key}", preset.css_fields()))

    for usage, _, prop in COLOR_USAGES:
        for path, _value in _color_leaves(getattr(tokens.colors, usage)):
            lines.extend(_rule(f".{usage}-{path}", [(prop, f"var(--color-{usage}-{path})")]))

    for key in tokens.spacing:
        if key.startswith("space-"):
            lines.extend(_rule(f".{key}", [("gap", f"var(--spacing-{key})")]))

    for key in tokens.container:
        name = _strip_prefix(key, "container-")
        declarations = [("width", "100%"), ("max-width", f"var(--container-{name})")]
        lines.extend(_rule(f".container-{name}", declarations))

    return lines


def _rule(selector: str, declarations: list[tuple[str, str]]) -> list[str]:
    """Render a rule; single declarations stay on one line."""
    if len(declarations) == 1:
        prop, value = declarations[0]
        return [f"  {selector} {{ {prop}: {value}; }}"]
    lines = [f"  {selector} {{"]
    lines.extend(f"    {prop}: {value};" for prop, value in declarations)
    lines.append("  }")
    return lines


def _color_leaves(tree: dict[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Flatten a nested colour map into (hyphen-joined path, value) pairs."""
    leaves: list[tuple[str, str]] = []
    for key, value in tree.items():
        path = f"{prefix}-{key}" if prefix else key
        if isinstance(value, dict):
            leaves.extend(_color_leaves(value, path))
        elif isinstance(value, str):
            leaves.append((path, value))
    return leaves


def _strip_prefix(key: str, prefix: str) -> str:
    return key[len(prefix) :] if key.startswith(prefix) else key
