"""
TypeScript constant generator.

Emits ``designTokens`` as a ``const`` literal plus one re-export per
bucket, so application code can import typed token values.
"""

from __future__ import annotations

import json

from tokensync.core.ir import UnifiedTokenModel

HEADER = """/**
 * Design Tokens - Auto-generated from Figma (Tokens Studio)
 * Generated at: {generated_at}
 *
 * This file is generated. Do not edit it by hand.
 * Change the tokens in Figma, export tokens.json and run `tokensync sync`.
 */
"""

# Exported name -> property path on designTokens
REEXPORTS: tuple[tuple[str, str], ...] = (
    ("textColors", "colors.text"),
    ("bgColors", "colors.bg"),
    ("borderColors", "colors.border"),
    ("iconColors", "colors.icon"),
    ("primitiveColors", "colors.primitive"),
    ("spacing", "spacing"),
    ("container", "container"),
    ("fontSize", "fontSize"),
    ("lineHeight", "lineHeight"),
    ("fontWeight", "fontWeight"),
    ("letterSpacing", "letterSpacing"),
    ("borderRadius", "borderRadius"),
    ("borderWidth", "borderWidth"),
    ("headingTypography", "typography.heading"),
    ("bodyTypography", "typography.body"),
)

TAILWIND_COLORS = """export const tailwindColors = {
  text: textColors,
  bg: bgColors,
  border: borderColors,
  icon: iconColors,
  ...primitiveColors,
};
"""


def generate_typescript(tokens: UnifiedTokenModel, generated_at: str) -> str:
    """
    Generate the TypeScript artifact.

    Args:
        tokens: Unified token model
        generated_at: Timestamp written into the header comment

    Returns:
        TypeScript module source
    """
    literal = json.dumps(tokens.to_literal(), indent=2, ensure_ascii=False)

    parts = [
        HEADER.format(generated_at=generated_at),
        f"export const designTokens = {literal} as const;",
        "",
    ]
    parts.extend(f"export const {name} = designTokens.{path};" for name, path in REEXPORTS)
    parts.append("")
    parts.append(TAILWIND_COLORS)
    parts.append("export default designTokens;")
    return "\n".join(parts) + "\n"
