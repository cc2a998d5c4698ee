"""
Unified token model produced by the assembler.

This is the only structure handed to the emitters. Python attributes are
snake_case; serialisation uses the camelCase names of the generated
TypeScript constant (``fontSize``, ``borderRadius``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .tree import count_tokens

# Nested colour map: leaf is a CSS colour string, branch is name -> subtree
ColorTree = dict[str, Any]

# Flat dimension map: hyphen-joined key -> CSS value ("8px", "1")
DimensionMap = dict[str, str]


class _TokenModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TypographyPreset(_TokenModel):
    """
    A named bundle of typography values.

    Example:
        TypographyPreset(font_size="32px", line_height="40px", font_weight="700")
    """

    font_size: str | None = Field(default=None, description="Font size (e.g. 16px)")
    line_height: str | None = Field(default=None, description="Line height")
    letter_spacing: str | None = Field(default=None, description="Letter spacing")
    font_weight: str | None = Field(default=None, description="Font weight (unitless)")

    def css_fields(self) -> list[tuple[str, str]]:
        """Return (css property, value) pairs for the fields that are set."""
        pairs = [
            ("font-size", self.font_size),
            ("line-height", self.line_height),
            ("letter-spacing", self.letter_spacing),
            ("font-weight", self.font_weight),
        ]
        return [(prop, value) for prop, value in pairs if value]


class ColorBuckets(_TokenModel):
    """Colour maps split by usage."""

    primitive: ColorTree = Field(default_factory=dict, description="Raw palette")
    text: ColorTree = Field(default_factory=dict, description="Text colours")
    bg: ColorTree = Field(default_factory=dict, description="Background colours")
    border: ColorTree = Field(default_factory=dict, description="Border colours")
    icon: ColorTree = Field(default_factory=dict, description="Icon colours")


class TypographyBuckets(_TokenModel):
    """Semantic typography presets."""

    heading: dict[str, TypographyPreset] = Field(default_factory=dict)
    body: dict[str, TypographyPreset] = Field(default_factory=dict)


class UnifiedTokenModel(_TokenModel):
    """
    All extracted tokens for one run.

    Every bucket may be empty when the corresponding source group is
    absent from the input.
    """

    colors: ColorBuckets = Field(default_factory=ColorBuckets)
    spacing: DimensionMap = Field(default_factory=dict)
    container: DimensionMap = Field(default_factory=dict)
    font_size: DimensionMap = Field(default_factory=dict)
    line_height: DimensionMap = Field(default_factory=dict)
    font_weight: DimensionMap = Field(default_factory=dict)
    letter_spacing: DimensionMap = Field(default_factory=dict)
    border_radius: DimensionMap = Field(default_factory=dict)
    border_width: DimensionMap = Field(default_factory=dict)
    typography: TypographyBuckets = Field(default_factory=TypographyBuckets)

    def to_literal(self) -> dict[str, Any]:
        """Dump to plain data using the camelCase names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def bucket_counts(self) -> dict[str, int]:
        """Count entries per bucket for run summaries."""
        return {
            "text": count_tokens(self.colors.text),
            "bg": count_tokens(self.colors.bg),
            "border": count_tokens(self.colors.border),
            "icon": count_tokens(self.colors.icon),
            "primitive": count_tokens(self.colors.primitive),
            "spacing": len(self.spacing),
            "container": len(self.container),
            "fontSize": len(self.font_size),
            "lineHeight": len(self.line_height),
            "fontWeight": len(self.font_weight),
            "letterSpacing": len(self.letter_spacing),
            "borderRadius": len(self.border_radius),
            "borderWidth": len(self.border_width),
            "heading": len(self.typography.heading),
            "body": len(self.typography.body),
        }
