"""Tests for the token set assembler."""

from __future__ import annotations

from typing import Any

from tokensync.core.assembler import AssemblerOptions, transform_tokens
from tokensync.core.ir import TypographyPreset, UnifiedTokenModel


def token(value: Any, kind: str = "color") -> dict[str, Any]:
    return {"value": value, "type": kind}


class TestCurrentConvention:
    """Assembly of a single-set (TokenStudio.primitive/semantic) export."""

    def test_colors(self, sample_tokens):
        colors = transform_tokens(sample_tokens).model.colors

        assert colors.primitive == {
            "base": {"white": "#ffffff", "black": "#18181b"},
            "neutral": {"100": "#f8f8f8", "900": "#2f2f2f"},
            "purple": {"500": "#604fed"},
            "etc": {"overlay": "rgba(0, 0, 0, 0.5)"},
        }
        assert colors.text == {"primary": "#18181b", "inverse": "#ffffff"}
        assert colors.bg == {"primary": "#ffffff"}
        assert colors.border == {"default": "#f8f8f8"}
        assert colors.icon == {"muted": "#2f2f2f"}

    def test_sizes(self, sample_tokens):
        model = transform_tokens(sample_tokens).model

        assert model.spacing == {
            "size-unit-0": "0px",
            "size-unit-4": "4px",
            "size-unit-16": "16px",
            "space-16": "16px",
        }
        assert model.border_radius == {"border-radius-md": "4px"}
        assert model.border_width == {"border-width-thin": "1px"}
        assert model.container == {"container-md": "768px", "container-full": "100%"}

    def test_primitive_typography_scales(self, sample_tokens):
        model = transform_tokens(sample_tokens).model

        assert model.font_size == {"font-size-14": "14px", "font-size-32": "32px"}
        assert model.line_height == {"line-height-20": "20px", "line-height-40": "40px"}
        assert model.font_weight == {"font-weight-regular": "400", "font-weight-bold": "700"}
        assert model.letter_spacing == {}

    def test_typography_presets(self, sample_tokens):
        typography = transform_tokens(sample_tokens).model.typography

        assert typography.heading == {
            "display-bold": TypographyPreset(
                font_size="32px", line_height="40px", letter_spacing="-0.5px", font_weight="700"
            ),
            "display-regular": TypographyPreset(
                font_size="32px", line_height="40px", letter_spacing="-0.5px", font_weight="400"
            ),
        }
        assert typography.body == {
            "body-large": TypographyPreset(
                font_size="14px", line_height="20px", font_weight="400"
            ),
            "caption": TypographyPreset(font_size="14px", font_weight="700"),
        }

    def test_clean_report(self, sample_tokens):
        report = transform_tokens(sample_tokens).report
        assert report.unresolved == []
        assert report.warnings == []
        assert not report.has_issues

    def test_unit_option(self, sample_tokens):
        model = transform_tokens(sample_tokens, AssemblerOptions(unit="rem")).model
        assert model.spacing["space-16"] == "16rem"
        assert model.typography.heading["display-bold"].font_size == "32rem"
        assert model.font_weight["font-weight-bold"] == "700"

        bare = transform_tokens(sample_tokens, AssemblerOptions(unit=None)).model
        assert bare.spacing["size-unit-4"] == "4"

    def test_custom_set_name(self, sample_tokens):
        renamed = {"Tokens": sample_tokens["TokenStudio"]}
        assert transform_tokens(renamed).model.colors.text == {}

        model = transform_tokens(renamed, AssemblerOptions(set_name="Tokens")).model
        assert model.colors.text == {"primary": "#18181b", "inverse": "#ffffff"}


class TestLegacyConvention:
    """Assembly of a per-collection (\"Semantic: Color/Mode 1\") export."""

    def legacy_tokens(self) -> dict[str, Any]:
        return {
            ".Primitive: Color/Mode 1": {"gray": {"50": token("#fafafa")}},
            "Semantic: Color/Mode 1": {"text": {"body": token("{gray.50}")}},
            "Primitive: Size/Mode 1": {
                "size-unit": {"8": token("8", "dimension")},
                "space": {"8": token("{size-unit.8}", "dimension")},
                "border-radius": {"sm": token("2", "dimension")},
            },
            "": {
                "Primitive: Typography/Mode 1": {
                    "font size": {"40": token("40", "dimension")},
                }
            },
            "Semantic: Typography/Mode 1": {
                "Heading": {"H1": {"font size": token("{font size.40}", "dimension")}},
            },
        }

    def test_legacy_sources(self):
        model = transform_tokens(self.legacy_tokens()).model

        assert model.colors.primitive == {"gray": {"50": "#fafafa"}}
        assert model.colors.text == {"body": "#fafafa"}
        assert model.spacing == {"size-unit-8": "8px", "space-8": "8px"}
        assert model.border_radius == {"border-radius-sm": "2px"}
        assert model.container == {}
        assert model.font_size == {"font-size-40": "40px"}
        assert model.typography.heading == {"h1": TypographyPreset(font_size="40px")}

    def test_primitive_color_sources_merge(self, sample_tokens):
        raw = dict(sample_tokens)
        raw[".Primitive: Color/Mode 1"] = {
            "purple": {"600": token("#5746e2")},
            "red": {"500": token("#ff3757")},
        }
        primitive = transform_tokens(raw).model.colors.primitive

        assert primitive["purple"] == {"500": "#604fed", "600": "#5746e2"}
        assert primitive["red"] == {"500": "#ff3757"}
        assert list(primitive)[:3] == ["base", "neutral", "purple"]

    def test_current_semantic_colors_shadow_legacy(self, sample_tokens):
        raw = dict(sample_tokens)
        raw["Semantic: Color/Mode 1"] = {"text": {"legacy": token("#123456")}}
        text = transform_tokens(raw).model.colors.text
        assert "legacy" not in text


class TestAbsenceAndDiagnostics:
    def test_empty_tree(self):
        result = transform_tokens({})
        assert result.model == UnifiedTokenModel()
        assert not result.report.has_issues

    def test_partial_tree(self):
        raw = {"TokenStudio": {"semantic": {"color": {"bg": {"page": token("#fff")}}}}}
        model = transform_tokens(raw).model
        assert model.colors.bg == {"page": "#fff"}
        assert model.colors.text == {}
        assert model.spacing == {}
        assert model.typography.heading == {}

    def test_dead_and_cyclic_refs_do_not_stop_siblings(self):
        raw = {
            "TokenStudio": {
                "primitive": {"color": {"a": token("{b}"), "b": token("{a}")}},
                "semantic": {
                    "color": {
                        "text": {
                            "ghost": token("{nowhere.at.all}"),
                            "ok": token("#000000"),
                        }
                    }
                },
            }
        }
        result = transform_tokens(raw)

        assert result.model.colors.primitive == {"a": "{b}", "b": "{a}"}
        assert result.model.colors.text == {"ghost": "{nowhere.at.all}", "ok": "#000000"}
        assert result.report.unresolved == ["nowhere.at.all"]
        assert set(result.report.cycles) == {"a", "b"}
        assert result.report.has_issues
