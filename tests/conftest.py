"""Shared pytest fixtures for tokensync tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def token(value: Any, kind: str = "color") -> dict[str, Any]:
    return {"value": value, "type": kind}


@pytest.fixture
def sample_tokens() -> dict[str, Any]:
    """A Tokens Studio export in the current (single set) convention."""
    return {
        "TokenStudio": {
            "primitive": {
                "color": {
                    "base": {"white": token("#ffffff"), "black": token("#18181b")},
                    "neutral": {"100": token("#f8f8f8"), "900": token("#2f2f2f")},
                    "purple": {"500": token("#604fed")},
                },
                "size-unit": {
                    "0": token("0", "dimension"),
                    "4": token(4, "dimension"),
                    "16": token("16", "dimension"),
                },
                "typography": {
                    "font size": {
                        "14": token("14", "dimension"),
                        "32": token("32", "dimension"),
                    },
                    "line height": {
                        "20": token("20", "dimension"),
                        "40": token("40", "dimension"),
                    },
                    "font weight": {
                        "regular": token("400", "number"),
                        "bold": token("700", "number"),
                    },
                },
            },
            "semantic": {
                "color": {
                    "text": {
                        "primary": token("{color.base.black}"),
                        "inverse": token("{base.white}"),
                    },
                    "bg": {"primary": token("{base.white}")},
                    "border": {"default": token("{neutral.100}")},
                    "icon": {"muted": token("{neutral.900}")},
                    "etc": {"overlay": token("rgba(0, 0, 0, 0.5)")},
                },
                "size": {
                    "space": {"16": token("{size-unit.16}", "dimension")},
                    "border-radius": {"md": token("{size-unit.4}", "dimension")},
                    "border-width": {"thin": token(1, "dimension")},
                    "container": {
                        "md": token("768", "dimension"),
                        "full": token("100%", "dimension"),
                    },
                },
                "typography": {
                    "Heading": {
                        "font weight": {
                            "bold": token("{font weight.bold}", "fontWeight"),
                            "regular": token("{font weight.regular}", "fontWeight"),
                        },
                        "letter spacing": token("-0.5", "dimension"),
                        "Display": {
                            "font size": token("{font size.32}", "dimension"),
                            "line height": token("{line height.40}", "dimension"),
                        },
                    },
                    "Body": {
                        "font weight": token("{font weight.regular}", "fontWeight"),
                        "Body Large": {
                            "font size": token("{font size.14}", "dimension"),
                            "line height": token("{line height.20}", "dimension"),
                        },
                        "Caption": {
                            "font size": token("{font size.14}", "dimension"),
                            "font weight": token("700", "fontWeight"),
                        },
                    },
                },
            },
        }
    }


@pytest.fixture
def tokens_file(tmp_path: Path, sample_tokens: dict[str, Any]) -> Path:
    """Write the sample export to src/token/tokens.json under tmp_path."""
    path = tmp_path / "src" / "token" / "tokens.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(sample_tokens), encoding="utf-8")
    return path
