"""
Key normalisation for token group and leaf names.

Every raw key that becomes part of an output identifier (CSS variable,
utility class, constant key) passes through normalize_key().
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[/:]")
_WHITESPACE = re.compile(r"\s+")
_PARENS = re.compile(r"[()]")
_HYPHEN_RUNS = re.compile(r"-+")

# Common font weight names -> class suffix
_FONT_WEIGHT_SLUGS: dict[str, str] = {
    "semi bold": "semibold",
    "semibold": "semibold",
    "extra bold": "extrabold",
    "extrabold": "extrabold",
    "bold": "bold",
    "medium": "medium",
    "regular": "regular",
    "light": "light",
    "thin": "thin",
    "black": "black",
}


def normalize_key(key: str) -> str:
    """Convert a raw token key to lowercase kebab-case.

    ``"Body Large (Mobile)"`` becomes ``"body-large-mobile"`` and
    ``"Primitive: Color/Mode 1"`` becomes ``"primitive-color-mode-1"``.
    Idempotent: normalising a normalised key returns it unchanged.
    """
    key = _SEPARATORS.sub("-", key)
    key = _WHITESPACE.sub("-", key)
    key = _PARENS.sub("", key)
    key = _HYPHEN_RUNS.sub("-", key)
    return key.strip("-").lower()


def font_weight_to_slug(key: str) -> str:
    """Map a font weight name to the suffix used for preset variants."""
    slug = _FONT_WEIGHT_SLUGS.get(key.lower().strip())
    if slug is not None:
        return slug
    return normalize_key(key).replace("-", "")


def loose_key(key: str) -> str:
    """Lowercase a key and drop separators, for alias path matching."""
    return re.sub(r"[-_\s]", "", key.lower())
