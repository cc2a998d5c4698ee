"""Deep merge for extracted token maps."""

from __future__ import annotations

from typing import Any


def deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """
    Merge ``source`` into a copy of ``target``.

    Nested dicts present on both sides are merged recursively; any other
    value from ``source`` replaces the target's. Keys only in ``target``
    are kept as they are. Neither argument is modified.
    """
    result = dict(target)

    for key, value in source.items():
        existing = result.get(key)
        if isinstance(value, dict) and isinstance(existing, dict):
            result[key] = deep_merge(existing, value)
        else:
            result[key] = value

    return result
