"""
Raw token document loading.

Locates tokens.json among candidate paths and parses it. This is the
only place the engine's input touches the filesystem.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import TokenInputError

logger = logging.getLogger(__name__)


def find_input(candidates: list[Path]) -> Path:
    """Return the first existing candidate, or the first candidate if none exist."""
    if not candidates:
        raise TokenInputError("No input candidates configured")
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


def load_raw_tokens(path: Path) -> dict[str, Any]:
    """
    Read and parse a Tokens Studio export.

    Raises:
        TokenInputError: If the file is missing, is not valid JSON, or its
            root is not an object
    """
    if not path.exists():
        raise TokenInputError("Token file not found", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TokenInputError(f"JSON parse error: {e}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TokenInputError(f"Cannot read token file: {e}", path) from e

    if not isinstance(data, dict):
        raise TokenInputError("Token file root must be a JSON object", path)

    logger.debug("Loaded %d top-level set(s) from %s", len(data), path)
    return data
