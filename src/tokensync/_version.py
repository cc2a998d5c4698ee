"""Package version lookup."""

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "tokensync"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
_VERSION_LINE = re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE)


def get_version() -> str:
    """Return the source checkout's version, else the installed distribution's."""
    if _PYPROJECT.is_file():
        match = _VERSION_LINE.search(_PYPROJECT.read_text(encoding="utf-8"))
        if match:
            return match.group(1)
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
