"""
Artifact emitters.

Both emitters are pure functions of a UnifiedTokenModel and a generation
timestamp.
"""

from .css import generate_css
from .typescript import generate_typescript

__all__ = ["generate_css", "generate_typescript"]
