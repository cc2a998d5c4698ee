"""
tokensync - Tokens Studio export compiler.

Turns a designer-authored token tree (tokens.json) into CSS custom
properties with utility classes and a typed TypeScript constant.
"""

from tokensync._version import get_version
from tokensync.core.assembler import AssemblerOptions, AssemblyResult, transform_tokens
from tokensync.core.ir import UnifiedTokenModel
from tokensync.core.report import ResolutionReport
from tokensync.emitters import generate_css, generate_typescript

__version__ = get_version()

__all__ = [
    "__version__",
    "AssemblerOptions",
    "AssemblyResult",
    "ResolutionReport",
    "UnifiedTokenModel",
    "generate_css",
    "generate_typescript",
    "transform_tokens",
]
