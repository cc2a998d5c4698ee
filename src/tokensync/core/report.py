"""
Per-run diagnostics collected during token resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ResolutionReport:
    """
    Diagnostics for a single transformation run.

    Attributes:
        warnings: Free-text warnings in the order they were raised
        cycles: Alias paths at which a reference cycle was detected
        unresolved: Alias paths that matched no token
    """

    warnings: list[str] = field(default_factory=list)
    cycles: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_cycle(self, path: str) -> None:
        self.add_warning(f"Circular reference detected: {path}")
        if path not in self.cycles:
            self.cycles.append(path)

    def add_unresolved(self, path: str) -> None:
        if path not in self.unresolved:
            self.unresolved.append(path)

    @property
    def has_issues(self) -> bool:
        return bool(self.warnings or self.unresolved)
