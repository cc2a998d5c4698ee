"""
Project configuration loaded from tokensync.toml.

Example:

    [tokens]
    input = ["design/tokens.json"]
    output_dir = "src/styles"
    unit = "px"          # "" leaves unitless dimensions bare
    set = "TokenStudio"
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .assembler import DEFAULT_SET_NAME, AssemblerOptions
from .errors import ConfigError
from .extractors import DEFAULT_UNIT

CONFIG_FILE = "tokensync.toml"

DEFAULT_INPUT_CANDIDATES = [
    "src/token/tokens.json",
    "src/token/token.json",
    "src/tokens.json",
    "src/token.json",
    "token/tokens.json",
    "token/token.json",
    "tokens.json",
    "token.json",
]


@dataclass
class SyncConfig:
    """Input, output and transformation settings for a sync run."""

    root: Path
    input_candidates: list[str] = field(default_factory=lambda: list(DEFAULT_INPUT_CANDIDATES))
    output_dir: str = "src/styles"
    css_file: str = "design-tokens.css"
    ts_file: str = "design-tokens.ts"
    unit: str | None = DEFAULT_UNIT
    set_name: str = DEFAULT_SET_NAME

    def candidate_paths(self) -> list[Path]:
        return [self.root / candidate for candidate in self.input_candidates]

    @property
    def output_path(self) -> Path:
        return self.root / self.output_dir

    @property
    def css_path(self) -> Path:
        return self.output_path / self.css_file

    @property
    def ts_path(self) -> Path:
        return self.output_path / self.ts_file

    def assembler_options(self) -> AssemblerOptions:
        return AssemblerOptions(unit=self.unit, set_name=self.set_name)


def _expect(data: dict[str, Any], key: str, kind: type, path: Path) -> Any:
    value = data[key]
    if not isinstance(value, kind):
        raise ConfigError(f"[tokens].{key} must be a {kind.__name__}", path)
    return value


def load_config(path: Path) -> SyncConfig:
    """Load tokensync.toml; relative paths resolve against its directory."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config: {e}", path) from e

    tokens = data.get("tokens", {})
    if not isinstance(tokens, dict):
        raise ConfigError("[tokens] must be a table", path)

    config = SyncConfig(root=path.parent)

    if "input" in tokens:
        value = tokens["input"]
        candidates = [value] if isinstance(value, str) else value
        if not isinstance(candidates, list) or not all(isinstance(c, str) for c in candidates):
            raise ConfigError("[tokens].input must be a path or a list of paths", path)
        config.input_candidates = candidates
    if "output_dir" in tokens:
        config.output_dir = _expect(tokens, "output_dir", str, path)
    if "css_file" in tokens:
        config.css_file = _expect(tokens, "css_file", str, path)
    if "ts_file" in tokens:
        config.ts_file = _expect(tokens, "ts_file", str, path)
    if "unit" in tokens:
        config.unit = _expect(tokens, "unit", str, path) or None
    if "set" in tokens:
        config.set_name = _expect(tokens, "set", str, path)

    return config


def discover_config(root: Path) -> SyncConfig:
    """Load ``root/tokensync.toml`` when present, otherwise use defaults."""
    path = root / CONFIG_FILE
    if path.exists():
        return load_config(path)
    return SyncConfig(root=root)
