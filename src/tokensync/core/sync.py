"""
Sync pipeline: read tokens.json, transform, write both artifacts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from tokensync.emitters import generate_css, generate_typescript

from .assembler import AssemblyResult, transform_tokens
from .loader import find_input, load_raw_tokens
from .manifest import SyncConfig

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of a sync run."""

    input_path: Path
    css_path: Path
    ts_path: Path
    assembly: AssemblyResult


def iso_timestamp(now: datetime | None = None) -> str:
    """Format a UTC timestamp like ``2026-02-05T00:39:26.274Z``."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def build(config: SyncConfig, input_path: Path | None = None) -> tuple[Path, AssemblyResult]:
    """Locate, load and transform the token file without writing anything."""
    path = input_path or find_input(config.candidate_paths())
    raw = load_raw_tokens(path)
    return path, transform_tokens(raw, config.assembler_options())


def write_artifacts(
    assembly: AssemblyResult, css_path: Path, ts_path: Path, generated_at: str
) -> None:
    """Write the CSS and TypeScript artifacts, creating parent directories."""
    css_path.parent.mkdir(parents=True, exist_ok=True)
    ts_path.parent.mkdir(parents=True, exist_ok=True)

    ts_path.write_text(generate_typescript(assembly.model, generated_at), encoding="utf-8")
    logger.info("Wrote %s", ts_path)
    css_path.write_text(generate_css(assembly.model, generated_at), encoding="utf-8")
    logger.info("Wrote %s", css_path)


def run_sync(
    config: SyncConfig,
    input_path: Path | None = None,
    generated_at: str | None = None,
) -> SyncResult:
    """
    Run a full sync.

    Args:
        config: Project configuration
        input_path: Explicit token file, bypassing candidate discovery
        generated_at: Timestamp for the artifact headers (defaults to now)

    Returns:
        SyncResult with paths and the assembly diagnostics

    Raises:
        TokenInputError: If the token file cannot be loaded
    """
    path, assembly = build(config, input_path)
    write_artifacts(assembly, config.css_path, config.ts_path, generated_at or iso_timestamp())
    return SyncResult(
        input_path=path,
        css_path=config.css_path,
        ts_path=config.ts_path,
        assembly=assembly,
    )
