"""
tokensync command line.

Commands:
- sync: transform tokens.json and write design-tokens.css / design-tokens.ts
- inspect: transform and report bucket counts without writing
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokensync._version import get_version
from tokensync.core.assembler import AssemblyResult
from tokensync.core.errors import TokenInputError, TokenSyncError
from tokensync.core.manifest import SyncConfig, discover_config, load_config
from tokensync.core.sync import build, run_sync

app = typer.Typer(
    help="Compile Tokens Studio exports into CSS variables and a TypeScript constant",
    no_args_is_help=True,
)

console = Console()

# Buckets shown in the post-sync summary
SUMMARY_BUCKETS = ("text", "bg", "primitive", "spacing")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tokensync {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """tokensync CLI main callback for global options."""
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_config(config: Path | None, output_dir: Path | None, unit: str | None) -> SyncConfig:
    settings = load_config(config) if config else discover_config(Path.cwd())
    if output_dir is not None:
        settings.output_dir = str(output_dir.resolve())
    if unit is not None:
        settings.unit = unit or None
    return settings


def _print_diagnostics(assembly: AssemblyResult) -> None:
    report = assembly.report
    for warning in report.warnings:
        console.print(f"[yellow]⚠ {escape(warning)}[/yellow]")
    if report.unresolved:
        refs = ", ".join(f"{{{ref}}}" for ref in report.unresolved)
        console.print(f"\n[yellow]⚠ Unresolved references:[/yellow] {escape(refs)}")


@app.command(name="sync")
def sync_command(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to tokensync.toml"),
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Token file (skips discovery)"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for the generated files"
    ),
    unit: str | None = typer.Option(
        None, "--unit", help="Unit for unitless dimensions ('' for none)"
    ),
    timestamp: str | None = typer.Option(
        None, "--timestamp", help="Fixed generation timestamp for reproducible output"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Transform tokens.json and write design-tokens.css and design-tokens.ts."""
    _configure_logging(verbose)

    try:
        settings = _load_config(config, output_dir, unit)
        console.print("[bold]🎨 Tokens Studio → Tailwind sync[/bold]")
        console.print("=" * 50)
        console.print(f"📂 Output: {escape(str(settings.output_path))}")
        result = run_sync(settings, input_path=input_path, generated_at=timestamp)
    except TokenSyncError as e:
        typer.echo(f"❌ {e}", err=True)
        if isinstance(e, TokenInputError):
            typer.echo(
                "\n💡 Export tokens.json from Tokens Studio into src/token/ and run tokensync sync",
                err=True,
            )
        raise typer.Exit(code=1)

    counts = result.assembly.model.bucket_counts()
    console.print(f"📂 Input: {escape(str(result.input_path))}")
    console.print("[green]✅ Tokens transformed[/green]")
    console.print("\n📊 Result:")
    for bucket in SUMMARY_BUCKETS:
        console.print(f"   - {bucket}: {counts[bucket]}")

    console.print(f"\n[green]✅ TypeScript:[/green] {escape(str(result.ts_path))}")
    console.print(f"[green]✅ CSS:[/green] {escape(str(result.css_path))}")
    _print_diagnostics(result.assembly)
    console.print("\n🎉 Sync complete!")


@app.command(name="inspect")
def inspect_command(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to tokensync.toml"),
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Token file (skips discovery)"
    ),
    unit: str | None = typer.Option(
        None, "--unit", help="Unit for unitless dimensions ('' for none)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Transform tokens.json and show what would be generated."""
    _configure_logging(verbose)

    try:
        settings = _load_config(config, None, unit)
        path, assembly = build(settings, input_path)
    except TokenSyncError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)

    table = Table(title=f"Tokens in {escape(str(path))}")
    table.add_column("Bucket")
    table.add_column("Entries", justify="right")
    for bucket, count in assembly.model.bucket_counts().items():
        table.add_row(bucket, str(count))
    console.print(table)
    _print_diagnostics(assembly)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
