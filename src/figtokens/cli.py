"""
figtokens command line interface.

    figtokens export   [--config figtokens.toml] [--dry-run]
    figtokens validate [--config figtokens.toml]
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import typer

from figtokens._version import __version__
from figtokens.core.config import CONFIG_FILE, load_config
from figtokens.core.errors import FigtokensError
from figtokens.pipeline import ExportReport, run_export

LOG_LEVEL_ENV_VAR = "FIGTOKENS_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"figtokens {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="Export Figma color, gradient and text styles as source code.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """figtokens CLI main callback for global options."""
    pass


ConfigOption = typer.Option(
    Path(CONFIG_FILE), "--config", "-c", help="Path to figtokens.toml"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _print_report(report: ExportReport) -> None:
    typer.echo(
        f"Colors: {report.color_count}  Gradients: {report.gradient_count}  "
        f"Text styles: {report.text_style_count}"
    )
    if report.diagnostics:
        typer.echo(f"Skipped ({len(report.diagnostics)}):")
        for diagnostic in report.diagnostics:
            typer.echo(f"  - {diagnostic}")


def _run(config_path: Path, dry_run: bool, parallel: bool) -> ExportReport:
    try:
        config = load_config(config_path)
        return run_export(config, dry_run=dry_run, parallel=parallel)
    except FigtokensError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("export")
def export_command(
    config: Path = ConfigOption,
    dry_run: bool = typer.Option(False, "--dry-run", help="Render without writing files"),
    sequential: bool = typer.Option(
        False, "--sequential", help="Load light and dark files one after the other"
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Load tokens from Figma and write the generated files."""
    configure_logging(verbose)
    report = _run(config, dry_run=dry_run, parallel=not sequential)
    _print_report(report)
    if dry_run:
        for file in report.files:
            typer.echo(f"  would write {file.path}")
    else:
        for path in report.written:
            typer.echo(f"✓ {path}")


@app.command("validate")
def validate_command(
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Load and render everything in memory without writing."""
    configure_logging(verbose)
    report = _run(config, dry_run=True, parallel=True)
    _print_report(report)
    typer.echo(f"✓ {len(report.files)} files render cleanly")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
