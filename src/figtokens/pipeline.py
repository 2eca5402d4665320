"""
End-to-end export.

load styles/nodes -> normalize -> resolve variants -> pair -> render ->
write. Every artifact is rendered in memory first; nothing is written if
any step fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from figtokens.client.figma import FigmaClient
from figtokens.core.config import ExportConfig, IOSConfig, get_access_token
from figtokens.core.diagnostics import Diagnostic, DiagnosticsCollector, LoggingDiagnostics
from figtokens.core.errors import ConfigError
from figtokens.core.ir.tokens import Platform, TextStyleToken, VariantPair
from figtokens.core.loaders import ColorsLoader, FigmaSource, TextStylesLoader
from figtokens.core.pairing import pair_assets
from figtokens.core.variants import resolve_variants
from figtokens.exporters.base import ExportInput, GeneratedFile
from figtokens.exporters.xcode import XcodeExporter
from figtokens.writer import write_files

logger = logging.getLogger(__name__)


@dataclass
class ExportReport:
    """What an export run produced."""

    files: list[GeneratedFile] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    color_count: int = 0
    gradient_count: int = 0
    text_style_count: int = 0


def build_export_input(
    variants: VariantPair,
    text_styles: list[TextStyleToken],
    platform: Platform = Platform.IOS,
) -> ExportInput:
    """Filter tokens for ``platform`` and pair light with dark."""
    light = variants.light.filter_platform(platform)
    dark = variants.dark.filter_platform(platform) if variants.dark is not None else None
    return ExportInput(
        colors=pair_assets(light.colors, dark.colors if dark else None),
        gradients=pair_assets(light.gradients, dark.gradients if dark else None),
        text_styles=[s for s in text_styles if s.platform in (None, platform)],
    )


def needs_text_styles(ios: IOSConfig) -> bool:
    return bool(ios.font_swift or ios.swiftui_font_swift or (ios.generate_labels and ios.labels_directory))


def render_ios(
    config: ExportConfig,
    source: FigmaSource,
    diagnostics: DiagnosticsCollector | None = None,
    parallel: bool = True,
) -> ExportReport:
    """
    Load tokens and render every configured iOS artifact in memory.

    Raises:
        ConfigError: If no [ios] section is configured
        FigtokensError: On any structural failure (empty catalog, transport,
            broken cross-reference, duplicate names)
    """
    if config.ios is None:
        raise ConfigError("No [ios] section in configuration")
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()

    colors_loader = ColorsLoader(source, diagnostics)
    variants = resolve_variants(config.colors, colors_loader.load, parallel=parallel)

    text_styles: list[TextStyleToken] = []
    if needs_text_styles(config.ios):
        text_styles = TextStylesLoader(source, diagnostics).load(config.figma.light_file_id)

    export_input = build_export_input(variants, text_styles)
    files = XcodeExporter(config.ios).export(export_input)

    return ExportReport(
        files=files,
        diagnostics=list(diagnostics.diagnostics),
        color_count=len(export_input.colors),
        gradient_count=len(export_input.gradients),
        text_style_count=len(export_input.text_styles),
    )


def run_export(config: ExportConfig, dry_run: bool = False, parallel: bool = True) -> ExportReport:
    """
    Run a complete export against the Figma API.

    Args:
        config: Validated configuration
        dry_run: Render without writing
        parallel: Load light and dark files concurrently

    Returns:
        ExportReport
    """
    token = get_access_token()
    with FigmaClient(token, base_url=config.figma.base_url, timeout=config.figma.timeout) as client:
        report = render_ios(config, client, parallel=parallel)

    if dry_run:
        logger.info("Dry run: %d files rendered, nothing written", len(report.files))
        return report

    report.written = write_files(report.files)
    return report
