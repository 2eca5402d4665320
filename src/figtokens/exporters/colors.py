"""
Color accessor exporter.

Emits a SwiftUI ``Color`` extension with one static property per light
color. Colors with a dark counterpart resolve their value from the
current trait collection.
"""

from __future__ import annotations

import logging

from .base import ExportInput, Exporter, GeneratedFile
from .render import build_color_models

logger = logging.getLogger(__name__)


class ColorExporter(Exporter):
    """Renders Color+Tokens.swift."""

    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        path = self.output.resolve(self.output.color_swift)
        if path is None:
            return []
        models = build_color_models(tokens.colors, self.output.name_style)
        text = self.renderer.render("color.swift.jinja", colors=models)
        logger.debug("Rendered %d colors into %s", len(models), path.name)
        return [GeneratedFile.from_text(path, text)]
