"""
Gradient accessor exporter.

Gradient stops reference the generated color accessors by identifier,
never by raw value, so every stop must resolve to an exported color.
"""

from __future__ import annotations

import logging

from .base import ExportInput, Exporter, GeneratedFile
from .render import build_gradient_models

logger = logging.getLogger(__name__)


class GradientExporter(Exporter):
    """Renders Gradient+Tokens.swift."""

    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        path = self.output.resolve(self.output.gradient_swift)
        if path is None:
            return []
        models = build_gradient_models(tokens.gradients, tokens.colors, self.output.name_style)
        text = self.renderer.render("gradient.swift.jinja", gradients=models)
        logger.debug("Rendered %d gradients into %s", len(models), path.name)
        return [GeneratedFile.from_text(path, text)]
