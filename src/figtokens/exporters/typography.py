"""
Typography exporters: font accessors and labels.

- ``UIFontExporter``   UIKit ``UIFont`` extension
- ``FontExporter``     SwiftUI ``Font`` extension
- ``LabelsExporter``   ``Label.swift`` with one subclass per style,
                       ``LabelStyle.swift`` and, optionally, a
                       ``LabelStyle`` extension with one factory per style
"""

from __future__ import annotations

import logging

from .base import ExportInput, Exporter, GeneratedFile
from .render import build_text_style_models

logger = logging.getLogger(__name__)


class UIFontExporter(Exporter):
    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        path = self.output.resolve(self.output.font_swift)
        if path is None:
            return []
        models = build_text_style_models(tokens.text_styles, self.output.name_style)
        text = self.renderer.render(
            "uifont.swift.jinja",
            styles=models,
            add_objc_attribute=self.output.add_objc_attribute,
        )
        return [GeneratedFile.from_text(path, text)]


class FontExporter(Exporter):
    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        path = self.output.resolve(self.output.swiftui_font_swift)
        if path is None:
            return []
        models = build_text_style_models(tokens.text_styles, self.output.name_style)
        text = self.renderer.render("font.swift.jinja", styles=models)
        return [GeneratedFile.from_text(path, text)]


class LabelsExporter(Exporter):
    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        directory = self.output.resolve(self.output.labels_directory)
        if not self.output.generate_labels or directory is None:
            return []

        models = build_text_style_models(tokens.text_styles, self.output.name_style)
        extension_path = self.output.resolve(self.output.label_style_swift)
        separate_styles = extension_path is not None

        files = [
            GeneratedFile.from_text(
                directory / "Label.swift",
                self.renderer.render(
                    "label.swift.jinja", styles=models, separate_styles=separate_styles
                ),
            ),
            GeneratedFile.from_text(
                directory / "LabelStyle.swift",
                self.renderer.render("label_style.swift.jinja"),
            ),
        ]
        if extension_path is not None:
            files.append(
                GeneratedFile.from_text(
                    extension_path,
                    self.renderer.render("label_style_extension.swift.jinja", styles=models),
                )
            )
        logger.debug("Rendered %d label classes into %s", len(models), directory)
        return files
