"""
Xcode exporter: every iOS artifact for one export run.
"""

from __future__ import annotations

from .base import CompositeExporter, Exporter
from .colors import ColorExporter
from .gradients import GradientExporter
from .typography import FontExporter, LabelsExporter, UIFontExporter


class XcodeExporter(CompositeExporter):
    """
    Runs the iOS exporters in a fixed order.

    Example:
        exporter = XcodeExporter(config.ios)
        files = exporter.export(ExportInput(colors=..., gradients=..., text_styles=...))
    """

    def get_exporters(self) -> list[Exporter]:
        return [
            ColorExporter(self.output, self.renderer),
            GradientExporter(self.output, self.renderer),
            UIFontExporter(self.output, self.renderer),
            FontExporter(self.output, self.renderer),
            LabelsExporter(self.output, self.renderer),
        ]
