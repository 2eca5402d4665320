"""
Source code exporters.

Exporters render resolved tokens into :class:`GeneratedFile` objects;
writing them is left to :mod:`figtokens.writer`.
"""

from .base import CompositeExporter, ExportInput, Exporter, GeneratedFile
from .colors import ColorExporter
from .gradients import GradientExporter
from .render import TemplateRenderer, build_identifier_map, resolve_gradient
from .typography import FontExporter, LabelsExporter, UIFontExporter
from .xcode import XcodeExporter

__all__ = [
    "ColorExporter",
    "CompositeExporter",
    "ExportInput",
    "Exporter",
    "FontExporter",
    "GeneratedFile",
    "GradientExporter",
    "LabelsExporter",
    "TemplateRenderer",
    "UIFontExporter",
    "XcodeExporter",
    "build_identifier_map",
    "resolve_gradient",
]
