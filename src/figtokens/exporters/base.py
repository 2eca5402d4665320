"""
Base exporter classes.

Exporters turn resolved tokens into generated source files. They never
touch the filesystem; they return :class:`GeneratedFile` objects which the
writer materializes once every exporter has succeeded.

Each exporter focuses on one artifact family (colors, gradients, fonts,
labels), making them easier to test in isolation and to combine per
platform.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from figtokens.core.config import IOSConfig
from figtokens.core.ir.tokens import ColorToken, GradientToken, TextStyleToken
from figtokens.core.pairing import AssetPair

from .render import TemplateRenderer


@dataclass(frozen=True)
class GeneratedFile:
    """
    A rendered artifact waiting to be written.

    Attributes:
        directory: Destination directory
        file_name: File name inside ``directory``
        content: UTF-8 encoded file content
    """

    directory: Path
    file_name: str
    content: bytes

    @classmethod
    def from_text(cls, path: Path, text: str) -> GeneratedFile:
        return cls(directory=path.parent, file_name=path.name, content=text.encode("utf-8"))

    @property
    def path(self) -> Path:
        return self.directory / self.file_name

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


@dataclass
class ExportInput:
    """
    Everything an exporter may consume.

    Attributes:
        colors: Light colors paired with their dark counterparts
        gradients: Light gradients paired with their dark counterparts
        text_styles: Text styles, in catalog order
    """

    colors: list[AssetPair[ColorToken]] = field(default_factory=list)
    gradients: list[AssetPair[GradientToken]] = field(default_factory=list)
    text_styles: list[TextStyleToken] = field(default_factory=list)


class Exporter(ABC):
    """
    Base class for all exporters.

    Example:
        class ColorExporter(Exporter):
            def export(self, tokens: ExportInput) -> list[GeneratedFile]:
                path = self.output.resolve(self.output.color_swift)
                if path is None:
                    return []
                text = self.renderer.render("color.swift.jinja", colors=...)
                return [GeneratedFile.from_text(path, text)]
    """

    def __init__(self, output: IOSConfig, renderer: TemplateRenderer | None = None):
        """
        Initialize exporter.

        Args:
            output: Output targets and naming options
            renderer: Template renderer (a default one is created if omitted)
        """
        self.output = output
        self.renderer = renderer or TemplateRenderer()

    @abstractmethod
    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        """
        Render artifacts.

        Returns:
            Generated files, empty when no target is configured
        """
        pass


class CompositeExporter(Exporter):
    """
    Exporter that runs multiple sub-exporters.

    Any exception from a sub-exporter propagates, so callers get either
    every file or none.
    """

    @abstractmethod
    def get_exporters(self) -> list[Exporter]:
        pass

    def export(self, tokens: ExportInput) -> list[GeneratedFile]:
        files: list[GeneratedFile] = []
        for exporter in self.get_exporters():
            files.extend(exporter.export(tokens))
        return files
