"""Fixtures for figtokens unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from figma_fakes import FakeFigmaSource

from figtokens.core.config import IOSConfig


@pytest.fixture
def source() -> FakeFigmaSource:
    return FakeFigmaSource()


@pytest.fixture
def ios_output(tmp_path: Path) -> IOSConfig:
    return IOSConfig(
        output_directory=tmp_path / "out",
        color_swift=Path("Color+Tokens.swift"),
        gradient_swift=Path("Gradient+Tokens.swift"),
        font_swift=Path("UIFont+Tokens.swift"),
        swiftui_font_swift=Path("Font+Tokens.swift"),
        labels_directory=Path("Labels"),
        label_style_swift=Path("Labels/LabelStyle+Tokens.swift"),
        generate_labels=True,
    )
