"""
figtokens Intermediate Representation (IR) types.

Two groups of models live here: the Figma document snapshots the loaders
fetch (``figma``) and the design tokens the normalizer produces
(``tokens``). Everything is re-exported from this package.
"""

from .figma import (
    ColorStop,
    LineHeightUnit,
    NodeId,
    NodeRecord,
    Paint,
    PaintColor,
    PaintType,
    StyleKind,
    StyleRecord,
    TextCase,
    TypeStyle,
)
from .tokens import (
    ColorResult,
    ColorToken,
    GradientStop,
    GradientToken,
    Platform,
    TextCaseStyle,
    TextStyleToken,
    TokenName,
    VariantPair,
)

__all__ = [
    # Figma documents
    "ColorStop",
    "LineHeightUnit",
    "NodeId",
    "NodeRecord",
    "Paint",
    "PaintColor",
    "PaintType",
    "StyleKind",
    "StyleRecord",
    "TextCase",
    "TypeStyle",
    # Tokens
    "ColorResult",
    "ColorToken",
    "GradientStop",
    "GradientToken",
    "Platform",
    "TextCaseStyle",
    "TextStyleToken",
    "TokenName",
    "VariantPair",
]
