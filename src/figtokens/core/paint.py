"""
Paint classification.

Turns a raw :class:`~figtokens.core.ir.figma.Paint` into one of three
variants: a solid color, a supported gradient, or unsupported. API
inconsistencies (a SOLID paint without a color, a gradient without stops)
classify as unsupported instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ir.figma import ColorStop, Paint, PaintColor, PaintType

GRADIENT_TYPES = frozenset({PaintType.GRADIENT_LINEAR, PaintType.GRADIENT_RADIAL})


@dataclass(frozen=True)
class SolidFill:
    opacity: float | None
    color: PaintColor

    @property
    def alpha(self) -> float:
        """Explicit opacity wins over the color's own alpha."""
        return self.opacity if self.opacity is not None else self.color.a


@dataclass(frozen=True)
class GradientFill:
    stops: tuple[ColorStop, ...]


@dataclass(frozen=True)
class UnsupportedFill:
    paint_type: str
    reason: str


ClassifiedPaint = SolidFill | GradientFill | UnsupportedFill


def classify(paint: Paint) -> ClassifiedPaint:
    """
    Classify a paint for color-token extraction.

    Args:
        paint: Raw paint from a node's fills

    Returns:
        SolidFill, GradientFill or UnsupportedFill
    """
    kind = paint.paint_type

    if kind == PaintType.SOLID:
        if paint.color is None:
            return UnsupportedFill(paint.type, "solid paint has no color")
        return SolidFill(opacity=paint.opacity, color=paint.color)

    if kind in GRADIENT_TYPES:
        if not paint.gradient_stops:
            return UnsupportedFill(paint.type, "gradient has no stops")
        return GradientFill(stops=tuple(paint.gradient_stops))

    return UnsupportedFill(paint.type, f"paint type {paint.type} is not supported")
