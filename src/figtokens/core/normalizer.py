"""
Token normalizer.

Joins fill styles with their nodes and turns each node's first fill into
color and gradient tokens:

- solid fill     -> one ColorToken named after the style
- gradient fill  -> one ColorToken per stop ("{style}_{index}") plus one
                    GradientToken named after the style whose stops point
                    at those colors
- anything else  -> nothing, with a diagnostic

Token order follows style order. Anomalies that only affect a single
style are reported to the diagnostics sink and never raised.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticsSink, LoggingDiagnostics
from .ir.figma import NodeId, NodeRecord, StyleRecord
from .ir.tokens import ColorResult, ColorToken, GradientStop, GradientToken, Platform, TokenName
from .paint import GradientFill, SolidFill, UnsupportedFill, classify
from .platform import parse_platform


def stop_color_name(style_name: str, index: int) -> TokenName:
    """Name of the color generated for a gradient's ``index``-th stop."""
    return TokenName(f"{style_name}_{index}")


def solid_to_colors(style: StyleRecord, fill: SolidFill, platform: Platform | None) -> list[ColorToken]:
    return [
        ColorToken(
            name=style.name,
            platform=platform,
            red=fill.color.r,
            green=fill.color.g,
            blue=fill.color.b,
            alpha=fill.alpha,
        )
    ]


def gradient_to_tokens(
    style: StyleRecord, fill: GradientFill, platform: Platform | None
) -> tuple[list[ColorToken], GradientToken]:
    """
    Expand a gradient into per-stop colors and the gradient itself.

    Stops keep their own alpha; the paint-level opacity is not applied.
    """
    colors: list[ColorToken] = []
    stops: list[GradientStop] = []
    for index, stop in enumerate(fill.stops):
        name = stop_color_name(style.name, index)
        colors.append(
            ColorToken(
                name=name,
                platform=platform,
                red=stop.color.r,
                green=stop.color.g,
                blue=stop.color.b,
                alpha=stop.color.a,
            )
        )
        stops.append(GradientStop(color_name=name, position=stop.position))
    return colors, GradientToken(name=style.name, platform=platform, stops=stops)


def normalize(
    nodes: Mapping[NodeId, NodeRecord],
    styles: Sequence[StyleRecord],
    diagnostics: DiagnosticsSink | None = None,
) -> ColorResult:
    """
    Build color and gradient tokens from styles and their nodes.

    Args:
        nodes: Nodes keyed by id, as returned by the node resolver
        styles: Filtered fill styles in catalog order
        diagnostics: Sink for skipped styles (defaults to logging)

    Returns:
        ColorResult with colors and gradients in style order
    """
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()

    colors: list[ColorToken] = []
    gradients: list[GradientToken] = []

    for style in styles:
        node = nodes.get(style.node_id)
        if node is None:
            diagnostics.report(
                Diagnostic(
                    DiagnosticKind.MISSING_NODE,
                    style.name,
                    f"node {style.node_id} not returned for style",
                )
            )
            continue

        fill = node.primary_fill
        if fill is None:
            diagnostics.report(
                Diagnostic(DiagnosticKind.MISSING_FILL, style.name, f"node {node.id} has no fills")
            )
            continue

        platform = parse_platform(style.description)
        classified = classify(fill)

        if isinstance(classified, SolidFill):
            colors.extend(solid_to_colors(style, classified, platform))
        elif isinstance(classified, GradientFill):
            stop_colors, gradient = gradient_to_tokens(style, classified, platform)
            colors.extend(stop_colors)
            gradients.append(gradient)
        elif isinstance(classified, UnsupportedFill):
            diagnostics.report(
                Diagnostic(DiagnosticKind.UNSUPPORTED_FILL, style.name, classified.reason)
            )

    return ColorResult(colors=colors, gradients=gradients)
