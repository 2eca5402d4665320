"""
Text style normalization.

TEXT styles point at text nodes whose ``style`` block carries the font
attributes. The style description may name a Dynamic Type style
("Body", "Title 1", ...) so generated fonts scale with the user's
content size setting.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticsSink, LoggingDiagnostics
from .ir.figma import LineHeightUnit, NodeId, NodeRecord, StyleRecord, TextCase, TypeStyle
from .ir.tokens import TextCaseStyle, TextStyleToken
from .platform import parse_platform

# Description -> UIFont.TextStyle member name
DYNAMIC_TYPE_STYLES: dict[str, str] = {
    "Large Title": "largeTitle",
    "Title 1": "title1",
    "Title 2": "title2",
    "Title 3": "title3",
    "Headline": "headline",
    "Body": "body",
    "Callout": "callout",
    "Subhead": "subheadline",
    "Footnote": "footnote",
    "Caption 1": "caption1",
    "Caption 2": "caption2",
}

_TEXT_CASES: dict[TextCase, TextCaseStyle] = {
    TextCase.UPPER: TextCaseStyle.UPPERCASED,
    TextCase.LOWER: TextCaseStyle.LOWERCASED,
}


def parse_font_style(description: str) -> str | None:
    return DYNAMIC_TYPE_STYLES.get(description.strip())


def map_text_case(text_case: TextCase | None) -> TextCaseStyle:
    if text_case is None:
        return TextCaseStyle.ORIGINAL
    return _TEXT_CASES.get(text_case, TextCaseStyle.ORIGINAL)


def type_style_to_token(style: StyleRecord, type_style: TypeStyle) -> TextStyleToken:
    # Intrinsic line height means "let the font decide"
    line_height = (
        None
        if type_style.line_height_unit == LineHeightUnit.INTRINSIC
        else type_style.line_height_px
    )
    return TextStyleToken(
        name=style.name,
        platform=parse_platform(style.description),
        font_name=type_style.font_post_script_name,
        font_size=type_style.font_size,
        font_style=parse_font_style(style.description),
        line_height=line_height,
        letter_spacing=type_style.letter_spacing,
        text_case=map_text_case(type_style.text_case),
    )


def normalize_text_styles(
    nodes: Mapping[NodeId, NodeRecord],
    styles: Sequence[StyleRecord],
    diagnostics: DiagnosticsSink | None = None,
) -> list[TextStyleToken]:
    """
    Build text style tokens from TEXT styles and their nodes.

    Args:
        nodes: Nodes keyed by id
        styles: Filtered text styles in catalog order
        diagnostics: Sink for skipped styles (defaults to logging)

    Returns:
        Text style tokens in style order
    """
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()

    tokens: list[TextStyleToken] = []
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
        if node.text_style is None:
            diagnostics.report(
                Diagnostic(
                    DiagnosticKind.MISSING_TEXT_STYLE,
                    style.name,
                    f"node {node.id} carries no text style",
                )
            )
            continue
        tokens.append(type_style_to_token(style, node.text_style))
    return tokens
