"""
Render models and the Jinja2 template renderer.

Rendering is split into two steps:

1. build a typed render model from tokens: every token name is mapped to
   its generated identifier and every gradient stop is resolved to the
   identifier of the color it references
2. substitute the model into a fixed template

Step 1 is where cross-reference errors surface; step 2 is pure text.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from figtokens.core.errors import BrokenCrossReference, DuplicateNameError, RenderError
from figtokens.core.ir.tokens import ColorToken, GradientToken, TextStyleToken, TokenName
from figtokens.core.names import NameStyle, make_identifier, to_class_name
from figtokens.core.pairing import AssetPair

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

HEADER = """\
//
//  Generated by figtokens. Do not edit this file manually.
//"""


# =============================================================================
# Render models
# =============================================================================


@dataclass(frozen=True)
class RGBA:
    red: float
    green: float
    blue: float
    alpha: float

    @classmethod
    def of(cls, token: ColorToken) -> RGBA:
        return cls(token.red, token.green, token.blue, token.alpha)


@dataclass(frozen=True)
class ColorModel:
    identifier: str
    light: RGBA
    dark: RGBA | None = None


@dataclass(frozen=True)
class StopModel:
    color: str
    location: float


@dataclass(frozen=True)
class GradientModel:
    identifier: str
    stops: tuple[StopModel, ...]


@dataclass(frozen=True)
class TextStyleModel:
    identifier: str
    class_name: str
    font_name: str
    size: float
    dynamic_type: str | None
    line_height: float
    tracking: float
    text_case: str

    @property
    def supports_dynamic_type(self) -> bool:
        return self.dynamic_type is not None


# =============================================================================
# Name mapping
# =============================================================================


def build_identifier_map(
    names: Iterable[str], style: NameStyle = NameStyle.CAMEL_CASE
) -> dict[TokenName, str]:
    """
    Map token names to generated identifiers.

    Args:
        names: Token names in export order
        style: Identifier casing

    Returns:
        Mapping of token name to identifier

    Raises:
        DuplicateNameError: If a name repeats or two names share an identifier
    """
    mapping: dict[TokenName, str] = {}
    owners: dict[str, str] = {}
    for name in names:
        if name in mapping:
            raise DuplicateNameError(name)
        try:
            ident = make_identifier(name, style)
        except ValueError as e:
            raise RenderError(str(e)) from e
        if ident in owners:
            raise DuplicateNameError(
                ident,
                f"Tokens '{owners[ident]}' and '{name}' both generate identifier '{ident}'",
            )
        owners[ident] = name
        mapping[TokenName(name)] = ident
    return mapping


def resolve_gradient(gradient: GradientToken, color_identifiers: dict[TokenName, str], style: NameStyle) -> GradientModel:
    """
    Resolve a gradient's stops to color identifiers.

    Raises:
        BrokenCrossReference: If a stop names a color missing from the lookup
    """
    stops = []
    for stop in gradient.stops:
        ident = color_identifiers.get(stop.color_name)
        if ident is None:
            raise BrokenCrossReference(gradient.name, stop.color_name)
        stops.append(StopModel(color=ident, location=stop.position))
    return GradientModel(identifier=make_identifier(gradient.name, style), stops=tuple(stops))


def build_color_models(pairs: Sequence[AssetPair[ColorToken]], style: NameStyle) -> list[ColorModel]:
    identifiers = build_identifier_map((p.light.name for p in pairs), style)
    return [
        ColorModel(
            identifier=identifiers[p.light.key],
            light=RGBA.of(p.light),
            dark=RGBA.of(p.dark) if p.dark is not None else None,
        )
        for p in pairs
    ]


def build_gradient_models(
    gradients: Sequence[AssetPair[GradientToken]],
    colors: Sequence[AssetPair[ColorToken]],
    style: NameStyle,
) -> list[GradientModel]:
    """
    Build gradient render models against the exported colors.

    Only the light stops are rendered: dark colors share the light names, so
    the generated color accessors switch appearance on their own. Dark
    gradients are still checked against the exported color names. Every
    dark color is paired with a light one of the same name, so those names
    cover both sets, including the generated stop colors of a single-file
    dark gradient ("bg_dark_0"), which stay in the light set.
    """
    light_ids = build_identifier_map((p.light.name for p in colors), style)
    build_identifier_map((p.light.name for p in gradients), style)

    models = []
    for pair in gradients:
        models.append(resolve_gradient(pair.light, light_ids, style))
        if pair.dark is not None:
            resolve_gradient(pair.dark, light_ids, style)
    return models


def label_class_name(identifier: str) -> str:
    """Class name prefix for a text style's label ("heading" -> "Heading")."""
    stripped = identifier.lstrip("_")
    # "_1x" keeps its underscore, a Swift type name cannot start with a digit
    if not stripped or stripped[0].isdigit():
        return to_class_name(identifier)
    return to_class_name(stripped)


def build_text_style_models(styles: Sequence[TextStyleToken], style: NameStyle) -> list[TextStyleModel]:
    identifiers = build_identifier_map((s.name for s in styles), style)
    models = []
    for s in styles:
        ident = identifiers[s.key]
        models.append(
            TextStyleModel(
                identifier=ident,
                class_name=label_class_name(ident),
                font_name=s.font_name,
                size=s.font_size,
                dynamic_type=s.font_style,
                line_height=s.line_height or 0.0,
                tracking=s.letter_spacing,
                text_case=str(s.text_case),
            )
        )
    return models


# =============================================================================
# Template rendering
# =============================================================================


def _number_filter(value: Any) -> str:
    """Shortest round-tripping literal for a float ("1.0", "0.25")."""
    return repr(float(value))


def _channel_filter(value: Any) -> str:
    """Color channel with three decimals ("0.502")."""
    return f"{float(value):.3f}"


def create_jinja_env(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        undefined=StrictUndefined,  # Raise error on undefined variables
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.globals["header"] = HEADER
    env.filters["number"] = _number_filter
    env.filters["channel"] = _channel_filter
    return env


class TemplateRenderer:
    """Renders the fixed templates from typed render models."""

    def __init__(self, env: Environment | None = None):
        self.env = env or create_jinja_env()

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template.

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(f"Template '{template_name}' failed to render: {e}") from e
