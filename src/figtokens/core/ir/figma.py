"""
Figma document IR types.

Read-only snapshots of the parts of the Figma REST API that the token
pipeline consumes: style catalog records, document nodes, paints and
text styles. Field aliases follow the API's JSON keys so responses can
be validated directly.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

NodeId = str


def clamp_unit(value: float) -> float:
    """Clamp a channel, opacity or position into [0, 1]."""
    return min(max(value, 0.0), 1.0)


# =============================================================================
# Enums
# =============================================================================


class StyleKind(StrEnum):
    """Kind of a published style."""

    FILL = "FILL"
    TEXT = "TEXT"
    EFFECT = "EFFECT"
    GRID = "GRID"


class PaintType(StrEnum):
    """Paint kinds known to the pipeline."""

    SOLID = "SOLID"
    IMAGE = "IMAGE"
    RECTANGLE = "RECTANGLE"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"


class LineHeightUnit(StrEnum):
    """Unit the designer picked for a text style's line height."""

    PIXELS = "PIXELS"
    FONT_SIZE = "FONT_SIZE_%"
    INTRINSIC = "INTRINSIC_%"


class TextCase(StrEnum):
    """Text case transform applied by a text style."""

    ORIGINAL = "ORIGINAL"
    UPPER = "UPPER"
    LOWER = "LOWER"
    TITLE = "TITLE"
    SMALL_CAPS = "SMALL_CAPS"
    SMALL_CAPS_FORCED = "SMALL_CAPS_FORCED"


# =============================================================================
# Styles
# =============================================================================


class StyleRecord(BaseModel):
    """A named style from a file's published style catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    node_id: NodeId = Field(description="Id of the node the style is attached to")
    name: str
    kind: str = Field(alias="style_type", description="Style kind (FILL, TEXT, ...)")
    description: str = Field(default="")

    @property
    def is_fill(self) -> bool:
        return self.kind == StyleKind.FILL

    @property
    def is_text(self) -> bool:
        return self.kind == StyleKind.TEXT


# =============================================================================
# Paints
# =============================================================================


class PaintColor(BaseModel):
    """
    RGBA color, each channel between 0 and 1.

    The API occasionally reports channels a rounding error outside the
    range (1.0000001); those are clamped rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    r: float
    g: float
    b: float
    a: float = 1.0

    @field_validator("r", "g", "b", "a")
    @classmethod
    def clamp_channel(cls, v: float) -> float:
        return clamp_unit(v)


class ColorStop(BaseModel):
    """A gradient stop."""

    model_config = ConfigDict(frozen=True)

    position: float
    color: PaintColor

    @field_validator("position")
    @classmethod
    def clamp_position(cls, v: float) -> float:
        return clamp_unit(v)


class Paint(BaseModel):
    """
    A single fill as returned by the API.

    ``type`` is kept as a plain string so that paint kinds added to the API
    later do not fail validation; use :attr:`paint_type` for the known set.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    opacity: float | None = None
    color: PaintColor | None = None
    gradient_stops: list[ColorStop] | None = Field(default=None, alias="gradientStops")

    @field_validator("opacity")
    @classmethod
    def clamp_opacity(cls, v: float | None) -> float | None:
        return None if v is None else clamp_unit(v)

    @property
    def paint_type(self) -> PaintType | None:
        try:
            return PaintType(self.type)
        except ValueError:
            return None


# =============================================================================
# Typography
# =============================================================================


class TypeStyle(BaseModel):
    """Text style attributes of a TEXT node."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    font_post_script_name: str = Field(alias="fontPostScriptName")
    font_weight: float = Field(alias="fontWeight")
    font_size: float = Field(alias="fontSize")
    line_height_px: float = Field(alias="lineHeightPx")
    letter_spacing: float = Field(default=0.0, alias="letterSpacing")
    line_height_unit: LineHeightUnit = Field(
        default=LineHeightUnit.INTRINSIC, alias="lineHeightUnit"
    )
    text_case: TextCase | None = Field(default=None, alias="textCase")


# =============================================================================
# Nodes
# =============================================================================


class NodeRecord(BaseModel):
    """The document element a style is attached to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: NodeId
    name: str
    fills: list[Paint] = Field(default_factory=list)
    text_style: TypeStyle | None = Field(default=None, alias="style")

    @property
    def primary_fill(self) -> Paint | None:
        """The first fill; the only one considered for color extraction."""
        return self.fills[0] if self.fills else None
