"""
Design token IR types.

Tokens are the normalized, exportable units derived from a style and the
node it points at. A token's identity is its name: :attr:`key` is the
value used for lookups and set membership, while ``==`` stays structural
so two tokens sharing a name but carrying different channels can still
be told apart.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

TokenName = NewType("TokenName", str)


class Platform(StrEnum):
    """Target platform a style can be restricted to."""

    IOS = "ios"
    ANDROID = "android"


class TextCaseStyle(StrEnum):
    """Text case transform as exported to consuming code."""

    ORIGINAL = "original"
    UPPERCASED = "uppercased"
    LOWERCASED = "lowercased"


# =============================================================================
# Color tokens
# =============================================================================


class ColorToken(BaseModel):
    """A flat color, channels between 0 and 1."""

    model_config = ConfigDict(frozen=True)

    name: str
    platform: Platform | None = None
    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(ge=0.0, le=1.0)

    @property
    def key(self) -> TokenName:
        return TokenName(self.name)

    def renamed(self, name: str) -> ColorToken:
        return self.model_copy(update={"name": name})


class GradientStop(BaseModel):
    """A gradient stop referencing a color token by name."""

    model_config = ConfigDict(frozen=True)

    color_name: TokenName
    position: float = Field(ge=0.0, le=1.0)


class GradientToken(BaseModel):
    """A gradient whose stops point at color tokens of the same set."""

    model_config = ConfigDict(frozen=True)

    name: str
    platform: Platform | None = None
    stops: list[GradientStop] = Field(default_factory=list)

    @property
    def key(self) -> TokenName:
        return TokenName(self.name)

    def renamed(self, name: str) -> GradientToken:
        return self.model_copy(update={"name": name})


class ColorResult(BaseModel):
    """Colors and gradients produced from one document (or one half of it)."""

    model_config = ConfigDict(frozen=True)

    colors: list[ColorToken] = Field(default_factory=list)
    gradients: list[GradientToken] = Field(default_factory=list)

    def color_names(self) -> set[TokenName]:
        return {color.key for color in self.colors}

    def filter_platform(self, platform: Platform) -> ColorResult:
        """Keep tokens that are untagged or tagged for ``platform``."""
        return ColorResult(
            colors=[c for c in self.colors if c.platform in (None, platform)],
            gradients=[g for g in self.gradients if g.platform in (None, platform)],
        )


class VariantPair(BaseModel):
    """Light tokens and their optional dark counterpart."""

    model_config = ConfigDict(frozen=True)

    light: ColorResult
    dark: ColorResult | None = None


# =============================================================================
# Typography tokens
# =============================================================================


class TextStyleToken(BaseModel):
    """A text style ready to be turned into font/label accessors."""

    model_config = ConfigDict(frozen=True)

    name: str
    platform: Platform | None = None
    font_name: str
    font_size: float
    font_style: str | None = Field(
        default=None, description="Dynamic type text style (e.g. 'body', 'largeTitle')"
    )
    line_height: float | None = None
    letter_spacing: float = 0.0
    text_case: TextCaseStyle = TextCaseStyle.ORIGINAL

    @property
    def key(self) -> TokenName:
        return TokenName(self.name)
