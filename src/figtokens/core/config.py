"""
Export configuration.

Read from ``figtokens.toml`` in the project root:

    [figma]
    light_file_id = "aBcD1234"
    dark_file_id = "eFgH5678"        # optional

    [common.colors]
    use_single_file = false
    dark_mode_suffix = "_dark"

    [ios]
    output_directory = "Sources/DesignSystem"
    gradient_swift = "Gradient+Tokens.swift"
    color_swift = "Color+Tokens.swift"
    font_swift = "UIFont+Tokens.swift"
    swiftui_font_swift = "Font+Tokens.swift"
    labels_directory = "Labels"
    label_style_swift = "Labels/LabelStyle+Tokens.swift"
    generate_labels = true

The Figma access token is never stored in the file; it is read from
``FIGMA_PERSONAL_TOKEN``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from figtokens.client.figma import DEFAULT_BASE_URL

from .errors import ConfigError
from .names import NameStyle

logger = logging.getLogger(__name__)

CONFIG_FILE = "figtokens.toml"
TOKEN_ENV_VAR = "FIGMA_PERSONAL_TOKEN"
DEFAULT_DARK_MODE_SUFFIX = "_dark"


# =============================================================================
# Sections
# =============================================================================


class FigmaConfig(BaseModel):
    """Where to load tokens from."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    light_file_id: str = Field(min_length=1, description="File key of the light (or only) file")
    dark_file_id: str | None = Field(default=None, description="File key of the dark file")
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=30.0, gt=0.0, description="Request timeout in seconds")


class ColorsParams(BaseModel):
    """How light and dark colors are laid out in Figma."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    use_single_file: bool = False
    dark_mode_suffix: str = Field(default=DEFAULT_DARK_MODE_SUFFIX, min_length=1)


class CommonConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    colors: ColorsParams = Field(default_factory=ColorsParams)


class IOSConfig(BaseModel):
    """iOS output targets. Relative paths resolve against ``output_directory``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_directory: Path
    color_swift: Path | None = None
    gradient_swift: Path | None = None
    font_swift: Path | None = None
    swiftui_font_swift: Path | None = None
    labels_directory: Path | None = None
    label_style_swift: Path | None = None
    add_objc_attribute: bool = False
    generate_labels: bool = False
    name_style: NameStyle = NameStyle.CAMEL_CASE

    def resolve(self, path: Path | None) -> Path | None:
        if path is None:
            return None
        return path if path.is_absolute() else self.output_directory / path


class ColorsConfig(BaseModel):
    """Inputs of the variant resolver."""

    model_config = ConfigDict(frozen=True)

    light_file_id: str
    dark_file_id: str | None = None
    use_single_file: bool = False
    dark_mode_suffix: str = DEFAULT_DARK_MODE_SUFFIX


class ExportConfig(BaseModel):
    """Complete contents of figtokens.toml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    figma: FigmaConfig
    common: CommonConfig = Field(default_factory=CommonConfig)
    ios: IOSConfig | None = None

    @property
    def colors(self) -> ColorsConfig:
        params = self.common.colors
        return ColorsConfig(
            light_file_id=self.figma.light_file_id,
            dark_file_id=self.figma.dark_file_id,
            use_single_file=params.use_single_file,
            dark_mode_suffix=params.dark_mode_suffix,
        )


# =============================================================================
# Loading
# =============================================================================


def parse_config(data: Mapping[str, Any]) -> ExportConfig:
    """
    Validate raw TOML data.

    Raises:
        ConfigError: If the data does not match the schema
    """
    try:
        return ExportConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e


def load_config(path: Path) -> ExportConfig:
    """
    Load and validate a figtokens.toml file.

    Relative ``ios.output_directory`` values resolve against the config
    file's directory.

    Args:
        path: Path to the TOML file

    Returns:
        Validated ExportConfig

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    config = parse_config(data)
    if config.ios and not config.ios.output_directory.is_absolute():
        ios = config.ios.model_copy(
            update={"output_directory": path.parent / config.ios.output_directory}
        )
        config = config.model_copy(update={"ios": ios})
    logger.debug("Loaded configuration from %s", path)
    return config


def get_access_token(environ: Mapping[str, str] | None = None) -> str:
    """
    Read the Figma personal access token from the environment.

    Raises:
        ConfigError: If the variable is unset or empty
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV_VAR, "").strip()
    if not token:
        raise ConfigError(f"Environment variable {TOKEN_ENV_VAR} is not set")
    return token
