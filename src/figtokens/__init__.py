"""
figtokens - Figma design tokens to platform source code.

Loads color, gradient and text styles from Figma files, normalizes them
into typed tokens and renders accessor source files for consuming apps.
"""

from __future__ import annotations

from ._version import __version__
from .core import ir
from .core.errors import (
    BrokenCrossReference,
    ConfigError,
    DuplicateDarkName,
    FigtokensError,
    StylesNotFound,
    TransportFailure,
)

__all__ = [
    "__version__",
    "ir",
    "FigtokensError",
    "ConfigError",
    "StylesNotFound",
    "TransportFailure",
    "BrokenCrossReference",
    "DuplicateDarkName",
]
