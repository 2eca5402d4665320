"""Core figtokens functionality: IR, paint classification, normalization, variant resolution."""

from . import ir
from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticsCollector, LoggingDiagnostics
from .errors import (
    BrokenCrossReference,
    ConfigError,
    DuplicateDarkName,
    DuplicateNameError,
    ErrorContext,
    FigtokensError,
    RenderError,
    StylesNotFound,
    TransportFailure,
    UnpairedDarkAsset,
)
from .loaders import ColorsLoader, TextStylesLoader, load_nodes, load_styles
from .normalizer import normalize
from .paint import GradientFill, SolidFill, UnsupportedFill, classify
from .variants import resolve_variants, split_single_file

__all__ = [
    "ir",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsCollector",
    "LoggingDiagnostics",
    # Errors
    "BrokenCrossReference",
    "ConfigError",
    "DuplicateDarkName",
    "DuplicateNameError",
    "ErrorContext",
    "FigtokensError",
    "RenderError",
    "StylesNotFound",
    "TransportFailure",
    "UnpairedDarkAsset",
    # Pipeline stages
    "classify",
    "SolidFill",
    "GradientFill",
    "UnsupportedFill",
    "load_styles",
    "load_nodes",
    "ColorsLoader",
    "TextStylesLoader",
    "normalize",
    "resolve_variants",
    "split_single_file",
]
