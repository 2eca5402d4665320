"""
Error types for figtokens loading, normalization and export.
"""

from dataclasses import dataclass
from typing import Optional


class FigtokensError(Exception):
    """Base exception for all figtokens errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ConfigError(FigtokensError):
    """
    Raised when the export configuration cannot be used.

    Examples:
    - Unreadable or malformed figtokens.toml
    - Missing required keys (light file id, output directory)
    - Missing FIGMA_PERSONAL_TOKEN
    """

    pass


class StylesNotFound(FigtokensError):
    """Raised when a file's filtered style catalog is empty."""

    pass


class TransportFailure(FigtokensError):
    """
    Raised when a request to the Figma API fails.

    Never retried here; the whole export for that document is aborted.
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, context)


class BrokenCrossReference(FigtokensError):
    """Raised when a gradient stop names a color that was not generated."""

    def __init__(self, gradient_name: str, color_name: str):
        self.gradient_name = gradient_name
        self.color_name = color_name
        super().__init__(
            f"Gradient '{gradient_name}' references color '{color_name}' "
            "which is not among the exported colors"
        )


class DuplicateNameError(FigtokensError):
    """
    Raised when two tokens end up with the same name or identifier.

    Examples:
    - "Brand Red" and "brand_red" both become the identifier brandRed
    - Two text styles with the same name
    """

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Duplicate token name '{name}'")


class DuplicateDarkName(DuplicateNameError):
    """Raised when stripping the dark-mode suffix yields a name twice."""

    def __init__(self, name: str, suffix: str):
        self.suffix = suffix
        super().__init__(
            name,
            f"Dark token name '{name}' occurs more than once after "
            f"stripping suffix '{suffix}'",
        )


class UnpairedDarkAsset(FigtokensError):
    """Raised when a dark token has no light token with the same name."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(
            "Dark assets without a light counterpart: " + ", ".join(names)
        )


class RenderError(FigtokensError):
    """Raised when a template fails to render."""

    pass


@dataclass
class ErrorContext:
    """
    Where in the design source an error occurred.

    Attributes:
        document_id: Figma file key
        style_name: Optional style the error relates to
        node_id: Optional node id the error relates to
    """

    document_id: str
    style_name: str | None = None
    node_id: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "file abc123, style 'brand_red' (node 1:2)"
        """
        location = f"file {self.document_id}"
        if self.style_name:
            location += f", style '{self.style_name}'"
        if self.node_id:
            location += f" (node {self.node_id})"
        return location


def make_transport_error(
    message: str,
    document_id: str,
    status_code: int | None = None,
) -> TransportFailure:
    """
    Helper to create a TransportFailure with document context.

    Args:
        message: Error description
        document_id: Figma file key the request was for
        status_code: HTTP status code, if a response was received

    Returns:
        TransportFailure with context attached
    """
    return TransportFailure(message, ErrorContext(document_id=document_id), status_code)
