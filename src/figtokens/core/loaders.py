"""
Loaders: style catalog, nodes, and the per-document load -> normalize step.

The loaders talk to a :class:`FigmaSource`; the real one is
:class:`figtokens.client.FigmaClient`, tests pass an in-memory fake.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .diagnostics import DiagnosticsSink, LoggingDiagnostics
from .errors import ErrorContext, StylesNotFound
from .ir.figma import NodeId, NodeRecord, StyleKind, StyleRecord
from .ir.tokens import ColorResult, TextStyleToken
from .normalizer import normalize
from .platform import is_exported
from .typography import normalize_text_styles

logger = logging.getLogger(__name__)


class FigmaSource(Protocol):
    """Document-fetch capability consumed by the loaders."""

    def fetch_styles(self, document_id: str) -> list[StyleRecord]: ...

    def fetch_nodes(self, document_id: str, node_ids: Sequence[NodeId]) -> dict[NodeId, NodeRecord]: ...


def filter_styles(styles: Sequence[StyleRecord], kind: StyleKind) -> list[StyleRecord]:
    """Keep styles of ``kind`` that are not opted out via their description."""
    return [s for s in styles if s.kind == kind and is_exported(s.description)]


def load_styles(
    source: FigmaSource, document_id: str, kind: StyleKind = StyleKind.FILL
) -> list[StyleRecord]:
    """
    Load the exportable styles of one kind.

    Args:
        source: Document-fetch capability
        document_id: Figma file key
        kind: Style kind to keep

    Returns:
        Filtered styles in catalog order

    Raises:
        StylesNotFound: If no style survives filtering
        TransportFailure: If the fetch fails
    """
    styles = filter_styles(source.fetch_styles(document_id), kind)
    if not styles:
        raise StylesNotFound(
            f"No {kind.lower()} styles to export", ErrorContext(document_id=document_id)
        )
    logger.info("Loaded %d %s styles from file %s", len(styles), kind.lower(), document_id)
    return styles


def load_nodes(
    source: FigmaSource, document_id: str, node_ids: Sequence[NodeId]
) -> dict[NodeId, NodeRecord]:
    """Fetch the nodes referenced by a set of styles in a single request."""
    # Preserve first occurrence order while dropping duplicates
    unique_ids = list(dict.fromkeys(node_ids))
    return source.fetch_nodes(document_id, unique_ids)


class ColorsLoader:
    """
    Loads color and gradient tokens from one Figma file.

    Example:
        loader = ColorsLoader(client)
        result = loader.load("aBcD1234")
    """

    def __init__(self, source: FigmaSource, diagnostics: DiagnosticsSink | None = None):
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    def load(self, document_id: str) -> ColorResult:
        styles = load_styles(self.source, document_id, StyleKind.FILL)
        nodes = load_nodes(self.source, document_id, [s.node_id for s in styles])
        result = normalize(nodes, styles, self.diagnostics)
        logger.info(
            "File %s: %d colors, %d gradients",
            document_id,
            len(result.colors),
            len(result.gradients),
        )
        return result

    __call__ = load


class TextStylesLoader:
    """Loads text style tokens from one Figma file."""

    def __init__(self, source: FigmaSource, diagnostics: DiagnosticsSink | None = None):
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    def load(self, document_id: str) -> list[TextStyleToken]:
        styles = load_styles(self.source, document_id, StyleKind.TEXT)
        nodes = load_nodes(self.source, document_id, [s.node_id for s in styles])
        tokens = normalize_text_styles(nodes, styles, self.diagnostics)
        logger.info("File %s: %d text styles", document_id, len(tokens))
        return tokens
