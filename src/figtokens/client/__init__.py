"""Figma API transport."""

from figtokens.client.figma import DEFAULT_BASE_URL, FigmaClient

__all__ = ["DEFAULT_BASE_URL", "FigmaClient"]
