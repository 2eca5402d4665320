"""
Platform tags parsed from style descriptions.

Designers restrict a style to one platform by writing the platform name
as the style's description. Anything else, including an empty
description, leaves the style shared between platforms.
"""

from __future__ import annotations

from .ir.tokens import Platform

# Description marker that opts a style out of export entirely.
EXCLUDE_MARKER = "none"


def parse_platform(description: str) -> Platform | None:
    """
    Map a style description to a platform tag.

    Args:
        description: Free-text description from the style catalog

    Returns:
        Platform if the description names exactly one, None otherwise
    """
    try:
        return Platform(description.strip().lower())
    except ValueError:
        return None


def is_exported(description: str) -> bool:
    """
    Whether a style with this description takes part in the export.

    An empty description is a shared color and always passes. Otherwise
    the style is dropped when the description contains the exclude marker
    (case-sensitive).
    """
    if not description:
        return True
    return EXCLUDE_MARKER not in description
