"""
Identifier helpers for generated code.

Style names are free text ("Brand / Primary 500"); generated code needs
identifiers.
"""

import keyword
import re
from enum import StrEnum

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class NameStyle(StrEnum):
    """Identifier casing for generated code."""

    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"


def split_words(name: str) -> list[str]:
    """
    Split a style name into words.

    Non-alphanumeric runs and lower-to-upper case boundaries separate words.

    Args:
        name: Style name

    Returns:
        List of non-empty words
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", name)
    return [w for w in _SEPARATORS.split(spaced) if w]


def to_camel_case(name: str) -> str:
    """
    Convert a style name to lowerCamelCase.

    Args:
        name: Style name, e.g. "brand_red" or "Brand / Red"

    Returns:
        camelCase string, e.g. "brandRed"
    """
    words = split_words(name)
    if not words:
        return ""
    first, rest = words[0], words[1:]
    return first.lower() + "".join(w[:1].upper() + w[1:].lower() for w in rest)


def to_snake_case(name: str) -> str:
    """
    Convert a style name to snake_case.

    Args:
        name: Style name

    Returns:
        snake_case string
    """
    return "_".join(w.lower() for w in split_words(name))


def to_class_name(name: str) -> str:
    """Upper-case the first character of an identifier ("heading" -> "Heading")."""
    return name[:1].upper() + name[1:]


def make_identifier(name: str, style: NameStyle = NameStyle.CAMEL_CASE) -> str:
    """
    Build a code identifier from a style name.

    Leading digits and reserved words get an underscore prefix, so the
    result is always a valid identifier in Swift and Kotlin.

    Args:
        name: Style name
        style: Casing to apply

    Returns:
        Identifier string

    Raises:
        ValueError: If the name contains no letters or digits
    """
    ident = to_snake_case(name) if style == NameStyle.SNAKE_CASE else to_camel_case(name)
    if not ident:
        raise ValueError(f"Cannot build an identifier from name '{name}'")
    if ident[0].isdigit() or keyword.iskeyword(ident) or ident in SWIFT_KEYWORDS:
        ident = "_" + ident
    return ident


SWIFT_KEYWORDS = frozenset(
    {
        "associatedtype",
        "class",
        "default",
        "deinit",
        "enum",
        "extension",
        "func",
        "import",
        "init",
        "inout",
        "internal",
        "let",
        "operator",
        "private",
        "protocol",
        "public",
        "repeat",
        "static",
        "struct",
        "subscript",
        "switch",
        "typealias",
        "var",
    }
)
