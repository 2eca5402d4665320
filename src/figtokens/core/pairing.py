"""
Light/dark asset pairing.

Exporters emit one accessor per light token, with dark values attached
where a dark token of the same name exists.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import DuplicateNameError, UnpairedDarkAsset
from .ir.tokens import ColorToken, GradientToken, TokenName

T = TypeVar("T", ColorToken, GradientToken)


@dataclass(frozen=True)
class AssetPair(Generic[T]):
    light: T
    dark: T | None = None


def index_by_name(tokens: Sequence[T]) -> dict[TokenName, T]:
    """
    Key tokens by name.

    Raises:
        DuplicateNameError: If two tokens share a name
    """
    index: dict[TokenName, T] = {}
    for token in tokens:
        if token.key in index:
            raise DuplicateNameError(token.name)
        index[token.key] = token
    return index


def pair_assets(light: Sequence[T], dark: Sequence[T] | None = None) -> list[AssetPair[T]]:
    """
    Match dark tokens to light tokens by name.

    Args:
        light: Light tokens, in export order
        dark: Dark tokens, or None when there is no dark palette

    Returns:
        One AssetPair per light token, in light order

    Raises:
        DuplicateNameError: If either set contains a name twice
        UnpairedDarkAsset: If a dark token has no light counterpart
    """
    light_index = index_by_name(light)
    dark_index = index_by_name(dark or [])

    orphans = [name for name in dark_index if name not in light_index]
    if orphans:
        raise UnpairedDarkAsset(sorted(orphans))

    return [AssetPair(light=token, dark=dark_index.get(token.key)) for token in light]
