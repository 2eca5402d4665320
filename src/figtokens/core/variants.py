"""
Light/dark variant resolution.

Two layouts are supported, selected by ``use_single_file``:

- twin files: the light and the (optional) dark palette live in separate
  Figma files and are loaded independently
- single file: both live in one file; dark styles carry a name suffix
  (``_dark`` by default) which is stripped after partitioning
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from .config import ColorsConfig
from .errors import DuplicateDarkName
from .ir.tokens import ColorResult, ColorToken, GradientToken, VariantPair

logger = logging.getLogger(__name__)

LoadColors = Callable[[str], ColorResult]
T = TypeVar("T", ColorToken, GradientToken)


def resolve_variants(
    config: ColorsConfig, load_colors: LoadColors, parallel: bool = True
) -> VariantPair:
    """
    Produce the light tokens and their optional dark counterpart.

    Args:
        config: File ids and layout settings
        load_colors: Loads one file's ColorResult (e.g. ColorsLoader.load)
        parallel: Fetch light and dark files concurrently in twin-file mode

    Returns:
        VariantPair

    Raises:
        DuplicateDarkName: If suffix stripping yields a name twice
    """
    if config.use_single_file:
        result = load_colors(config.light_file_id)
        return split_single_file(result, config.dark_mode_suffix)
    return load_twin_files(config, load_colors, parallel=parallel)


def load_twin_files(config: ColorsConfig, load_colors: LoadColors, parallel: bool = True) -> VariantPair:
    """Load the light file and, if configured, the dark file."""
    if config.dark_file_id is None:
        return VariantPair(light=load_colors(config.light_file_id))

    if not parallel:
        light = load_colors(config.light_file_id)
        dark = load_colors(config.dark_file_id)
        return VariantPair(light=light, dark=dark)

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="figtokens-load") as pool:
        light_future = pool.submit(load_colors, config.light_file_id)
        dark_future = pool.submit(load_colors, config.dark_file_id)
        return VariantPair(light=light_future.result(), dark=dark_future.result())


def split_single_file(result: ColorResult, suffix: str) -> VariantPair:
    """
    Partition one file's tokens into light and dark by name suffix.

    Tokens whose name ends with ``suffix`` go to the dark set with exactly
    ``len(suffix)`` trailing characters removed; the rest stay light as-is.
    Colors and gradients are partitioned independently, so a dark
    gradient's stops keep pointing at the generated stop colors
    ("bg_dark_0"), which stay in the light set.
    """
    light_colors, dark_colors = _partition(result.colors, suffix)
    light_gradients, dark_gradients = _partition(result.gradients, suffix)
    logger.info(
        "Split by suffix '%s': %d light / %d dark colors, %d light / %d dark gradients",
        suffix,
        len(light_colors),
        len(dark_colors),
        len(light_gradients),
        len(dark_gradients),
    )
    return VariantPair(
        light=ColorResult(colors=light_colors, gradients=light_gradients),
        dark=ColorResult(colors=dark_colors, gradients=dark_gradients),
    )


def _partition(tokens: Sequence[T], suffix: str) -> tuple[list[T], list[T]]:
    light: list[T] = []
    dark: list[T] = []
    seen: set[str] = set()
    for token in tokens:
        if not token.name.endswith(suffix):
            light.append(token)
            continue
        name = token.name[: -len(suffix)]
        if name in seen:
            raise DuplicateDarkName(name, suffix)
        seen.add(name)
        dark.append(token.renamed(name))
    return light, dark
