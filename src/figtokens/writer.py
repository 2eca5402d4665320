"""
File materialization.

Generated files are staged next to their destination and only moved into
place once every file of the set was staged, so a failing write leaves
the previous artifacts untouched.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from figtokens.exporters.base import GeneratedFile

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)


def write_files(files: Sequence[GeneratedFile]) -> list[Path]:
    """
    Write a complete set of generated files.

    Args:
        files: Files to write

    Returns:
        Paths written, in input order

    Raises:
        OSError: If staging fails, nothing is written. If moving a staged
            file into place fails, earlier files stay written and the
            remaining staged files are removed.
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for file in files:
            ensure_dir(file.directory)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{file.file_name}.", suffix=".tmp", dir=file.directory
            )
            tmp_path = Path(tmp_name)
            staged.append((tmp_path, file.path))
            with os.fdopen(fd, "wb") as fh:
                fh.write(file.content)
    except OSError:
        for tmp_path, _ in staged:
            tmp_path.unlink(missing_ok=True)
        raise

    # Each rename is atomic, the set is not: a failing rename leaves the
    # files before it replaced and discards the rest
    written: list[Path] = []
    try:
        for tmp_path, target in staged:
            os.replace(tmp_path, target)
            logger.info("Wrote %s", target)
            written.append(target)
    finally:
        for tmp_path, _ in staged[len(written) :]:
            tmp_path.unlink(missing_ok=True)
    return written
