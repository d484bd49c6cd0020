# topmark:header:start
#
#   project      : FavMark
#   file         : file.py
#   file_relpath : src/favmark/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for FavMark."""

from __future__ import annotations

import os
from pathlib import Path

from favmark.config.logging import get_logger

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path | None) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The root path; the current directory when None.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def display_path(file_path: Path, root_path: Path | None) -> str:
    """Return ``file_path`` relative to ``root_path`` for display (``.`` for the root)."""
    return compute_relpath(file_path, root_path).as_posix()


def read_text_file(path: Path) -> str:
    """Read a whole UTF-8 file, preserving its newline style.

    Args:
        path (Path): File to read.

    Returns:
        str: The file content.

    Raises:
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    logger.trace("Read %d characters from %s", len(text), path)
    return text
