# topmark:header:start
#
#   project      : FavMark
#   file         : errors.py
#   file_relpath : src/favmark/assets/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the asset pipeline.

These are library errors; the CLI maps them onto `favmark.cli.errors`
classes carrying exit codes.
"""

from __future__ import annotations

from pathlib import Path


class FavmarkAssetError(Exception):
    """Base class for asset pipeline errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedImageError(FavmarkAssetError):
    """The source file extension is not a supported image format."""


class ImageReadError(FavmarkAssetError):
    """The source image exists but cannot be decoded or rasterized."""
