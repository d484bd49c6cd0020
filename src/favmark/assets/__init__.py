# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/assets/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Favicon asset pipeline: rasterize a source image into the canonical icon set."""

from __future__ import annotations

from favmark.assets.errors import FavmarkAssetError, ImageReadError, UnsupportedImageError
from favmark.assets.generate import (
    GeneratedAsset,
    ManifestSettings,
    generate_favicons,
    remove_generated_assets,
    validate_source_image,
)

__all__ = [
    "FavmarkAssetError",
    "GeneratedAsset",
    "ImageReadError",
    "ManifestSettings",
    "UnsupportedImageError",
    "generate_favicons",
    "remove_generated_assets",
    "validate_source_image",
]
