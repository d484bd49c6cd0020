# topmark:header:start
#
#   project      : FavMark
#   file         : generate.py
#   file_relpath : src/favmark/assets/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generate the canonical favicon files from one source image.

Output, in order:

1. One PNG per entry of `favmark.constants.FAVICON_SIZES`, each a
   center-cropped cover fit of the source.
2. ``favicon.ico`` holding 16, 32 and 48 pixel frames.
3. ``site.webmanifest`` referencing the two Android icons.

Raster sources are decoded with Pillow. SVG sources are rasterized with
cairosvg first; the import is deferred so raster-only use does not load the
cairo bindings.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from PIL import Image, ImageOps, UnidentifiedImageError

from favmark.assets.errors import ImageReadError, UnsupportedImageError
from favmark.config.logging import get_logger
from favmark.constants import (
    ANDROID_CHROME_192,
    ANDROID_CHROME_512,
    FAVICON_ICO,
    FAVICON_SIZES,
    GENERATED_FILES,
    ICO_SIZES,
    SUPPORTED_IMAGE_EXTENSIONS,
    WEB_MANIFEST,
)
from favmark.inject.references import DEFAULT_BASE_URL, DEFAULT_THEME_COLOR, join_url

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

# Edge length an SVG is rasterized to before downscaling
SVG_RASTER_SIZE: Final[int] = 512

ICO_LABEL: Final[str] = "multi"
MANIFEST_LABEL: Final[str] = "-"


@dataclass(frozen=True, slots=True)
class ManifestSettings:
    """Values written to ``site.webmanifest``.

    Attributes:
        name (str): Application name.
        short_name (str): Short application name.
        theme_color (str): Browser UI color.
        background_color (str): Splash screen background color.
        display (str): Preferred display mode.
        base_url (str): Public URL prefix of the icon files.
    """

    name: str = ""
    short_name: str = ""
    theme_color: str = DEFAULT_THEME_COLOR
    background_color: str = "#ffffff"
    display: str = "standalone"
    base_url: str = DEFAULT_BASE_URL


@dataclass(frozen=True, slots=True)
class GeneratedAsset:
    """One file written by `generate_favicons`.

    Attributes:
        name (str): Canonical filename.
        label (str): Human-readable size (``16x16``, ``multi`` or ``-``).
        path (Path): Location of the written file.
    """

    name: str
    label: str
    path: Path


def validate_source_image(source: Path) -> Path:
    """Check that ``source`` is an existing file with a supported extension.

    Args:
        source (Path): Candidate source image.

    Returns:
        Path: The same path.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedImageError: If the extension is not supported.
    """
    if not source.is_file():
        raise FileNotFoundError(f"Image not found: {source}")
    if source.suffix.lower() not in SUPPORTED_IMAGE_EXTENSIONS:
        supported = ", ".join(sorted(SUPPORTED_IMAGE_EXTENSIONS))
        raise UnsupportedImageError(
            f"Unsupported image format '{source.suffix}' (supported: {supported})", source
        )
    return source


def _rasterize_svg(source: Path) -> Image.Image:
    import cairosvg  # type: ignore[import-untyped]

    try:
        png_bytes: bytes = cairosvg.svg2png(
            url=str(source),
            output_width=SVG_RASTER_SIZE,
            output_height=SVG_RASTER_SIZE,
        )
    except Exception as exc:  # noqa: BLE001 - cairosvg raises parser-specific errors
        raise ImageReadError(f"Cannot rasterize SVG {source}: {exc}", source) from exc
    return Image.open(BytesIO(png_bytes))


def load_source_image(source: Path) -> Image.Image:
    """Decode ``source`` into an RGBA image.

    Raises:
        UnsupportedImageError: If the extension is not supported.
        ImageReadError: If the file cannot be decoded.
    """
    validate_source_image(source)
    if source.suffix.lower() == ".svg":
        img = _rasterize_svg(source)
    else:
        try:
            img = Image.open(source)
            img.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ImageReadError(f"Cannot read image {source}: {exc}", source) from exc
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    logger.debug("Loaded %s (%dx%d)", source, img.width, img.height)
    return img


def fit_square(img: Image.Image, size: int) -> Image.Image:
    """Return a ``size`` x ``size`` cover fit of ``img``, cropped around its center."""
    return ImageOps.fit(
        img,
        (size, size),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def build_manifest(settings: ManifestSettings) -> dict[str, Any]:
    """Return the web manifest document for ``settings``."""
    return {
        "name": settings.name,
        "short_name": settings.short_name,
        "icons": [
            {
                "src": join_url(settings.base_url, ANDROID_CHROME_192),
                "sizes": "192x192",
                "type": "image/png",
            },
            {
                "src": join_url(settings.base_url, ANDROID_CHROME_512),
                "sizes": "512x512",
                "type": "image/png",
            },
        ],
        "theme_color": settings.theme_color,
        "background_color": settings.background_color,
        "display": settings.display,
    }


def _write_ico(img: Image.Image, path: Path, sizes: Iterable[int]) -> None:
    frames = [fit_square(img, size) for size in sorted(sizes, reverse=True)]
    largest, *smaller = frames
    largest.save(
        path,
        format="ICO",
        sizes=[f.size for f in frames],
        append_images=smaller,
    )


def generate_favicons(
    source: Path,
    output_dir: Path,
    settings: ManifestSettings | None = None,
) -> list[GeneratedAsset]:
    """Write the canonical favicon files for ``source`` into ``output_dir``.

    Args:
        source (Path): Source image (PNG, JPEG, WebP or SVG).
        output_dir (Path): Destination directory, created when missing.
        settings (ManifestSettings | None): Manifest values; defaults apply when None.

    Returns:
        list[GeneratedAsset]: The written files in generation order.

    Raises:
        UnsupportedImageError: If the source format is not supported.
        ImageReadError: If the source cannot be decoded.
        OSError: If an output file cannot be written.
    """
    settings = settings or ManifestSettings()
    img = load_source_image(source)
    output_dir.mkdir(parents=True, exist_ok=True)

    results: list[GeneratedAsset] = []
    for name, size in FAVICON_SIZES:
        path = output_dir / name
        fit_square(img, size).save(path, format="PNG")
        logger.debug("Wrote %s", path)
        results.append(GeneratedAsset(name, f"{size}x{size}", path))

    ico_path = output_dir / FAVICON_ICO
    _write_ico(img, ico_path, ICO_SIZES)
    logger.debug("Wrote %s", ico_path)
    results.append(GeneratedAsset(FAVICON_ICO, ICO_LABEL, ico_path))

    manifest_path = output_dir / WEB_MANIFEST
    with open(manifest_path, "w", encoding="utf-8", newline="") as f:
        json.dump(build_manifest(settings), f, indent=2)
        f.write("\n")
    logger.debug("Wrote %s", manifest_path)
    results.append(GeneratedAsset(WEB_MANIFEST, MANIFEST_LABEL, manifest_path))

    logger.info("Generated %d favicon files in %s", len(results), output_dir)
    return results


def remove_generated_assets(public_dir: Path) -> list[str]:
    """Delete the canonical favicon files from ``public_dir``.

    Args:
        public_dir (Path): Directory holding the generated files.

    Returns:
        list[str]: Names of the files that existed and were removed.
    """
    removed: list[str] = []
    for name in GENERATED_FILES:
        path = public_dir / name
        if path.is_file():
            path.unlink()
            logger.debug("Removed %s", path)
            removed.append(name)
    logger.info("Removed %d favicon files from %s", len(removed), public_dir)
    return removed
