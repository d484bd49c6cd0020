# topmark:header:start
#
#   project      : FavMark
#   file         : constants.py
#   file_relpath : src/favmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark Constants.

Canonical filenames are a contract between the asset pipeline (which writes
them) and the injectors (which reference them). Changing one side without the
other yields broken references.
"""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

FAVMARK_VERSION: str = get_version("favmark")

# Name of the bundled default config inside the package `favmark.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "favmark.config"
DEFAULT_TOML_CONFIG_NAME: str = "favmark-default.toml"

# Project-local configuration file
CONFIG_FILE_NAME: str = "favmark.toml"

# Sentinels bounding the managed block in component sources (byte-stable).
FAVMARK_START_MARKER: Final[str] = "favmark:icons:start"
FAVMARK_END_MARKER: Final[str] = "favmark:icons:end"

# Canonical output filenames
FAVICON_ICO: Final[str] = "favicon.ico"
FAVICON_16: Final[str] = "favicon-16x16.png"
FAVICON_32: Final[str] = "favicon-32x32.png"
FAVICON_48: Final[str] = "favicon-48x48.png"
APPLE_TOUCH_ICON: Final[str] = "apple-touch-icon.png"
ANDROID_CHROME_192: Final[str] = "android-chrome-192x192.png"
ANDROID_CHROME_512: Final[str] = "android-chrome-512x512.png"
WEB_MANIFEST: Final[str] = "site.webmanifest"

# (filename, edge length in pixels), in generation order
FAVICON_SIZES: Final[tuple[tuple[str, int], ...]] = (
    (FAVICON_16, 16),
    (FAVICON_32, 32),
    (FAVICON_48, 48),
    (APPLE_TOUCH_ICON, 180),
    (ANDROID_CHROME_192, 192),
    (ANDROID_CHROME_512, 512),
)

ICO_SIZES: Final[tuple[int, ...]] = (16, 32, 48)

GENERATED_FILES: Final[tuple[str, ...]] = (
    FAVICON_ICO,
    *(name for name, _ in FAVICON_SIZES),
    WEB_MANIFEST,
)

SUPPORTED_IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".svg"}
)

# Directories never descended into when searching for source images or projects
IGNORED_DIRS: Final[frozenset[str]] = frozenset(
    {"node_modules", ".git", ".next", "dist", "build", ".turbo"}
)

# Workspace folders scanned for monorepo packages
MONOREPO_DIRS: Final[tuple[str, ...]] = ("apps", "packages")

VALUE_NOT_SET: str = "<not set>"
