# topmark:header:start
#
#   project      : FavMark
#   file         : keys.py
#   file_relpath : src/favmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for FavMark configuration.

Keys defined here are the external configuration API of ``favmark.toml``;
renaming or removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by FavMark configuration.

    The ordering mirrors ``favmark-default.toml``.
    """

    # [references]
    SECTION_REFERENCES: Final[str] = "references"

    KEY_BASE_URL: Final[str] = "base_url"
    KEY_THEME_COLOR: Final[str] = "theme_color"

    # [manifest]
    SECTION_MANIFEST: Final[str] = "manifest"

    KEY_NAME: Final[str] = "name"
    KEY_SHORT_NAME: Final[str] = "short_name"
    KEY_BACKGROUND_COLOR: Final[str] = "background_color"
    KEY_DISPLAY: Final[str] = "display"

    # [generate]
    SECTION_GENERATE: Final[str] = "generate"

    KEY_OUTPUT_DIR: Final[str] = "output_dir"

    # [inject]
    SECTION_INJECT: Final[str] = "inject"

    KEY_ENABLED: Final[str] = "enabled"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_REFERENCES: frozenset({KEY_BASE_URL, KEY_THEME_COLOR}),
        SECTION_MANIFEST: frozenset({KEY_NAME, KEY_SHORT_NAME, KEY_BACKGROUND_COLOR, KEY_DISPLAY}),
        SECTION_GENERATE: frozenset({KEY_OUTPUT_DIR}),
        SECTION_INJECT: frozenset({KEY_ENABLED}),
    }

    # Values accepted by the web manifest ``display`` member
    DISPLAY_MODES: Final[frozenset[str]] = frozenset(
        {"fullscreen", "standalone", "minimal-ui", "browser"}
    )
