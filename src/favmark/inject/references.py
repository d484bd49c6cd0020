# topmark:header:start
#
#   project      : FavMark
#   file         : references.py
#   file_relpath : src/favmark/inject/references.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical favicon reference set and its renderings.

`FaviconReferenceSet` is an immutable value derived from configuration
(``base_url``, ``theme_color``) and the canonical filenames in
`favmark.constants`. It never depends on what the asset pipeline actually
produced, so injection can run on its own.

Each injector renders the same set in its host's dialect:

- `render_html_tags` / `render_jsx_tags` for markup and document wrappers,
- `element_specs` for DOM insertion with BeautifulSoup,
- `render_metadata_lines` for the app-router ``metadata`` object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from favmark.constants import (
    APPLE_TOUCH_ICON,
    FAVICON_16,
    FAVICON_32,
    FAVICON_ICO,
    WEB_MANIFEST,
)

DEFAULT_BASE_URL: Final[str] = "/"
DEFAULT_THEME_COLOR: Final[str] = "#ffffff"

IconGroup = Literal["icon", "apple"]


def join_url(base_url: str, filename: str) -> str:
    """Join a public base URL and a filename with exactly one slash."""
    base = base_url or DEFAULT_BASE_URL
    return base.rstrip("/") + "/" + filename


@dataclass(frozen=True, slots=True)
class IconReference:
    """One icon reference (``<link rel=...>`` or metadata ``icons`` entry).

    Attributes:
        rel (str): Link relation (``icon`` or ``apple-touch-icon``).
        href (str): Public URL of the icon.
        mime_type (str): MIME type of the icon file.
        sizes (str): Value of the ``sizes`` attribute (``any`` or ``WxH``).
        group (IconGroup): Key under ``metadata.icons`` the entry belongs to.
    """

    rel: str
    href: str
    mime_type: str
    sizes: str
    group: IconGroup

    def attributes(self) -> dict[str, str]:
        """Return link attributes in rendering order."""
        return {
            "rel": self.rel,
            "type": self.mime_type,
            "sizes": self.sizes,
            "href": self.href,
        }


@dataclass(frozen=True, slots=True)
class FaviconReferenceSet:
    """Ordered, immutable description of every reference FavMark injects.

    Attributes:
        icons (tuple[IconReference, ...]): Icon links in canonical order.
        manifest_href (str): Public URL of the web manifest.
        theme_color (str): Value for ``<meta name="theme-color">``.
    """

    icons: tuple[IconReference, ...]
    manifest_href: str
    theme_color: str

    @classmethod
    def build(
        cls,
        *,
        base_url: str = DEFAULT_BASE_URL,
        theme_color: str = DEFAULT_THEME_COLOR,
    ) -> FaviconReferenceSet:
        """Build the canonical set for the given public base URL.

        Args:
            base_url (str): Prefix for every href (e.g. ``/`` or ``/static/``).
            theme_color (str): Theme color advertised to browsers.

        Returns:
            FaviconReferenceSet: The reference set.
        """
        return cls(
            icons=(
                IconReference(
                    "icon", join_url(base_url, FAVICON_ICO), "image/x-icon", "any", "icon"
                ),
                IconReference("icon", join_url(base_url, FAVICON_16), "image/png", "16x16", "icon"),
                IconReference("icon", join_url(base_url, FAVICON_32), "image/png", "32x32", "icon"),
                IconReference(
                    "apple-touch-icon",
                    join_url(base_url, APPLE_TOUCH_ICON),
                    "image/png",
                    "180x180",
                    "apple",
                ),
            ),
            manifest_href=join_url(base_url, WEB_MANIFEST),
            theme_color=theme_color,
        )

    def element_specs(self) -> list[tuple[str, dict[str, str]]]:
        """Return ``(tag_name, attributes)`` pairs for all six elements, in order."""
        specs: list[tuple[str, dict[str, str]]] = [
            ("link", icon.attributes()) for icon in self.icons
        ]
        specs.append(("link", {"rel": "manifest", "href": self.manifest_href}))
        specs.append(("meta", {"name": "theme-color", "content": self.theme_color}))
        return specs

    def render_html_tags(self, *, self_closing: bool = False) -> list[str]:
        """Render the elements as one markup tag per entry.

        Args:
            self_closing (bool): Emit ``<link ... />`` (JSX) instead of ``<link ...>``.

        Returns:
            list[str]: One tag per element, without indentation.
        """
        close = " />" if self_closing else ">"
        tags: list[str] = []
        for name, attrs in self.element_specs():
            rendered = " ".join(f'{key}="{value}"' for key, value in attrs.items())
            tags.append(f"<{name} {rendered}{close}")
        return tags

    def render_jsx_tags(self) -> list[str]:
        """Render the elements as self-closing JSX tags."""
        return self.render_html_tags(self_closing=True)

    def render_metadata_lines(self) -> list[str]:
        """Render the ``icons`` and ``manifest`` metadata properties.

        Lines are relative to the object body (no base indentation) and each
        property ends with a trailing comma.
        """
        lines: list[str] = ["icons: {"]
        for group in ("icon", "apple"):
            entries = [icon for icon in self.icons if icon.group == group]
            if not entries:
                continue
            lines.append(f"  {group}: [")
            for icon in entries:
                lines.append(
                    f'    {{ url: "{icon.href}", sizes: "{icon.sizes}", '
                    f'type: "{icon.mime_type}" }},'
                )
            lines.append("  ],")
        lines.append("},")
        lines.append(f'manifest: "{self.manifest_href}",')
        return lines


DEFAULT_REFERENCES: Final[FaviconReferenceSet] = FaviconReferenceSet.build()
