# topmark:header:start
#
#   project      : FavMark
#   file         : markers.py
#   file_relpath : src/favmark/inject/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker-scoped replacement of the managed block inside an object body.

The managed block is bounded by two comment lines::

    // favmark:icons:start
    ...
    // favmark:icons:end

`replace_managed_block` removes any previous block, removes the properties the
block defines wherever they appear at top level, then appends a freshly
rendered block. Applying it twice yields the same text as applying it once.

A start marker without a matching end marker (or the reverse) is treated as
stale state: the orphan marker line is dropped and a fresh block is appended.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from favmark.config.logging import get_logger
from favmark.constants import FAVMARK_END_MARKER, FAVMARK_START_MARKER
from favmark.inject.references import DEFAULT_REFERENCES
from favmark.inject.remover import remove_property
from favmark.inject.scanner import ScanCursor

if TYPE_CHECKING:
    from favmark.inject.references import FaviconReferenceSet

logger = get_logger(__name__)

START_LINE: Final[str] = f"// {FAVMARK_START_MARKER}"
END_LINE: Final[str] = f"// {FAVMARK_END_MARKER}"

# Properties owned by the managed block
MANAGED_PROPERTIES: Final[tuple[str, ...]] = ("icons", "manifest")

_START = re.escape(FAVMARK_START_MARKER)
_END = re.escape(FAVMARK_END_MARKER)

_BLOCK_RE: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*//[ \t]*{_START}[^\n]*\n.*?^[ \t]*//[ \t]*{_END}[^\n]*(?:\n|\Z)",
    re.MULTILINE | re.DOTALL,
)
_ORPHAN_RE: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*//[ \t]*(?:{_START}|{_END})[^\n]*(?:\n|\Z)",
    re.MULTILINE,
)


def has_managed_block(text: str) -> bool:
    """Return True when ``text`` contains a complete start/end marker pair."""
    return _BLOCK_RE.search(text) is not None


def render_managed_block(
    references: FaviconReferenceSet | None = None,
    *,
    indent: str = "  ",
) -> str:
    """Render the canonical block, sentinel lines included, without a trailing newline.

    Args:
        references (FaviconReferenceSet | None): Reference set to render; defaults to
            the canonical set rooted at ``/``.
        indent (str): Indentation prepended to every line.

    Returns:
        str: The block text.
    """
    refs = references or DEFAULT_REFERENCES
    lines = [START_LINE, *refs.render_metadata_lines(), END_LINE]
    return "\n".join(f"{indent}{line}" for line in lines)


def strip_managed_state(body: str) -> str:
    """Remove marker blocks, orphan markers and managed properties until stable.

    Args:
        body (str): Object-literal body.

    Returns:
        str: The body without any FavMark-owned content.
    """
    text = body
    while True:
        previous = text
        text = _BLOCK_RE.sub("", text)
        text, orphans = _ORPHAN_RE.subn("", text)
        if orphans:
            logger.warning("Dropped %d orphan favmark marker line(s)", orphans)
        for name in MANAGED_PROPERTIES:
            text = remove_property(text, name)
        if text == previous:
            return text


def _last_code_offset(text: str) -> int | None:
    """Return the offset just past the last character outside comments and whitespace.

    Line and block comments are skipped so a separator is never placed inside
    one. Returns None when the text holds only comments and whitespace.
    """
    cursor = ScanCursor()
    last: int | None = None
    size = len(text)
    i = 0
    while i < size:
        if not cursor.in_string:
            if text.startswith("//", i):
                newline = text.find("\n", i)
                i = size if newline == -1 else newline
                continue
            if text.startswith("/*", i):
                close = text.find("*/", i + 2)
                i = size if close == -1 else close + 2
                continue
        ch = text[i]
        was_in_string = cursor.in_string
        cursor.feed(ch)
        if was_in_string or not ch.isspace():
            last = i + 1
        i += 1
    return last


def replace_managed_block(
    body: str,
    references: FaviconReferenceSet | None = None,
) -> str:
    """Return ``body`` with exactly one freshly rendered managed block at its end.

    Args:
        body (str): Object-literal body (text between the braces).
        references (FaviconReferenceSet | None): Reference set to render.

    Returns:
        str: The rewritten body. It starts with the preserved properties, ends
            with the block followed by a single newline.
    """
    block = render_managed_block(references)
    kept = strip_managed_state(body).rstrip()
    if not kept:
        return f"\n{block}\n"
    end = _last_code_offset(kept)
    if end is not None and kept[end - 1] != ",":
        # Separator goes after the last value, before any trailing comment
        kept = f"{kept[:end]},{kept[end:]}"
    return f"{kept}\n{block}\n"
