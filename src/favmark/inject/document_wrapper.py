# topmark:header:start
#
#   project      : FavMark
#   file         : document_wrapper.py
#   file_relpath : src/favmark/inject/document_wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor for Next.js pages-router document wrappers (``pages/_document.*``).

The wrapper has no object literal to edit; the managed state is the set of
favicon tags directly inside ``<Head>``. Each run removes every favicon tag
(whole lines where the tag stands alone), then inserts the canonical tags on their own
lines right after the ``<Head>`` opening tag. Because the inserted lines are
exactly what the next run removes, repeated runs converge.

A missing wrapper is synthesized from a minimal template. A wrapper without a
``<Head>`` opening tag is reported as not found and left untouched.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from favmark.config.logging import get_logger
from favmark.inject.references import DEFAULT_REFERENCES
from favmark.inject.status import InjectionResult, InjectStatus
from favmark.inject.writer import select_sink
from favmark.utils.file import read_text_file

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.inject.references import FaviconReferenceSet

logger = get_logger(__name__)

DOCUMENT_CANDIDATES: Final[tuple[str, ...]] = ("_document.tsx", "_document.jsx", "_document.js")
APP_TYPESCRIPT_MARKERS: Final[tuple[str, ...]] = ("_app.tsx", "_app.ts")

_FAVICON_LINK_RELS = r"(?:icon|shortcut\s+icon|apple-touch-icon|manifest)"

_FAVICON_TAG = (
    rf"""(?:<link\b[^>]*\brel\s*=\s*(?P<lq>["']){_FAVICON_LINK_RELS}(?P=lq)[^>]*>"""
    r"""|<meta\b[^>]*\bname\s*=\s*(?P<mq>["'])theme-color(?P=mq)[^>]*>)"""
)

_FAVICON_TAG_LINE_RE: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*{_FAVICON_TAG}[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.IGNORECASE,
)
# Tags sharing a line with other JSX, e.g. `<Head><link rel="icon" ... /></Head>`
_FAVICON_TAG_INLINE_RE: Final[re.Pattern[str]] = re.compile(
    rf"{_FAVICON_TAG}[ \t]*",
    re.IGNORECASE,
)
_HEAD_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"<Head\b[^>]*?(?<!/)>")

_DOCUMENT_TEMPLATE: Final[str] = """\
import { Html, Head, Main, NextScript } from "next/document";

export default function Document() {
  return (
    <Html lang="en">
      <Head>
      </Head>
      <body>
        <Main />
        <NextScript />
      </body>
    </Html>
  );
}
"""


def find_document_file(pages_dir: Path) -> Path | None:
    """Return the first existing document wrapper in ``pages_dir``, if any."""
    for name in DOCUMENT_CANDIDATES:
        candidate = pages_dir / name
        if candidate.is_file():
            return candidate
    return None


def remove_favicon_tag_lines(text: str) -> tuple[str, int]:
    """Remove every favicon-related tag.

    Lines that consist solely of such a tag are dropped whole; tags sharing a
    line with other JSX are cut out of it.

    Args:
        text (str): Wrapper source text.

    Returns:
        tuple[str, int]: The cleaned text and the number of tags removed.
    """
    cleaned, whole_lines = _FAVICON_TAG_LINE_RE.subn("", text)
    cleaned, inline = _FAVICON_TAG_INLINE_RE.subn("", cleaned)
    return cleaned, whole_lines + inline


def _line_indent(text: str, pos: int) -> str:
    line_start = text.rfind("\n", 0, pos) + 1
    indent_end = line_start
    while indent_end < pos and text[indent_end] in " \t":
        indent_end += 1
    return text[line_start:indent_end]


def insert_head_tags(
    text: str,
    references: FaviconReferenceSet | None = None,
) -> str | None:
    """Insert the canonical tags right after the ``<Head>`` opening tag.

    Tags are indented two spaces deeper than the line holding ``<Head>``.
    Content that followed ``<Head>`` on the same line is moved to its own line.

    Args:
        text (str): Wrapper source text.
        references (FaviconReferenceSet | None): Reference set to render.

    Returns:
        str | None: The updated text, or None when there is no ``<Head>`` opening tag.
    """
    match = _HEAD_OPEN_RE.search(text)
    if match is None:
        return None
    refs = references or DEFAULT_REFERENCES
    indent = _line_indent(text, match.start())
    nl = "\r\n" if "\r\n" in text else "\n"
    tags = "".join(f"{nl}{indent}  {tag}" for tag in refs.render_jsx_tags())
    rest = text[match.end() :].lstrip(" \t")
    if rest and not rest.startswith(("\n", "\r\n")):
        rest = f"{nl}{indent}{rest}"
    return text[: match.end()] + tags + rest


def render_document(references: FaviconReferenceSet | None = None) -> str:
    """Render a minimal ``_document`` with the canonical tags inside ``<Head>``."""
    rendered = insert_head_tags(_DOCUMENT_TEMPLATE, references)
    assert rendered is not None  # the template always has <Head>
    return rendered


def inject_into_document_wrapper(
    pages_dir: Path | None,
    references: FaviconReferenceSet | None = None,
    *,
    typescript: bool | None = None,
    apply: bool = True,
) -> InjectionResult:
    """Install the canonical favicon tags in a pages-router document wrapper.

    Args:
        pages_dir (Path | None): The ``pages`` directory of the project.
        references (FaviconReferenceSet | None): Reference set to render.
        typescript (bool | None): Force ``_document.tsx`` for a synthesized wrapper.
        apply (bool): Write changes; False performs a dry run.

    Returns:
        InjectionResult: The outcome; ``NOT_FOUND`` when no directory is known or
            the existing wrapper has no ``<Head>`` tag.
    """
    refs = references or DEFAULT_REFERENCES
    if pages_dir is None:
        logger.warning("No pages directory in project profile")
        return InjectionResult(InjectStatus.NOT_FOUND)
    if pages_dir.exists() and not pages_dir.is_dir():
        logger.warning("Pages directory %s is not a directory", pages_dir)
        return InjectionResult(InjectStatus.NOT_FOUND, pages_dir)

    sink = select_sink(apply)
    host = find_document_file(pages_dir)
    if host is None:
        use_ts = bool(typescript) or any((pages_dir / m).is_file() for m in APP_TYPESCRIPT_MARKERS)
        path = pages_dir / ("_document.tsx" if use_ts else "_document.jsx")
        logger.info("No document wrapper in %s, creating %s", pages_dir, path.name)
        written = sink.write(path, render_document(refs))
        return InjectionResult(InjectStatus.CREATED, path, written)

    try:
        original = read_text_file(host)
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8, leaving it untouched: %s", host, exc)
        return InjectionResult(InjectStatus.UNREADABLE, host)
    cleaned, removed = remove_favicon_tag_lines(original)
    updated = insert_head_tags(cleaned, refs)
    if updated is None:
        logger.warning("No <Head> tag in %s; leaving it untouched", host)
        return InjectionResult(InjectStatus.NOT_FOUND, host)

    if updated == original:
        logger.debug("%s already holds the canonical references", host)
        return InjectionResult(InjectStatus.UNCHANGED, host)

    status = InjectStatus.REPLACED if removed else InjectStatus.INSERTED
    written = sink.write(host, updated)
    return InjectionResult(status, host, written)
