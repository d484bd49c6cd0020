# topmark:header:start
#
#   project      : FavMark
#   file         : markup.py
#   file_relpath : src/favmark/inject/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor for single-page-app HTML documents (``index.html``).

The document is parsed with BeautifulSoup (``html.parser``). Every favicon
related element is removed, whatever its count or attribute order, then the
canonical elements are appended to ``<head>`` in fixed order. Each inserted
element is preceded by a newline and the head's child indentation so the
serialized output is byte-stable from the second run onward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from bs4 import BeautifulSoup, Doctype, NavigableString, Tag

from favmark.config.logging import get_logger
from favmark.inject.references import DEFAULT_REFERENCES
from favmark.inject.status import InjectionResult, InjectStatus
from favmark.inject.writer import select_sink
from favmark.utils.file import read_text_file

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.inject.references import FaviconReferenceSet

logger = get_logger(__name__)

FAVICON_LINK_RELS: Final[frozenset[str]] = frozenset(
    {"icon", "shortcut icon", "apple-touch-icon", "manifest"}
)
DEFAULT_CHILD_INDENT: Final[str] = "    "


def _is_blank_string(node: object) -> bool:
    # Comments, CDATA and doctypes subclass NavigableString; only plain text counts.
    return type(node) is NavigableString and not node.strip()


def _rel_value(tag: Tag) -> str:
    rel = tag.get("rel")
    if rel is None:
        return ""
    words = rel if isinstance(rel, list) else str(rel).split()
    return " ".join(str(w) for w in words).lower()


def is_favicon_element(tag: Tag) -> bool:
    """Return True for ``<link>``/``<meta>`` elements FavMark manages."""
    if tag.name == "link":
        return _rel_value(tag) in FAVICON_LINK_RELS
    if tag.name == "meta":
        return str(tag.get("name", "")).strip().lower() == "theme-color"
    return False


def remove_favicon_elements(soup: BeautifulSoup) -> int:
    """Remove managed elements and the whitespace text preceding each.

    Args:
        soup (BeautifulSoup): Parsed document, modified in place.

    Returns:
        int: Number of elements removed.
    """
    removed = 0
    for tag in soup.find_all(["link", "meta"]):
        if not isinstance(tag, Tag) or not is_favicon_element(tag):
            continue
        previous = tag.previous_sibling
        if _is_blank_string(previous):
            previous.extract()  # type: ignore[union-attr]
        tag.decompose()
        removed += 1
    return removed


def _absorb_doctype_newline(soup: BeautifulSoup) -> None:
    """Drop the newline after a doctype that serialization would emit twice.

    BeautifulSoup renders a doctype followed by its own newline, so the
    newline parsed after it must be consumed once to keep output stable.
    """
    for node in soup.contents:
        if not isinstance(node, Doctype):
            continue
        following = node.next_sibling
        if type(following) is NavigableString and following.startswith("\n"):
            rest = str(following)[1:]
            if rest:
                following.replace_with(NavigableString(rest))
            else:
                following.extract()
        return


def _ensure_head(soup: BeautifulSoup) -> Tag:
    head = soup.find("head")
    if isinstance(head, Tag):
        return head
    logger.info("Document has no <head>; creating one")
    head = soup.new_tag("head")
    html = soup.find("html")
    if isinstance(html, Tag):
        html.insert(0, head)
    else:
        soup.insert(0, head)
    return head


def _trailing_blank(head: Tag) -> NavigableString | None:
    contents = head.contents
    if contents and _is_blank_string(contents[-1]):
        return contents[-1]  # type: ignore[return-value]
    return None


def _child_indent(head: Tag, trailing: NavigableString) -> str:
    for child in head.contents[:-1]:
        if _is_blank_string(child) and "\n" in child:
            return str(child).rsplit("\n", 1)[-1]
    if "\n" in trailing:
        # Closing tag indentation plus one level
        return str(trailing).rsplit("\n", 1)[-1] + "  "
    return DEFAULT_CHILD_INDENT


def append_favicon_elements(
    soup: BeautifulSoup,
    references: FaviconReferenceSet | None = None,
) -> None:
    """Append the canonical elements to ``<head>``, creating the head if needed.

    Args:
        soup (BeautifulSoup): Parsed document, modified in place.
        references (FaviconReferenceSet | None): Reference set to render.
    """
    refs = references or DEFAULT_REFERENCES
    head = _ensure_head(soup)
    trailing = _trailing_blank(head)
    if trailing is None:
        trailing = NavigableString("\n")
        head.append(trailing)
    indent = _child_indent(head, trailing)

    for name, attrs in refs.element_specs():
        trailing.insert_before(NavigableString(f"\n{indent}"))
        trailing.insert_before(soup.new_tag(name, attrs=attrs))


def inject_into_markup(
    document_path: Path | None,
    references: FaviconReferenceSet | None = None,
    *,
    apply: bool = True,
) -> InjectionResult:
    """Install the canonical favicon elements in an HTML document.

    Args:
        document_path (Path | None): The ``index.html`` to edit.
        references (FaviconReferenceSet | None): Reference set to render.
        apply (bool): Write changes; False performs a dry run.

    Returns:
        InjectionResult: The outcome; ``NOT_FOUND`` when the document does not exist.
    """
    if document_path is None or not document_path.is_file():
        logger.warning("index.html not found at %s", document_path)
        return InjectionResult(InjectStatus.NOT_FOUND, document_path)

    try:
        original = read_text_file(document_path)
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8, leaving it untouched: %s", document_path, exc)
        return InjectionResult(InjectStatus.UNREADABLE, document_path)
    soup = BeautifulSoup(original, "html.parser")
    _absorb_doctype_newline(soup)
    removed = remove_favicon_elements(soup)
    append_favicon_elements(soup, references)
    updated = str(soup)

    if updated == original:
        logger.debug("%s already holds the canonical references", document_path)
        return InjectionResult(InjectStatus.UNCHANGED, document_path)

    status = InjectStatus.REPLACED if removed else InjectStatus.INSERTED
    written = select_sink(apply).write(document_path, updated)
    return InjectionResult(status, document_path, written)
