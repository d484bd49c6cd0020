# topmark:header:start
#
#   project      : FavMark
#   file         : component_source.py
#   file_relpath : src/favmark/inject/component_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editor for Next.js app-router root layouts.

The host construct is the exported ``metadata`` object of ``layout.*``::

    export const metadata: Metadata = {
      title: "My app",
      // favmark:icons:start
      ...
      // favmark:icons:end
    };

Flow per invocation:

1. Locate the layout file (first of `LAYOUT_CANDIDATES`); if none, synthesize
   a minimal root layout.
2. Locate ``export const metadata ... = {`` and its matching ``}`` with the
   delimiter scanner.
3. Rewrite the body with `replace_managed_block` and splice it back.
4. When the construct is missing or its closing brace cannot be matched, a new
   ``metadata`` assignment holding only the managed block is inserted before
   the default-exported function, after the last import, or at the top of
   the file. An unparsable region is never edited in place.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from favmark.config.logging import get_logger
from favmark.inject.markers import has_managed_block, render_managed_block, replace_managed_block
from favmark.inject.references import DEFAULT_REFERENCES
from favmark.inject.scanner import find_closing_brace, find_property_start
from favmark.inject.status import InjectionResult, InjectStatus
from favmark.inject.writer import select_sink
from favmark.utils.file import read_text_file

if TYPE_CHECKING:
    from favmark.inject.references import FaviconReferenceSet

logger = get_logger(__name__)

LAYOUT_CANDIDATES: Final[tuple[str, ...]] = ("layout.tsx", "layout.jsx", "layout.js", "layout.ts")
TYPESCRIPT_SUFFIXES: Final[frozenset[str]] = frozenset({".ts", ".tsx"})

METADATA_TYPE_IMPORT: Final[str] = 'import type { Metadata } from "next";'

_METADATA_RE: Final[re.Pattern[str]] = re.compile(
    r"export\s+const\s+metadata\s*(?::\s*[A-Za-z_$][\w$.]*\s*)?=\s*\{"
)
_DEFAULT_EXPORT_RE: Final[re.Pattern[str]] = re.compile(
    r"^[ \t]*export\s+default\s+(?:async\s+)?function\b", re.MULTILINE
)
# Single- or multi-line import statements, including side-effect imports.
_IMPORT_RE: Final[re.Pattern[str]] = re.compile(
    r"""^import\s(?:[^;'"]*?\sfrom\s*)?["'][^"'\n]+["'][ \t]*;?[ \t]*$""", re.MULTILINE
)
_METADATA_TYPE_IMPORTED_RE: Final[re.Pattern[str]] = re.compile(
    r"""^import\s[^;]*\bMetadata\b[^;]*\bfrom\s*["']next["']""", re.MULTILINE
)

_ROOT_LAYOUT_TSX: Final[str] = """\
export default function RootLayout({
  children,
}: Readonly<{
  children: React.ReactNode;
}>) {
  return (
    <html lang="en">
      <body>{children}</body>
    </html>
  );
}
"""

_ROOT_LAYOUT_JSX: Final[str] = """\
export default function RootLayout({ children }) {
  return (
    <html lang="en">
      <body>{children}</body>
    </html>
  );
}
"""


def find_layout_file(component_dir: Path) -> Path | None:
    """Return the first existing layout file in ``component_dir``, if any."""
    for name in LAYOUT_CANDIDATES:
        candidate = component_dir / name
        if candidate.is_file():
            return candidate
    return None


def _directory_uses_typescript(component_dir: Path) -> bool:
    if not component_dir.is_dir():
        return False
    return any(p.suffix in TYPESCRIPT_SUFFIXES for p in component_dir.iterdir() if p.is_file())


def locate_metadata_body(text: str) -> tuple[int, int] | None:
    """Return the ``(start, end)`` offsets of the metadata object body.

    ``start`` is just past the opening brace and ``end`` is the offset of the
    matching closing brace.

    Args:
        text (str): Layout source text.

    An unterminated construct is skipped in favor of a later, well-formed
    one (typically the assignment synthesized by a previous run).

    Returns:
        tuple[int, int] | None: The body span, or None when the construct is
            absent or its closing brace cannot be matched.
    """
    for match in _METADATA_RE.finditer(text):
        body_start = match.end()
        body_end = find_closing_brace(text, body_start)
        if body_end is not None:
            return (body_start, body_end)
        logger.warning("metadata object starting at offset %d is not terminated", body_start)
    return None


def render_metadata_assignment(
    references: FaviconReferenceSet | None = None,
    *,
    typescript: bool,
) -> str:
    """Render a ``metadata`` assignment holding only the managed block."""
    annotation = ": Metadata" if typescript else ""
    block = render_managed_block(references)
    return f"export const metadata{annotation} = {{\n{block}\n}};\n"


def _end_of_last_import(text: str) -> int | None:
    matches = list(_IMPORT_RE.finditer(text))
    if not matches:
        return None
    pos = matches[-1].end()
    if text.startswith("\r\n", pos):
        return pos + 2
    if text.startswith("\n", pos):
        return pos + 1
    return pos


def _ensure_metadata_type_import(text: str) -> str:
    if _METADATA_TYPE_IMPORTED_RE.search(text):
        return text
    pos = _end_of_last_import(text)
    if pos is None:
        return f"{METADATA_TYPE_IMPORT}\n\n{text}"
    prefix = text[:pos] if text[:pos].endswith("\n") else text[:pos] + "\n"
    return f"{prefix}{METADATA_TYPE_IMPORT}\n{text[pos:]}"


def synthesize_metadata(
    text: str,
    references: FaviconReferenceSet | None = None,
    *,
    typescript: bool,
) -> str:
    """Insert a fresh ``metadata`` assignment into ``text``.

    The assignment goes immediately before the first default-exported function;
    otherwise after the last import statement; otherwise at the top.

    Args:
        text (str): Current layout source (may be empty).
        references (FaviconReferenceSet | None): Reference set to render.
        typescript (bool): Annotate with ``Metadata`` and import the type.

    Returns:
        str: The updated source.
    """
    assignment = render_metadata_assignment(references, typescript=typescript)
    if typescript:
        text = _ensure_metadata_type_import(text)

    default_export = _DEFAULT_EXPORT_RE.search(text)
    if default_export is not None:
        pos = default_export.start()
        return f"{text[:pos]}{assignment}\n{text[pos:]}"

    pos = _end_of_last_import(text)
    if pos is not None:
        prefix = text[:pos] if text[:pos].endswith("\n") else text[:pos] + "\n"
        return f"{prefix}\n{assignment}{text[pos:]}"

    if not text:
        return assignment
    return f"{assignment}\n{text}"


def rewrite_metadata(
    text: str,
    references: FaviconReferenceSet | None = None,
) -> tuple[str, InjectStatus] | None:
    """Replace the managed block inside an existing ``metadata`` object.

    Args:
        text (str): Layout source text.
        references (FaviconReferenceSet | None): Reference set to render.

    Returns:
        tuple[str, InjectStatus] | None: The updated text and ``REPLACED`` (prior
            favicon state found) or ``INSERTED``; None when there is no usable
            construct.
    """
    span = locate_metadata_body(text)
    if span is None:
        return None
    start, end = span
    body = text[start:end]
    had_prior_state = (
        has_managed_block(body)
        or find_property_start(body, "icons") is not None
        or find_property_start(body, "manifest") is not None
    )
    new_body = replace_managed_block(body, references)
    status = InjectStatus.REPLACED if had_prior_state else InjectStatus.INSERTED
    return (text[:start] + new_body + text[end:], status)


def render_root_layout(
    references: FaviconReferenceSet | None = None,
    *,
    typescript: bool,
) -> str:
    """Render a minimal root layout whose only extra content is the metadata block."""
    template = _ROOT_LAYOUT_TSX if typescript else _ROOT_LAYOUT_JSX
    return synthesize_metadata(template, references, typescript=typescript)


def inject_into_component_source(
    component_dir: Path | None,
    references: FaviconReferenceSet | None = None,
    *,
    typescript: bool | None = None,
    apply: bool = True,
) -> InjectionResult:
    """Install the canonical icon metadata in an app-router layout.

    Args:
        component_dir (Path | None): The ``app`` directory of the project.
        references (FaviconReferenceSet | None): Reference set to render.
        typescript (bool | None): Language for a synthesized layout; inferred
            from the directory content when None.
        apply (bool): Write changes; False performs a dry run.

    Returns:
        InjectionResult: The outcome; ``NOT_FOUND`` when no directory can host a layout.
    """
    refs = references or DEFAULT_REFERENCES
    if component_dir is None:
        logger.warning("No component directory in project profile")
        return InjectionResult(InjectStatus.NOT_FOUND)
    if component_dir.exists() and not component_dir.is_dir():
        logger.warning("Component directory %s is not a directory", component_dir)
        return InjectionResult(InjectStatus.NOT_FOUND, component_dir)

    sink = select_sink(apply)
    host = find_layout_file(component_dir)
    if host is None:
        use_ts = typescript if typescript is not None else _directory_uses_typescript(component_dir)
        path = component_dir / ("layout.tsx" if use_ts else "layout.jsx")
        logger.info("No layout file in %s, creating %s", component_dir, path.name)
        written = sink.write(path, render_root_layout(refs, typescript=use_ts))
        return InjectionResult(InjectStatus.CREATED, path, written)

    try:
        original = read_text_file(host)
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8, leaving it untouched: %s", host, exc)
        return InjectionResult(InjectStatus.UNREADABLE, host)
    rewritten = rewrite_metadata(original, refs)
    if rewritten is None:
        logger.info("No usable metadata object in %s, synthesizing one", host)
        updated = synthesize_metadata(
            original, refs, typescript=host.suffix in TYPESCRIPT_SUFFIXES
        )
        status = InjectStatus.INSERTED
    else:
        updated, status = rewritten

    if updated == original:
        logger.debug("%s already holds the canonical references", host)
        return InjectionResult(InjectStatus.UNCHANGED, host)

    written = sink.write(host, updated)
    return InjectionResult(status, host, written)
