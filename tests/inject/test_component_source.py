# topmark:header:start
#
#   project      : FavMark
#   file         : test_component_source.py
#   file_relpath : tests/inject/test_component_source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the app-router layout editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from favmark.inject.component_source import (
    METADATA_TYPE_IMPORT,
    inject_into_component_source,
    locate_metadata_body,
    synthesize_metadata,
)
from favmark.inject.markers import END_LINE, START_LINE
from favmark.inject.status import InjectStatus

if TYPE_CHECKING:
    from pathlib import Path

LAYOUT_WITH_METADATA = """\
import type { Metadata } from "next";
import "./globals.css";

export const metadata: Metadata = {
  title: "My app",
  description: "Generated by create next app",
};

export default function RootLayout({ children }: { children: React.ReactNode }) {
  return (
    <html lang="en">
      <body>{children}</body>
    </html>
  );
}
"""

LAYOUT_WITHOUT_METADATA = """\
import "./globals.css";

export default function RootLayout({ children }) {
  return children;
}
"""


def _write_layout(app_dir: Path, text: str, name: str = "layout.tsx") -> Path:
    app_dir.mkdir(parents=True, exist_ok=True)
    path = app_dir / name
    path.write_text(text, "utf-8")
    return path


def test_inserts_block_into_existing_metadata(tmp_path: Path) -> None:
    """The block lands at the end of the metadata object; other code is untouched."""
    layout = _write_layout(tmp_path / "app", LAYOUT_WITH_METADATA)

    result = inject_into_component_source(tmp_path / "app")

    assert result.status == InjectStatus.INSERTED
    assert result.written
    assert result.path == layout
    text = layout.read_text("utf-8")
    assert '  description: "Generated by create next app",\n  ' + START_LINE in text
    assert f"  {END_LINE}\n}};\n" in text
    assert text.endswith(LAYOUT_WITH_METADATA[LAYOUT_WITH_METADATA.index("};") + 2 :])


def test_second_run_is_unchanged(tmp_path: Path) -> None:
    """A layout already holding the canonical block is not rewritten."""
    layout = _write_layout(tmp_path / "app", LAYOUT_WITH_METADATA)
    inject_into_component_source(tmp_path / "app")
    first = layout.read_text("utf-8")

    result = inject_into_component_source(tmp_path / "app")

    assert result.status == InjectStatus.UNCHANGED
    assert not result.written
    assert layout.read_text("utf-8") == first


def test_existing_icons_are_replaced(tmp_path: Path) -> None:
    """Prior ``icons``/``manifest`` properties are removed and reported as replaced."""
    source = LAYOUT_WITH_METADATA.replace(
        '  title: "My app",\n',
        '  title: "My app",\n  icons: { icon: "/old.png" },\n  manifest: "/old.json",\n',
    )
    layout = _write_layout(tmp_path / "app", source)

    result = inject_into_component_source(tmp_path / "app")

    assert result.status == InjectStatus.REPLACED
    text = layout.read_text("utf-8")
    assert "/old.png" not in text
    assert "/old.json" not in text
    assert text.count(START_LINE) == 1


def test_dry_run_does_not_write(tmp_path: Path) -> None:
    """With ``apply=False`` the outcome is reported but the file is untouched."""
    layout = _write_layout(tmp_path / "app", LAYOUT_WITH_METADATA)

    result = inject_into_component_source(tmp_path / "app", apply=False)

    assert result.status == InjectStatus.INSERTED
    assert not result.written
    assert layout.read_text("utf-8") == LAYOUT_WITH_METADATA


def test_metadata_synthesized_before_default_export(tmp_path: Path) -> None:
    """A layout without metadata gets a new assignment before the component."""
    layout = _write_layout(tmp_path / "app", LAYOUT_WITHOUT_METADATA, "layout.jsx")

    result = inject_into_component_source(tmp_path / "app")

    assert result.status == InjectStatus.INSERTED
    text = layout.read_text("utf-8")
    assert text.startswith('import "./globals.css";\n\nexport const metadata = {\n')
    assert text.index("export const metadata") < text.index("export default function")
    assert METADATA_TYPE_IMPORT not in text
    assert inject_into_component_source(tmp_path / "app").status == InjectStatus.UNCHANGED


def test_missing_layout_is_created(tmp_path: Path) -> None:
    """An empty app directory gets a minimal TypeScript root layout."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()

    result = inject_into_component_source(app_dir, typescript=True)

    assert result.status == InjectStatus.CREATED
    assert result.path == app_dir / "layout.tsx"
    text = (app_dir / "layout.tsx").read_text("utf-8")
    assert text.startswith(METADATA_TYPE_IMPORT)
    assert "export const metadata: Metadata = {" in text
    assert "export default function RootLayout" in text


def test_missing_layout_language_follows_directory(tmp_path: Path) -> None:
    """Without an explicit language, existing ``.tsx`` files select TypeScript."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "page.tsx").write_text("export default function Page() { return null; }\n")

    result = inject_into_component_source(app_dir)

    assert result.path == app_dir / "layout.tsx"


def test_missing_layout_plain_javascript(tmp_path: Path) -> None:
    """A JavaScript project gets ``layout.jsx`` without type annotations."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()

    result = inject_into_component_source(app_dir, typescript=False)

    assert result.path == app_dir / "layout.jsx"
    assert "export const metadata = {" in (app_dir / "layout.jsx").read_text("utf-8")


def test_no_component_dir_is_not_found() -> None:
    """Without a component directory nothing can be edited."""
    result = inject_into_component_source(None)

    assert result.status == InjectStatus.NOT_FOUND
    assert not result.succeeded


def test_unterminated_metadata_is_not_edited_in_place(tmp_path: Path) -> None:
    """An object whose closing brace cannot be found is left as is."""
    source = (
        'export const metadata = {\n  title: "x",\n\n'
        "export default function RootLayout({ children }) {\n  return children;\n}\n"
    )
    layout = _write_layout(tmp_path / "app", source, "layout.js")

    result = inject_into_component_source(tmp_path / "app")

    assert result.status == InjectStatus.INSERTED
    text = layout.read_text("utf-8")
    assert text.startswith('export const metadata = {\n  title: "x",\n\n')
    assert text.count("export const metadata = {") == 2
    assert inject_into_component_source(tmp_path / "app").status == InjectStatus.UNCHANGED


def test_locate_metadata_body() -> None:
    """The span covers the text strictly between the braces."""
    text = 'export const metadata = { title: "}" };'
    span = locate_metadata_body(text)

    assert span is not None
    start, end = span
    assert text[start:end] == ' title: "}" '


def test_synthesize_after_imports_without_component() -> None:
    """With no default export, the assignment follows the last import."""
    text = 'import a from "a";\nimport {\n  b,\n} from "b";\nconst x = 1;\n'

    result = synthesize_metadata(text, typescript=False)

    assert result.startswith('import a from "a";\nimport {\n  b,\n} from "b";\n\nexport const')
    assert result.endswith("};\nconst x = 1;\n")


def test_synthesize_into_empty_text() -> None:
    """Empty text becomes just the assignment."""
    result = synthesize_metadata("", typescript=False)

    assert result.startswith("export const metadata = {\n")
    assert result.endswith("};\n")
