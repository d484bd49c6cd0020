# topmark:header:start
#
#   project      : FavMark
#   file         : test_cli_set.py
#   file_relpath : tests/cli/test_cli_set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `set` generates the icon set and injects the references."""

from __future__ import annotations

from typing import TYPE_CHECKING

from favmark.cli.commands.set import resolve_image_argument
from favmark.cli_shared.exit_codes import ExitCode
from favmark.constants import GENERATED_FILES
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, make_logo, run_cli_in
from tests.conftest import make_vite_project, mark_cli, mark_integration

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@mark_integration
def test_set_generates_and_injects(vite_project: Path) -> None:
    """The happy path writes every file and edits ``index.html``."""
    make_logo(vite_project / "logo.png")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert_SUCCESS(result)
    assert "Detected: React + Vite" in result.output
    assert "Generated 8 files" in result.output
    assert "  [OK] favicon.ico (multi)" in result.output
    assert "  inserted: index.html" in result.output
    assert "Favicon references injected" in result.output
    assert "Favicons set successfully" in result.output
    assert "Files written to public." in result.output
    for name in GENERATED_FILES:
        assert (vite_project / "public" / name).is_file()
    assert 'href="/favicon.ico"' in (vite_project / "index.html").read_text("utf-8")


@mark_cli
def test_set_twice_is_unchanged(vite_project: Path) -> None:
    """Running ``set`` again leaves the document as it was."""
    make_logo(vite_project / "logo.png")
    run_cli_in(vite_project, ["--no-color", "set", "logo.png"])
    first = (vite_project / "index.html").read_text("utf-8")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert_SUCCESS(result)
    assert "  unchanged: index.html" in result.output
    assert (vite_project / "index.html").read_text("utf-8") == first


@mark_cli
def test_set_no_inject(vite_project: Path) -> None:
    """``--no-inject`` only generates files."""
    make_logo(vite_project / "logo.png")
    before = (vite_project / "index.html").read_text("utf-8")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png", "--no-inject"])

    assert_SUCCESS(result)
    assert (vite_project / "public" / "favicon.ico").is_file()
    assert (vite_project / "index.html").read_text("utf-8") == before
    assert "Favicon references injected" not in result.output


@mark_cli
def test_set_dry_run_writes_nothing(vite_project: Path) -> None:
    """``--dry-run`` lists the files and the injection outcome without writing."""
    make_logo(vite_project / "logo.png")
    before = (vite_project / "index.html").read_text("utf-8")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png", "--dry-run"])

    assert_SUCCESS(result)
    assert "Would write 8 files to" in result.output
    assert "  inserted: index.html (dry run)" in result.output
    assert "Favicons set successfully" not in result.output
    assert not (vite_project / "public").exists()
    assert (vite_project / "index.html").read_text("utf-8") == before


@mark_cli
def test_set_respects_config(vite_project: Path) -> None:
    """``favmark.toml`` controls the output directory, base URL and injection."""
    make_logo(vite_project / "logo.png")
    (vite_project / "favmark.toml").write_text(
        '[references]\nbase_url = "/static/"\n[generate]\noutput_dir = "static"\n',
        "utf-8",
    )

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert_SUCCESS(result)
    assert (vite_project / "static" / "favicon.ico").is_file()
    assert not (vite_project / "public").exists()
    assert 'href="/static/favicon.ico"' in (vite_project / "index.html").read_text("utf-8")
    assert "Files written to static." in result.output


@mark_cli
def test_set_injection_disabled_in_config(vite_project: Path) -> None:
    """``inject.enabled = false`` behaves like ``--no-inject``."""
    make_logo(vite_project / "logo.png")
    (vite_project / "favmark.toml").write_text("[inject]\nenabled = false\n", "utf-8")
    before = (vite_project / "index.html").read_text("utf-8")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert_SUCCESS(result)
    assert (vite_project / "index.html").read_text("utf-8") == before


@mark_cli
def test_set_invalid_config(vite_project: Path) -> None:
    """A broken ``favmark.toml`` exits with CONFIG_ERROR."""
    make_logo(vite_project / "logo.png")
    (vite_project / "favmark.toml").write_text("[references\n", "utf-8")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_set_missing_image(vite_project: Path) -> None:
    """A missing IMAGE exits with FILE_NOT_FOUND."""
    result = run_cli_in(vite_project, ["--no-color", "set", "nope.png"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Image not found" in result.output


@mark_cli
def test_set_unsupported_image(vite_project: Path) -> None:
    """An unsupported format exits with UNSUPPORTED_FILE_TYPE."""
    (vite_project / "logo.gif").write_bytes(b"GIF89a")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.gif"])

    assert result.exit_code == ExitCode.UNSUPPORTED_FILE_TYPE, result.output
    assert not (vite_project / "public").exists()


@mark_cli
def test_set_corrupt_image(vite_project: Path) -> None:
    """An undecodable image exits with UNSUPPORTED_FILE_TYPE."""
    (vite_project / "logo.png").write_bytes(b"not a png")

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert result.exit_code == ExitCode.UNSUPPORTED_FILE_TYPE, result.output


@mark_cli
def test_set_outside_any_project(tmp_path: Path) -> None:
    """Without any project nearby the command fails with a tip."""
    make_logo(tmp_path / "logo.png")

    result = run_cli_in(tmp_path, ["--no-color", "set", "logo.png"])

    assert_FAILURE(result)
    assert "Could not detect a React or Next.js project" in result.output
    assert "Tip:" in result.output


@mark_cli
@mark_integration
def test_set_interactive_project_and_image(tmp_path: Path) -> None:
    """The user picks a nearby project and one of its images from numbered lists."""
    root = make_vite_project(tmp_path / "frontend")
    make_logo(root / "src" / "assets" / "logo.png")

    result = run_cli_in(tmp_path, ["--no-color", "set"], input_text="1\n1\n")

    assert_SUCCESS(result)
    assert "Found 1 React/Next.js project(s)" in result.output
    assert "  1) frontend (React + Vite)" in result.output
    assert "  1) src/assets/logo.png" in result.output
    assert "  2) Enter path manually" in result.output
    assert (root / "public" / "favicon.ico").is_file()


@mark_cli
def test_set_manual_image_entry(vite_project: Path) -> None:
    """Choosing manual entry prompts for a path relative to the project."""
    make_logo(vite_project / "logo.png")

    result = run_cli_in(
        vite_project,
        ["--no-color", "set", "--no-inject"],
        input_text="2\nmissing.png\nlogo.png\n",
    )

    assert_SUCCESS(result)
    assert "File not found" in result.output
    assert (vite_project / "public" / "favicon.ico").is_file()


def test_resolve_image_argument_prefers_project(tmp_path: Path) -> None:
    """Relative IMAGE paths resolve against the project root first."""
    project = tmp_path / "p"
    project.mkdir()

    assert resolve_image_argument("logo.png", project) == project / "logo.png"
    assert resolve_image_argument(str(tmp_path / "x.png"), project) == tmp_path / "x.png"


@mark_cli
def test_set_undecodable_document_only_warns(vite_project: Path) -> None:
    """A non UTF-8 ``index.html`` is left alone; the generated files are kept."""
    make_logo(vite_project / "logo.png")
    latin1 = "<html><head><title>Caf\xe9</title></head><body></body></html>\n".encode("latin-1")
    (vite_project / "index.html").write_bytes(latin1)

    result = run_cli_in(vite_project, ["--no-color", "set", "logo.png"])

    assert_SUCCESS(result)
    assert result.exception is None
    assert "  unreadable: index.html" in result.output
    assert "Could not auto-inject" in result.output
    assert "Favicons set successfully" in result.output
    assert (vite_project / "public" / "favicon.ico").is_file()
    assert (vite_project / "index.html").read_bytes() == latin1
