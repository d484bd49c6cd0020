# topmark:header:start
#
#   project      : FavMark
#   file         : cmd_common.py
#   file_relpath : src/favmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
console and verbosity lookup, configuration loading, project selection and
result rendering. Library errors are translated into `favmark.cli.errors`
classes here so commands only deal with the happy path.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from favmark.cli.console import get_console_safely
from favmark.cli.errors import FavmarkConfigError, FavmarkError, FavmarkFileNotFoundError
from favmark.config.io import ConfigError
from favmark.config.logging import get_logger
from favmark.config.model import MutableConfig
from favmark.inject.status import InjectStatus
from favmark.project.detect import detect_project
from favmark.project.discovery import find_detected_projects, find_image_files
from favmark.utils.file import display_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from favmark.cli_shared.console_api import ConsoleLike
    from favmark.config.model import Config
    from favmark.inject.status import InjectionResult
    from favmark.project.profile import ProjectProfile

logger = get_logger(__name__)

MANUAL_ENTRY_LABEL = "Enter path manually"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def color_enabled(ctx: click.Context) -> bool:
    """Return whether the group enabled ANSI color for this invocation."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return bool(obj.get("color_enabled", False))


def resolve_project_dir(project_dir: Path) -> Path:
    """Return ``project_dir`` as an absolute path.

    Raises:
        FavmarkFileNotFoundError: If the directory does not exist.
    """
    resolved = project_dir.expanduser().resolve()
    if not resolved.is_dir():
        raise FavmarkFileNotFoundError(f"Project directory not found: {project_dir}")
    return resolved


def load_config(
    project_dir: Path,
    config_paths: Iterable[Path] = (),
    *,
    no_config: bool = False,
) -> Config:
    """Merge and freeze the configuration for ``project_dir``.

    Raises:
        FavmarkConfigError: If a config source is unreadable or invalid.
    """
    try:
        return MutableConfig.load_merged(
            project_dir, list(config_paths), no_config=no_config
        ).freeze()
    except ConfigError as e:
        raise FavmarkConfigError(str(e)) from e


def select_project(ctx: click.Context, base_dir: Path) -> ProjectProfile:
    """Detect the project in ``base_dir`` or let the user pick a nearby one.

    When ``base_dir`` itself is not a recognized project, its sub-directories
    and ``apps/*`` / ``packages/*`` are scanned and the user chooses from a
    numbered list.

    Raises:
        FavmarkError: If no project can be found.
    """
    console: ConsoleLike = get_console_safely()
    profile = detect_project(base_dir)
    if profile.is_known:
        console.print(f"Detected: {console.styled(profile.label, fg='green')}")
        return profile

    candidates = find_detected_projects(base_dir)
    if not candidates:
        console.print(
            console.styled("Tip: run this inside a React/Next.js project, or pass --dir", dim=True)
        )
        raise FavmarkError("Could not detect a React or Next.js project")

    console.print(
        f"Found {console.styled(str(len(candidates)), fg='green')} React/Next.js project(s)"
    )
    for index, candidate in enumerate(candidates, start=1):
        root = candidate.details.root if candidate.details else base_dir
        console.print(f"  {index}) {display_path(root, base_dir)} ({candidate.label})")
    choice: int = click.prompt(
        "Select a project",
        type=click.IntRange(1, len(candidates)),
        default=1,
    )
    selected = candidates[choice - 1]
    if selected.details is not None:
        console.print(console.styled(f"Using project: {selected.details.root}", dim=True))
    return selected


def _existing_file(project_dir: Path) -> click.types.FuncParamType:
    def convert(value: str) -> Path:
        candidate = Path(value).expanduser()
        path = candidate if candidate.is_absolute() else project_dir / candidate
        if not path.is_file():
            raise click.BadParameter("File not found")
        return path

    return click.types.FuncParamType(convert)


def prompt_image_path(project_dir: Path, *, message: str = "Enter the image path") -> Path:
    """Prompt until the user enters an existing file, relative to ``project_dir``."""
    path: Path = click.prompt(message, type=_existing_file(project_dir))
    return path


def choose_image(project_dir: Path) -> Path:
    """Let the user pick a source image found under ``project_dir``.

    The list ends with a manual-entry choice; when no image is found the user
    is asked for a path directly.
    """
    console = get_console_safely()
    images = find_image_files(project_dir)
    if not images:
        return prompt_image_path(project_dir, message="No images found. Enter the image path")

    for index, name in enumerate(images, start=1):
        console.print(f"  {index}) {name}")
    manual_index = len(images) + 1
    console.print(f"  {manual_index}) {MANUAL_ENTRY_LABEL}")
    choice: int = click.prompt(
        "Select an image to use as favicon",
        type=click.IntRange(1, manual_index),
    )
    if choice == manual_index:
        return prompt_image_path(project_dir)
    return project_dir / images[choice - 1]


def render_status(ctx: click.Context, status: InjectStatus) -> str:
    """Return the status label, colored when color is enabled."""
    return status.colored() if color_enabled(ctx) else status.value


def report_injection(ctx: click.Context, result: InjectionResult, base_dir: Path) -> None:
    """Print one line describing an injection outcome."""
    console = get_console_safely()
    target = display_path(result.path, base_dir) if result.path is not None else "-"
    dry = result.succeeded and not result.written and result.status is not InjectStatus.UNCHANGED
    suffix = " (dry run)" if dry else ""
    console.print(f"  {render_status(ctx, result.status)}: {target}{suffix}")
