# topmark:header:start
#
#   project      : FavMark
#   file         : detect.py
#   file_relpath : src/favmark/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `detect` command.

Prints the detected project type, its directory and the paths FavMark would
use for generation and injection.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from favmark.cli.cmd_common import resolve_project_dir
from favmark.cli.options import project_dir_option
from favmark.project.detect import detect_project

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="detect",
    help="Detect the project type.",
)
@project_dir_option
def detect_command(*, project_dir: Path) -> None:
    """Print the detected project profile of ``--dir``."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    root = resolve_project_dir(project_dir)
    profile = detect_project(root)

    console.print()
    console.print(console.styled("Project Detection", bold=True, fg="cyan"))
    console.print(f"  Type: {console.styled(profile.label, bold=True)}")
    console.print(f"  Directory: {console.styled(str(root), dim=True)}")
    if profile.details is not None:
        details = json.dumps(profile.details.to_dict(), indent=2)
        console.print(f"  Details:\n{console.styled(details, dim=True)}")
    console.print()
