# topmark:header:start
#
#   project      : FavMark
#   file         : remove.py
#   file_relpath : src/favmark/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `remove` command.

Deletes the generated favicon files from the project's public directory.
Project sources are left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from favmark.assets.generate import remove_generated_assets
from favmark.cli.cmd_common import resolve_project_dir
from favmark.cli.errors import FavmarkIOError
from favmark.cli.options import project_dir_option
from favmark.project.detect import detect_project

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="remove",
    help="Remove generated favicon files.",
)
@project_dir_option
@click.option(
    "-y",
    "--yes",
    "assume_yes",
    is_flag=True,
    help="Do not ask for confirmation.",
)
def remove_command(*, project_dir: Path, assume_yes: bool) -> None:
    """Delete the canonical favicon files from the public directory."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    root = resolve_project_dir(project_dir)
    profile = detect_project(root)
    public_dir = profile.details.public_dir if profile.details else root / "public"

    if not assume_yes and not click.confirm(
        f"Remove all generated favicons from {public_dir}?", default=False
    ):
        console.print("Aborted.")
        return

    try:
        removed = remove_generated_assets(public_dir)
    except OSError as e:
        raise FavmarkIOError(f"Cannot remove favicon files from {public_dir}: {e}") from e

    for name in removed:
        console.print(f"  {console.styled('[OK]', fg='green')} Removed {name}")
    console.print()
    console.print(console.styled(f"Removed {len(removed)} files", fg="green"))
