# topmark:header:start
#
#   project      : FavMark
#   file         : inject.py
#   file_relpath : src/favmark/cli/commands/inject.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `inject` command.

Installs the favicon references in the project sources without generating
any image. Useful after editing ``favmark.toml`` or a layout by hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from favmark.cli.cmd_common import (
    load_config,
    report_injection,
    resolve_project_dir,
    select_project,
)
from favmark.cli.errors import FavmarkIOError
from favmark.cli.options import common_config_options, dry_run_option, project_dir_option
from favmark.cli_shared.exit_codes import ExitCode
from favmark.inject.dispatcher import run_injection

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="inject",
    help="Inject favicon references into the project sources (no image generation).",
)
@project_dir_option
@dry_run_option
@common_config_options
def inject_command(
    *,
    project_dir: Path,
    dry_run: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Install the canonical references and report the outcome.

    Exits with `ExitCode.FAILURE` when the project has no editable target.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    base_dir = resolve_project_dir(project_dir)
    profile = select_project(ctx, base_dir)
    root = profile.details.root if profile.details else base_dir
    config = load_config(root, config_paths, no_config=no_config)

    try:
        result = run_injection(profile, config.references(), apply=not dry_run)
    except OSError as e:
        raise FavmarkIOError(f"Cannot update project sources: {e}") from e

    report_injection(ctx, result, root)
    if not result.succeeded:
        console.warn("Could not auto-inject. Add references manually.")
        ctx.exit(ExitCode.FAILURE)
