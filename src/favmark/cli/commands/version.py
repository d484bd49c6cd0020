# topmark:header:start
#
#   project      : FavMark
#   file         : version.py
#   file_relpath : src/favmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `version` command.

Prints the current FavMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from favmark.cli.cmd_common import get_effective_verbosity
from favmark.constants import FAVMARK_VERSION

if TYPE_CHECKING:
    from favmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of FavMark.",
)
def version_command() -> None:
    """Show the current version of FavMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.print(f"FavMark version {FAVMARK_VERSION}")
    else:
        console.print(FAVMARK_VERSION)
