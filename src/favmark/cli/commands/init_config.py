# topmark:header:start
#
#   project      : FavMark
#   file         : init_config.py
#   file_relpath : src/favmark/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark `init-config` command.

Prints a starter ``favmark.toml`` to stdout, intended as a starting point for
customizing a project's configuration::

    favmark init-config > favmark.toml
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from favmark.cli.cmd_common import get_effective_verbosity
from favmark.config.io import render_default_config_toml

if TYPE_CHECKING:
    from favmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="init-config",
    help="Display an initial favmark.toml configuration file.",
)
def init_config_command() -> None:
    """Print a starter config file to stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    console.print(render_default_config_toml(), nl=False)

    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
