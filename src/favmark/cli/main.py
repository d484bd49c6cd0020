# topmark:header:start
#
#   project      : FavMark
#   file         : main.py
#   file_relpath : src/favmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; sub-commands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from favmark.cli.commands.detect import detect_command
from favmark.cli.commands.init_config import init_config_command
from favmark.cli.commands.inject import inject_command
from favmark.cli.commands.remove import remove_command
from favmark.cli.commands.set import set_command
from favmark.cli.commands.version import version_command
from favmark.cli.console import ClickConsole
from favmark.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from favmark.cli_shared.color import ColorMode, resolve_color_mode
from favmark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from favmark.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FavMark: generate favicons and wire them into React and Next.js projects.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the FavMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'favmark set [IMAGE]' to generate and inject favicons.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(set_command)

cli.add_command(inject_command)

cli.add_command(detect_command)

cli.add_command(remove_command)

cli.add_command(init_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
