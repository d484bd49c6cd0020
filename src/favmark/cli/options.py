# topmark:header:start
#
#   project      : FavMark
#   file         : options.py
#   file_relpath : src/favmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for FavMark.

This module centralizes reusable options (verbosity, color, project
directory, configuration, dry run) and their resolution logic, so commands
and the group stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from favmark.cli.errors import FavmarkUsageError
from favmark.cli_shared.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        FavmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FavmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return min(verbose_count, 2)
    if quiet_count > 0:
        return -min(quiet_count, 2)
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def project_dir_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-d/--dir`` (project directory, default: current directory)."""
    return click.option(
        "-d",
        "--dir",
        "project_dir",
        type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Project directory.",
    )(f)


def dry_run_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dry-run`` (report what would change without writing)."""
    return click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Report what would change without writing any project source.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore the project's favmark.toml (only use defaults and --config files).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f
