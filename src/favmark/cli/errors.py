# topmark:header:start
#
#   project      : FavMark
#   file         : errors.py
#   file_relpath : src/favmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for FavMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from favmark.cli_shared.exit_codes import ExitCode


class FavmarkError(click.ClickException):
    """Base class for all FavMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class FavmarkUsageError(FavmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FavmarkConfigError(FavmarkError):
    """Error for configuration errors (unreadable/invalid favmark.toml)."""

    exit_code = ExitCode.CONFIG_ERROR


class FavmarkFileNotFoundError(FavmarkError):
    """Error when an input path or project does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FavmarkUnsupportedImageError(FavmarkError):
    """Error when the source image format is not supported or cannot be decoded."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


class FavmarkIOError(FavmarkError):
    """Error for filesystem I/O failures while writing generated files."""

    exit_code = ExitCode.IO_ERROR
