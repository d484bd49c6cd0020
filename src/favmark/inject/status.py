# topmark:header:start
#
#   project      : FavMark
#   file         : status.py
#   file_relpath : src/favmark/inject/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outcome of one injection run.

Every editor returns an `InjectionResult`; the dispatcher boundary reduces it
to a boolean via `InjectionResult.succeeded`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from favmark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from pathlib import Path


class InjectStatus(ColoredStrEnum):
    """Status of an injection attempt.

    Members:
        INSERTED: References were added to an existing host construct or file.
        REPLACED: A previous managed block or favicon tag set was replaced.
        CREATED: A new host file was synthesized.
        UNCHANGED: The file already holds the canonical references.
        NOT_FOUND: No editable target exists (document, directory or head tag missing).
        UNREADABLE: The host file exists but is not valid UTF-8; it is left untouched.
        UNSUPPORTED: The project profile has no injector.
    """

    INSERTED = ("inserted", chalk.green)
    REPLACED = ("replaced", chalk.green_bright)
    CREATED = ("created", chalk.cyan)
    UNCHANGED = ("unchanged", chalk.gray)
    NOT_FOUND = ("not found", chalk.yellow)
    UNREADABLE = ("unreadable", chalk.yellow)
    UNSUPPORTED = ("unsupported", chalk.red_bright)


_SUCCESS: frozenset[InjectStatus] = frozenset(
    {
        InjectStatus.INSERTED,
        InjectStatus.REPLACED,
        InjectStatus.CREATED,
        InjectStatus.UNCHANGED,
    }
)


@dataclass(frozen=True, slots=True)
class InjectionResult:
    """Result of one editor invocation.

    Attributes:
        status (InjectStatus): What happened.
        path (Path | None): The file edited or created (or the path that was missing).
        written (bool): Whether the file was actually written (False on dry runs).
    """

    status: InjectStatus
    path: Path | None = None
    written: bool = False

    @property
    def succeeded(self) -> bool:
        """Whether the host now holds (or would hold) the canonical references."""
        return self.status in _SUCCESS
