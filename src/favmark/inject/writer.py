# topmark:header:start
#
#   project      : FavMark
#   file         : writer.py
#   file_relpath : src/favmark/inject/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write sinks used by the editors.

Each editor computes the complete new file text in memory and hands it to a
sink as its final step. One file is replaced by one complete write.

Sinks
-----
- FileSystemSink: writes the text to the path (creating parent directories).
- NullSink: no-op (dry-run).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from favmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class WriteSink(Protocol):
    """Protocol for sinks that commit an editor's output."""

    def write(self, path: Path, text: str) -> bool:
        """Write ``text`` to ``path``.

        Args:
            path (Path): Destination file.
            text (str): Complete new file content.

        Returns:
            bool: True if the file was actually written.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, path: Path, text: str) -> bool:
        """Log and discard the write."""
        logger.debug("NullSink: would write %d characters to %s", len(text), path)
        return False


class FileSystemSink:
    """Filesystem sink that replaces the file at ``path``."""

    def write(self, path: Path, text: str) -> bool:
        """Write ``text`` to ``path`` as UTF-8 without newline translation.

        Args:
            path (Path): Destination file; missing parent directories are created.
            text (str): Complete new file content.

        Returns:
            bool: Always True.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.debug("FileSystemSink: wrote %d bytes to %s", len(text.encode("utf-8")), path)
        return True


def select_sink(apply: bool) -> WriteSink:
    """Return ``FileSystemSink`` when applying changes, otherwise ``NullSink``."""
    if not apply:
        logger.debug("Selected NULL sink (apply is False)")
        return NullSink()
    return FileSystemSink()
