# topmark:header:start
#
#   project      : FavMark
#   file         : discovery.py
#   file_relpath : src/favmark/project/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Find projects and candidate source images around a base directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from favmark.config.logging import get_logger
from favmark.constants import IGNORED_DIRS, MONOREPO_DIRS, SUPPORTED_IMAGE_EXTENSIONS
from favmark.project.detect import detect_project

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.project.profile import ProjectProfile

logger = get_logger(__name__)


def _subdirectories(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_dir())


def find_detected_projects(base_dir: Path) -> list[ProjectProfile]:
    """Return the known projects in and around ``base_dir``.

    Scans ``base_dir`` itself, its direct subdirectories, and the children of
    the ``apps`` and ``packages`` workspace folders.

    Args:
        base_dir (Path): Directory to scan.

    Returns:
        list[ProjectProfile]: Known profiles, deduplicated, in scan order.
    """
    base = base_dir.resolve()
    candidates: list[Path] = [base, *_subdirectories(base)]
    for workspace in MONOREPO_DIRS:
        candidates.extend(_subdirectories(base / workspace))

    seen: set[Path] = set()
    found: list[ProjectProfile] = []
    for candidate in candidates:
        resolved = candidate.resolve()
        if resolved in seen or resolved.name in IGNORED_DIRS:
            continue
        seen.add(resolved)
        profile = detect_project(resolved)
        if profile.is_known:
            logger.debug("Found %s project in %s", profile.kind.value, resolved)
            found.append(profile)
    return found


def find_image_files(root: Path, max_depth: int = 3) -> list[str]:
    """List supported source images under ``root``.

    Args:
        root (Path): Directory to search.
        max_depth (int): Maximum directory depth below ``root`` (``root`` is depth 0).

    Returns:
        list[str]: POSIX paths relative to ``root``, sorted.
    """
    results: list[str] = []

    def _walk(directory: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            return
        for entry in entries:
            if entry.is_dir():
                if entry.name not in IGNORED_DIRS:
                    _walk(entry, depth + 1)
                continue
            if entry.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS:
                results.append(entry.relative_to(root).as_posix())

    _walk(root, 0)
    return sorted(results)
