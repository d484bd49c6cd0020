# topmark:header:start
#
#   project      : FavMark
#   file         : detect.py
#   file_relpath : src/favmark/project/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classify a directory from its ``package.json``.

Resolution order:
    1. ``next`` dependency: app router when ``src/app`` or ``app`` exists
       (``src/app`` wins), otherwise pages router (``src/pages`` when it exists,
       else ``pages``).
    2. ``react`` + ``vite``: bundler SPA with a root ``index.html``.
    3. ``react`` + ``react-scripts``: legacy SPA with ``public/index.html``.
    4. ``react`` alone: bundler SPA.
    5. Anything else, or no readable ``package.json``: unknown.

Dependencies and devDependencies are merged before matching.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

from favmark.config.logging import get_logger
from favmark.project.profile import ProjectDetails, ProjectKind, ProjectProfile

logger = get_logger(__name__)

PACKAGE_JSON = "package.json"
TSCONFIG_JSON = "tsconfig.json"


def read_dependencies(package_json: Path) -> dict[str, Any] | None:
    """Return merged ``dependencies`` and ``devDependencies`` of a package.json.

    Args:
        package_json (Path): Path to the ``package.json`` file.

    Returns:
        dict[str, Any] | None: The merged mapping, or None when the file is
            missing, unreadable or not a JSON object.
    """
    if not package_json.is_file():
        return None
    try:
        with open(package_json, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Cannot read %s: %s", package_json, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("%s does not contain a JSON object", package_json)
        return None

    pkg = cast("dict[str, Any]", data)
    merged: dict[str, Any] = {}
    for key in ("dependencies", "devDependencies"):
        section = pkg.get(key)
        if isinstance(section, dict):
            merged.update(cast("dict[str, Any]", section))
    return merged


def detect_project(root: Path) -> ProjectProfile:
    """Classify ``root`` into a project profile.

    Args:
        root (Path): Directory to inspect.

    Returns:
        ProjectProfile: The profile; ``ProjectKind.UNKNOWN`` when nothing matches.
    """
    root = root.resolve()
    deps = read_dependencies(root / PACKAGE_JSON)
    if deps is None:
        logger.debug("No usable %s in %s", PACKAGE_JSON, root)
        return ProjectProfile.unknown()

    public_dir = root / "public"
    typescript = (root / TSCONFIG_JSON).is_file()

    if deps.get("next"):
        src_app = root / "src" / "app"
        app = root / "app"
        if src_app.is_dir() or app.is_dir():
            nested = src_app.is_dir()
            details = ProjectDetails(
                root=root,
                public_dir=public_dir,
                component_dir=src_app if nested else app,
                nested_source=nested,
                typescript=typescript,
            )
            return ProjectProfile(ProjectKind.APP_ROUTER, details)

        src_pages = root / "src" / "pages"
        nested = src_pages.is_dir()
        details = ProjectDetails(
            root=root,
            public_dir=public_dir,
            pages_dir=src_pages if nested else root / "pages",
            nested_source=nested,
            typescript=typescript,
        )
        return ProjectProfile(ProjectKind.PAGES_ROUTER, details)

    if deps.get("react"):
        if deps.get("react-scripts") and not deps.get("vite"):
            return ProjectProfile(
                ProjectKind.LEGACY_SPA,
                ProjectDetails(
                    root=root,
                    public_dir=public_dir,
                    document_path=public_dir / "index.html",
                    typescript=typescript,
                ),
            )
        return ProjectProfile(
            ProjectKind.BUNDLER_SPA,
            ProjectDetails(
                root=root,
                public_dir=public_dir,
                document_path=root / "index.html",
                typescript=typescript,
            ),
        )

    logger.debug("%s has no recognized framework dependency", root)
    return ProjectProfile.unknown()


def get_project_label(kind: ProjectKind | str) -> str:
    """Return the human-readable label of a project kind (``Unknown`` if unrecognized)."""
    try:
        return ProjectKind(kind).label
    except ValueError:
        return ProjectKind.UNKNOWN.label
