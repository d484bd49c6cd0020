# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/project/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project classification and discovery.

Re-exports the profile types and the detection entry points so callers can
write ``from favmark.project import detect_project, ProjectKind``.
"""

from __future__ import annotations

from favmark.project.detect import detect_project, get_project_label
from favmark.project.discovery import find_detected_projects, find_image_files
from favmark.project.profile import ProjectDetails, ProjectKind, ProjectProfile

__all__ = [
    "ProjectDetails",
    "ProjectKind",
    "ProjectProfile",
    "detect_project",
    "find_detected_projects",
    "find_image_files",
    "get_project_label",
]
