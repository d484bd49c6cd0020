# topmark:header:start
#
#   project      : FavMark
#   file         : profile.py
#   file_relpath : src/favmark/project/profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project profile: the classification of a code base plus the paths to edit.

A `ProjectProfile` is a tagged variant: `ProjectKind` selects the injector,
`ProjectDetails` carries the paths that injector needs. Profiles are frozen
and stay immutable for the duration of one injection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ProjectKind(str, Enum):
    """Supported project layouts.

    Members:
        APP_ROUTER: Next.js with an ``app`` directory (metadata object in ``layout.*``).
        PAGES_ROUTER: Next.js with a ``pages`` directory (``_document.*`` wrapper).
        BUNDLER_SPA: React built with Vite (root ``index.html``).
        LEGACY_SPA: Create React App (``public/index.html``).
        UNKNOWN: Anything else; no injector applies.
    """

    APP_ROUTER = "next-app"
    PAGES_ROUTER = "next-pages"
    BUNDLER_SPA = "react-vite"
    LEGACY_SPA = "react-cra"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Human-readable label for console output."""
        return _LABELS[self]


_LABELS: dict[ProjectKind, str] = {
    ProjectKind.APP_ROUTER: "Next.js (App Router)",
    ProjectKind.PAGES_ROUTER: "Next.js (Pages Router)",
    ProjectKind.BUNDLER_SPA: "React + Vite",
    ProjectKind.LEGACY_SPA: "Create React App",
    ProjectKind.UNKNOWN: "Unknown",
}


@dataclass(frozen=True, slots=True)
class ProjectDetails:
    """Paths resolved for a detected project.

    Exactly one of ``component_dir``, ``pages_dir`` and ``document_path`` is set,
    matching the profile kind.

    Attributes:
        root (Path): Project root (the directory holding ``package.json``).
        public_dir (Path): Directory served at ``/`` (icons are written here).
        component_dir (Path | None): App-router ``app`` directory.
        pages_dir (Path | None): Pages-router ``pages`` directory.
        document_path (Path | None): SPA ``index.html``.
        nested_source (bool): Whether the router directory lives under ``src/``.
        typescript (bool): Whether the project has a ``tsconfig.json``.
    """

    root: Path
    public_dir: Path
    component_dir: Path | None = None
    pages_dir: Path | None = None
    document_path: Path | None = None
    nested_source: bool = False
    typescript: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping with unset paths omitted."""
        data: dict[str, Any] = {
            "root": str(self.root),
            "public_dir": str(self.public_dir),
        }
        for key, value in (
            ("component_dir", self.component_dir),
            ("pages_dir", self.pages_dir),
            ("document_path", self.document_path),
        ):
            if value is not None:
                data[key] = str(value)
        data["nested_source"] = self.nested_source
        data["typescript"] = self.typescript
        return data


@dataclass(frozen=True, slots=True)
class ProjectProfile:
    """Classification of one directory.

    Attributes:
        kind (ProjectKind): The detected layout.
        details (ProjectDetails | None): Resolved paths; None for ``UNKNOWN``.
    """

    kind: ProjectKind
    details: ProjectDetails | None = None

    @classmethod
    def unknown(cls) -> ProjectProfile:
        """Return the profile of an unrecognized directory."""
        return cls(ProjectKind.UNKNOWN, None)

    @property
    def is_known(self) -> bool:
        """Whether an injector exists for this profile."""
        return self.kind is not ProjectKind.UNKNOWN and self.details is not None

    @property
    def label(self) -> str:
        """Human-readable label of the profile kind."""
        return self.kind.label
