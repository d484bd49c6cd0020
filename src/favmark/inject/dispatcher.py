# topmark:header:start
#
#   project      : FavMark
#   file         : dispatcher.py
#   file_relpath : src/favmark/inject/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Select and run the injector for a project profile.

Every injector follows the same contract: remove prior managed state, then
insert the canonical state. The mapping from profile kind to injector is a
plain lookup:

| Kind                      | Injector                  | Target                  |
| ------------------------- | ------------------------- | ----------------------- |
| BUNDLER_SPA, LEGACY_SPA   | `MarkupDocumentInjector`  | ``document_path``       |
| APP_ROUTER                | `ComponentSourceInjector` | ``component_dir``       |
| PAGES_ROUTER              | `DocumentWrapperInjector` | ``pages_dir``           |
| UNKNOWN                   | none                      | reported as unsupported |

Expected "nothing to do" conditions never raise, and a host file that is not
UTF-8 is reported as `UNREADABLE`. `OSError` from reading or writing a file
propagates to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from favmark.config.logging import get_logger
from favmark.inject.component_source import inject_into_component_source
from favmark.inject.document_wrapper import inject_into_document_wrapper
from favmark.inject.markup import inject_into_markup
from favmark.inject.references import DEFAULT_REFERENCES
from favmark.inject.status import InjectionResult, InjectStatus
from favmark.project.profile import ProjectKind

if TYPE_CHECKING:
    from favmark.inject.references import FaviconReferenceSet
    from favmark.project.profile import ProjectDetails, ProjectProfile

logger = get_logger(__name__)


class ReferenceInjector(Protocol):
    """Protocol for strategies that install the canonical references in a project."""

    def inject(
        self,
        details: ProjectDetails,
        references: FaviconReferenceSet,
        *,
        apply: bool,
    ) -> InjectionResult:
        """Remove prior favicon state from the host, then insert the canonical state.

        Args:
            details (ProjectDetails): Paths of the detected project.
            references (FaviconReferenceSet): The references to install.
            apply (bool): Write changes; False performs a dry run.

        Returns:
            InjectionResult: The outcome of the edit.
        """
        ...


class MarkupDocumentInjector:
    """Edits the SPA ``index.html``."""

    def inject(
        self,
        details: ProjectDetails,
        references: FaviconReferenceSet,
        *,
        apply: bool,
    ) -> InjectionResult:
        """Delegate to `inject_into_markup`."""
        return inject_into_markup(details.document_path, references, apply=apply)


class ComponentSourceInjector:
    """Edits the app-router root layout."""

    def inject(
        self,
        details: ProjectDetails,
        references: FaviconReferenceSet,
        *,
        apply: bool,
    ) -> InjectionResult:
        """Delegate to `inject_into_component_source`."""
        return inject_into_component_source(
            details.component_dir,
            references,
            typescript=details.typescript,
            apply=apply,
        )


class DocumentWrapperInjector:
    """Edits the pages-router ``_document``."""

    def inject(
        self,
        details: ProjectDetails,
        references: FaviconReferenceSet,
        *,
        apply: bool,
    ) -> InjectionResult:
        """Delegate to `inject_into_document_wrapper`."""
        return inject_into_document_wrapper(
            details.pages_dir,
            references,
            typescript=details.typescript,
            apply=apply,
        )


_INJECTORS: dict[ProjectKind, ReferenceInjector] = {
    ProjectKind.BUNDLER_SPA: MarkupDocumentInjector(),
    ProjectKind.LEGACY_SPA: MarkupDocumentInjector(),
    ProjectKind.APP_ROUTER: ComponentSourceInjector(),
    ProjectKind.PAGES_ROUTER: DocumentWrapperInjector(),
}


def select_injector(kind: ProjectKind) -> ReferenceInjector | None:
    """Return the injector for ``kind``, or None for unsupported kinds."""
    injector = _INJECTORS.get(kind)
    logger.debug("Selected injector %s for %s", type(injector).__name__, kind.value)
    return injector


def run_injection(
    profile: ProjectProfile,
    references: FaviconReferenceSet | None = None,
    *,
    apply: bool = True,
) -> InjectionResult:
    """Install the canonical references in the project described by ``profile``.

    Args:
        profile (ProjectProfile): The detected project.
        references (FaviconReferenceSet | None): References to install; defaults
            to the canonical set rooted at ``/``.
        apply (bool): Write changes; False performs a dry run.

    Returns:
        InjectionResult: The outcome; ``UNSUPPORTED`` for unknown profiles.
    """
    injector = select_injector(profile.kind)
    if injector is None or profile.details is None:
        logger.info("No injector for project kind %s", profile.kind.value)
        return InjectionResult(InjectStatus.UNSUPPORTED)
    result = injector.inject(profile.details, references or DEFAULT_REFERENCES, apply=apply)
    logger.info("Injection into %s: %s", result.path, result.status.value)
    return result


def inject_favicons(
    profile: ProjectProfile,
    references: FaviconReferenceSet | None = None,
) -> bool:
    """Install the canonical references and report success as a boolean.

    Args:
        profile (ProjectProfile): The detected project.
        references (FaviconReferenceSet | None): References to install.

    Returns:
        bool: True when the host now holds the canonical references.
    """
    return run_injection(profile, references).succeeded
