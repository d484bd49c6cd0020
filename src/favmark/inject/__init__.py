# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/inject/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reference injection: install favicon references in project sources.

Public entry points:
    - `inject_favicons`: boolean boundary used by the CLI.
    - `run_injection`: same, returning the full `InjectionResult`.
    - `remove_property` / `replace_managed_block`: the text primitives.
"""

from __future__ import annotations

from favmark.inject.dispatcher import inject_favicons, run_injection, select_injector
from favmark.inject.markers import replace_managed_block
from favmark.inject.references import FaviconReferenceSet, IconReference
from favmark.inject.remover import remove_property
from favmark.inject.status import InjectionResult, InjectStatus

__all__ = [
    "FaviconReferenceSet",
    "IconReference",
    "InjectStatus",
    "InjectionResult",
    "inject_favicons",
    "remove_property",
    "replace_managed_block",
    "run_injection",
    "select_injector",
]
