# topmark:header:start
#
#   project      : FavMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FavMark test suite.

Sets up typed mark wrappers, silences environment-driven logging and provides
small project-tree builders shared by the injector, detection and CLI tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from favmark.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_favmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure FavMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE so failures come with full diagnostics.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Project tree builders ---


def write_package_json(root: Path, dependencies: dict[str, str]) -> Path:
    """Write a minimal ``package.json`` declaring ``dependencies``."""
    root.mkdir(parents=True, exist_ok=True)
    path = root / "package.json"
    path.write_text(json.dumps({"name": root.name, "dependencies": dependencies}), "utf-8")
    return path


def make_vite_project(root: Path, index_html: str | None = None) -> Path:
    """Create a Vite React project with an ``index.html`` at its root."""
    write_package_json(root, {"react": "^18.0.0", "vite": "^5.0.0"})
    (root / "index.html").write_text(
        index_html
        if index_html is not None
        else (
            "<!doctype html>\n"
            "<html>\n"
            "  <head>\n"
            '    <meta charset="UTF-8">\n'
            "    <title>App</title>\n"
            "  </head>\n"
            "  <body></body>\n"
            "</html>\n"
        ),
        "utf-8",
    )
    return root


def make_app_router_project(root: Path, layout: str | None = None) -> Path:
    """Create a Next.js app-router project; ``layout`` is written to ``app/layout.tsx``."""
    write_package_json(root, {"next": "14.2.0", "react": "^18.0.0"})
    (root / "app").mkdir(parents=True, exist_ok=True)
    if layout is not None:
        (root / "app" / "layout.tsx").write_text(layout, "utf-8")
    return root


def make_pages_router_project(root: Path, document: str | None = None) -> Path:
    """Create a Next.js pages-router project; ``document`` goes to ``pages/_document.jsx``."""
    write_package_json(root, {"next": "14.2.0", "react": "^18.0.0"})
    (root / "pages").mkdir(parents=True, exist_ok=True)
    if document is not None:
        (root / "pages" / "_document.jsx").write_text(document, "utf-8")
    return root


@pytest.fixture
def vite_project(tmp_path: Path) -> Path:
    """A Vite React project in a temporary directory."""
    return make_vite_project(tmp_path / "web")
