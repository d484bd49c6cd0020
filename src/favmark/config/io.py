# topmark:header:start
#
#   project      : FavMark
#   file         : io.py
#   file_relpath : src/favmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, check and render FavMark TOML configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Value
getters are strict: a present value of the wrong type raises `ConfigError`
instead of being coerced, so a typo in ``favmark.toml`` is reported rather
than silently ignored.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from favmark.config.keys import Toml
from favmark.config.logging import get_logger
from favmark.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
)

if TYPE_CHECKING:
    from pathlib import Path

    from favmark.config.logging import FavmarkLogger

TomlTable = dict[str, Any]

logger: FavmarkLogger = get_logger(__name__)

HEADER_END_LINE = "# topmark:header:end"


class ConfigError(Exception):
    """Invalid or unreadable FavMark configuration."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


# --- Runtime defaults ---


def load_defaults_dict() -> TomlTable:
    """Return FavMark's runtime defaults as a new dict.

    This function performs no I/O. The bundled ``favmark-default.toml`` is the
    annotated, human-facing rendering of the same values.
    """
    return {
        Toml.SECTION_REFERENCES: {
            Toml.KEY_BASE_URL: "/",
            Toml.KEY_THEME_COLOR: "#ffffff",
        },
        Toml.SECTION_MANIFEST: {
            Toml.KEY_NAME: "",
            Toml.KEY_SHORT_NAME: "",
            Toml.KEY_BACKGROUND_COLOR: "#ffffff",
            Toml.KEY_DISPLAY: "standalone",
        },
        Toml.SECTION_GENERATE: {
            Toml.KEY_OUTPUT_DIR: "",
        },
        Toml.SECTION_INJECT: {
            Toml.KEY_ENABLED: True,
        },
    }


# --- TOML file I/O ---


def parse_toml_text(text: str, path: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        where = path if path is not None else "<string>"
        raise ConfigError(f"Invalid TOML in {where}: {e}", path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a ``favmark.toml`` document.

    Returns:
        TomlTable: The parsed content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}", path) from e
    return parse_toml_text(text, path)


def discover_config_file(project_dir: Path) -> Path | None:
    """Return ``favmark.toml`` in ``project_dir`` when it exists."""
    candidate = project_dir / CONFIG_FILE_NAME
    if candidate.is_file():
        logger.debug("Discovered config file %s", candidate)
        return candidate
    return None


# --- Checked getters ---


def get_table(table: TomlTable, key: str, *, where: str) -> TomlTable:
    """Return the sub-table ``key`` or an empty dict when absent.

    Raises:
        ConfigError: If the value is present but not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Expected a table for [{key}] in {where}, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_checked(table: TomlTable, key: str, *, where: str) -> str | None:
    """Return a string value, None when absent.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"Expected string for {where}.{key}, got {type(value).__name__}: {value!r}")


def get_bool_checked(table: TomlTable, key: str, *, where: str) -> bool | None:
    """Return a boolean value, None when absent.

    Unlike string values, integers are not coerced.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigError(f"Expected bool for {where}.{key}, got {type(value).__name__}: {value!r}")


def warn_unknown_keys(table: TomlTable, *, where: str) -> list[str]:
    """Log a warning for sections and keys FavMark does not know.

    Returns:
        list[str]: Dotted names of the unknown entries.
    """
    unknown: list[str] = []
    for section, content in table.items():
        allowed = Toml.ALLOWED_SECTION_KEYS.get(section)
        if allowed is None:
            unknown.append(section)
            continue
        if isinstance(content, dict):
            unknown.extend(f"{section}.{k}" for k in cast("TomlTable", content) if k not in allowed)
    for name in unknown:
        logger.warning("Ignoring unknown config entry '%s' in %s", name, where)
    return unknown


# --- Rendering ---


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return tomlkit.dumps(toml_dict)


def render_default_config_toml() -> str:
    """Return the annotated default ``favmark.toml`` for ``init-config``.

    The bundled template is returned without its file header. When it cannot be
    read, the runtime defaults are rendered with tomlkit instead.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == HEADER_END_LINE:
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text
