# topmark:header:start
#
#   project      : FavMark
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, checked getters and default rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from favmark.config.io import (
    ConfigError,
    discover_config_file,
    get_bool_checked,
    get_string_checked,
    get_table,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_text,
    render_default_config_toml,
    warn_unknown_keys,
)
from favmark.config.keys import Toml

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_cover_every_known_key() -> None:
    """The runtime defaults define exactly the allowed sections and keys."""
    defaults = load_defaults_dict()

    assert set(defaults) == set(Toml.ALLOWED_SECTION_KEYS)
    for section, keys in Toml.ALLOWED_SECTION_KEYS.items():
        assert set(defaults[section]) == keys


def test_defaults_are_fresh_copies() -> None:
    """Mutating one defaults dict does not leak into the next."""
    first = load_defaults_dict()
    first[Toml.SECTION_REFERENCES][Toml.KEY_BASE_URL] = "/changed/"

    assert load_defaults_dict()[Toml.SECTION_REFERENCES][Toml.KEY_BASE_URL] == "/"


def test_parse_invalid_toml_raises() -> None:
    """Syntax errors become ConfigError."""
    with pytest.raises(ConfigError, match="Invalid TOML"):
        parse_toml_text("[references\nbase_url = 1")


def test_load_missing_file_raises(tmp_path: Path) -> None:
    """An unreadable file is reported with its path."""
    missing = tmp_path / "favmark.toml"

    with pytest.raises(ConfigError) as excinfo:
        load_toml_dict(missing)

    assert excinfo.value.path == missing


def test_discover_config_file(tmp_path: Path) -> None:
    """``favmark.toml`` is discovered only when it exists."""
    assert discover_config_file(tmp_path) is None

    (tmp_path / "favmark.toml").write_text("", "utf-8")

    assert discover_config_file(tmp_path) == tmp_path / "favmark.toml"


def test_checked_getters() -> None:
    """Absent values are None; present values must have the right type."""
    table = {"s": "x", "b": True, "n": 1, "t": {"k": "v"}}

    assert get_string_checked(table, "s", where="t") == "x"
    assert get_string_checked(table, "missing", where="t") is None
    assert get_bool_checked(table, "b", where="t") is True
    assert get_table(table, "t", where="t") == {"k": "v"}
    assert get_table(table, "missing", where="t") == {}

    with pytest.raises(ConfigError, match="Expected string"):
        get_string_checked(table, "n", where="t")
    with pytest.raises(ConfigError, match="Expected bool"):
        get_bool_checked(table, "n", where="t")
    with pytest.raises(ConfigError, match="Expected a table"):
        get_table(table, "s", where="t")


def test_warn_unknown_keys() -> None:
    """Unknown sections and keys are reported with dotted names."""
    table = {
        "references": {"base_url": "/", "colour": "red"},
        "extras": {"x": 1},
    }

    assert warn_unknown_keys(table, where="test") == ["references.colour", "extras"]


def test_rendered_default_config_matches_defaults() -> None:
    """The ``init-config`` template parses back to the runtime defaults."""
    text = render_default_config_toml()

    assert not text.startswith("# topmark:header")
    assert "[references]" in text
    assert tomlkit.parse(text).unwrap() == load_defaults_dict()
