# topmark:header:start
#
#   project      : FavMark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model and its merge policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from favmark.config.io import ConfigError
from favmark.config.model import MutableConfig
from favmark.inject.references import FaviconReferenceSet

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, "utf-8")
    return path


def test_defaults_freeze() -> None:
    """Defaults produce the canonical reference set and manifest values."""
    config = MutableConfig.from_defaults().freeze()

    assert config.base_url == "/"
    assert config.theme_color == "#ffffff"
    assert config.display == "standalone"
    assert config.output_dir is None
    assert config.inject_enabled
    assert config.config_files == ("<defaults>",)
    assert config.references() == FaviconReferenceSet.build()


def test_empty_builder_freezes_to_defaults() -> None:
    """Unset values fall back to the defaults when freezing."""
    config = MutableConfig().freeze()

    assert config.base_url == "/"
    assert config.background_color == "#ffffff"
    assert config.display == "standalone"
    assert config.inject_enabled
    assert config.config_files == ()


def test_project_file_overrides_defaults(tmp_path: Path) -> None:
    """The project's ``favmark.toml`` is merged over the defaults."""
    _write(
        tmp_path / "favmark.toml",
        '[references]\nbase_url = "/static/"\ntheme_color = "#101010"\n'
        '[manifest]\nname = "Shop"\n',
    )

    config = MutableConfig.load_merged(tmp_path).freeze()

    assert config.base_url == "/static/"
    assert config.theme_color == "#101010"
    assert config.manifest_name == "Shop"
    assert config.manifest_short_name == ""
    assert config.config_files == ("<defaults>", tmp_path / "favmark.toml")
    assert config.manifest_settings().base_url == "/static/"
    assert config.references().manifest_href == "/static/site.webmanifest"


def test_explicit_files_win_in_order(tmp_path: Path) -> None:
    """``--config`` files are merged after the project file, last wins."""
    _write(tmp_path / "favmark.toml", '[references]\ntheme_color = "#111111"\n')
    first = _write(tmp_path / "a.toml", '[references]\ntheme_color = "#222222"\n')
    second = _write(tmp_path / "b.toml", '[manifest]\ndisplay = "browser"\n')

    config = MutableConfig.load_merged(tmp_path, [first, second]).freeze()

    assert config.theme_color == "#222222"
    assert config.display == "browser"
    assert config.config_files[-2:] == (first, second)


def test_no_config_skips_project_file(tmp_path: Path) -> None:
    """``no_config`` ignores the discovered ``favmark.toml``."""
    _write(tmp_path / "favmark.toml", '[references]\nbase_url = "/x/"\n')

    config = MutableConfig.load_merged(tmp_path, no_config=True).freeze()

    assert config.base_url == "/"
    assert config.config_files == ("<defaults>",)


def test_output_dir_relative_to_config_file(tmp_path: Path) -> None:
    """``generate.output_dir`` resolves against the declaring file's directory."""
    cfg = _write(tmp_path / "conf" / "favmark.toml", '[generate]\noutput_dir = "../static"\n')

    draft = MutableConfig.from_toml_file(cfg)

    assert draft.output_dir == (tmp_path / "static").resolve()


def test_empty_output_dir_resets(tmp_path: Path) -> None:
    """An empty ``output_dir`` means the public directory again."""
    draft = MutableConfig(output_dir=tmp_path)

    draft.merge_toml({"generate": {"output_dir": ""}})

    assert draft.output_dir is None


def test_inject_can_be_disabled(tmp_path: Path) -> None:
    """``inject.enabled = false`` survives merging."""
    _write(tmp_path / "favmark.toml", "[inject]\nenabled = false\n")

    assert not MutableConfig.load_merged(tmp_path).freeze().inject_enabled


def test_invalid_display_rejected() -> None:
    """Unknown display modes are configuration errors."""
    draft = MutableConfig.from_defaults().merge_toml({"manifest": {"display": "kiosk"}})

    with pytest.raises(ConfigError, match="display mode"):
        draft.freeze()


def test_wrong_type_rejected(tmp_path: Path) -> None:
    """A non-string value for a string key is reported."""
    cfg = _write(tmp_path / "favmark.toml", "[references]\nbase_url = 3\n")

    with pytest.raises(ConfigError, match="references.base_url"):
        MutableConfig.load_merged(tmp_path)
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_file(cfg)



def test_thaw_round_trip() -> None:
    """Thawing then freezing a config yields an equal config."""
    config = MutableConfig.from_defaults().merge_toml({"manifest": {"name": "X"}}).freeze()

    assert config.thaw().freeze() == config
