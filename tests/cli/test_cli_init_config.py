# topmark:header:start
#
#   project      : FavMark
#   file         : test_cli_init_config.py
#   file_relpath : tests/cli/test_cli_init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `init-config` prints a usable starter configuration."""

from __future__ import annotations

import tomlkit

from favmark.config.io import load_defaults_dict
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_init_config_parses_to_defaults() -> None:
    """The printed document is valid TOML holding the default values."""
    result = run_cli(["--no-color", "init-config"])

    assert_SUCCESS(result)
    assert "topmark:header" not in result.output
    assert tomlkit.parse(result.output).unwrap() == load_defaults_dict()


@mark_cli
def test_init_config_verbose_banners() -> None:
    """With ``-v`` the document is framed by comment banners."""
    result = run_cli(["--no-color", "-v", "init-config"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "# === BEGIN ==="
    assert lines[-1] == "# === END ==="
