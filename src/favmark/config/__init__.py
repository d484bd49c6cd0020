# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for FavMark.

Submodules:
    - `favmark.config.logging`: TRACE-aware logging setup.
    - `favmark.config.keys`: TOML section and key names.
    - `favmark.config.io`: TOML loading and rendering with tomlkit.
    - `favmark.config.model`: `MutableConfig` builder and frozen `Config`.

The package itself re-exports nothing so that ``favmark.config.logging`` can
be imported from any module without pulling in the config model.
"""
