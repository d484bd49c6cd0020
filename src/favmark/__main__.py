# topmark:header:start
#
#   project      : FavMark
#   file         : __main__.py
#   file_relpath : src/favmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FavMark via ``python -m favmark``.

Delegates to `favmark.cli.main.cli`, the same entry point used by the
``favmark`` console script.

Examples:
    Generate icons and inject references::

        python -m favmark set logo.png
"""

from __future__ import annotations

from favmark.cli.main import cli

if __name__ == "__main__":
    cli()
