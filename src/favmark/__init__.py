# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark package.

FavMark generates a favicon set from a single source image and rewrites a web
project's metadata or markup so the new icons are referenced. It exposes a
CLI and a small typed API for automation.
"""

from __future__ import annotations
