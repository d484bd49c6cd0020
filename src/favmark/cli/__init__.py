# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for FavMark (entry point: `favmark.cli.main.cli`)."""
