# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FavMark sub-commands, one module per command."""
