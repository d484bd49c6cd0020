# topmark:header:start
#
#   project      : FavMark
#   file         : __init__.py
#   file_relpath : src/favmark/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by FavMark front ends (console protocol, exit codes, color)."""
