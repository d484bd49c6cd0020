# topmark:header:start
#
#   project      : FavMark
#   file         : remover.py
#   file_relpath : src/favmark/inject/remover.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Remove top-level properties from an object-literal body.

`remove_property` applies the scanner repeatedly until no top-level
occurrence of the property remains. Untouched properties keep their exact text
and order; only the removed property's own line (or, for a property sharing a
line with others, the property and the blanks after it) disappears.
"""

from __future__ import annotations

from favmark.config.logging import get_logger
from favmark.inject.scanner import property_span

logger = get_logger(__name__)

_BLANKS = " \t"


def _removal_range(text: str, start: int, end: int) -> tuple[int, int]:
    """Widen ``[start, end)`` to the whitespace that belongs to the property."""
    line_start = start
    while line_start > 0 and text[line_start - 1] in _BLANKS:
        line_start -= 1
    owns_line_start = line_start == 0 or text[line_start - 1] == "\n"

    tail = end
    while tail < len(text) and text[tail] in _BLANKS:
        tail += 1

    if tail == len(text):
        return (line_start, tail)
    if owns_line_start:
        if text[tail] == "\n":
            return (line_start, tail + 1)
        if text.startswith("\r\n", tail):
            return (line_start, tail + 2)
    # Something follows on the same line: keep the indentation for it.
    return (start, tail)


def remove_property(body: str, name: str) -> str:
    """Return ``body`` with every top-level ``name`` property removed.

    Args:
        body (str): Object-literal body text (without the enclosing braces).
        name (str): Property name to remove.

    Returns:
        str: The body without the property; unchanged when it is absent.
    """
    text = body
    while True:
        span = property_span(text, name)
        if span is None:
            return text
        cut_start, cut_end = _removal_range(text, span.start, span.end)
        logger.trace("Removing property %r at [%d, %d)", name, cut_start, cut_end)
        text = text[:cut_start] + text[cut_end:]
