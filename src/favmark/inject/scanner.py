# topmark:header:start
#
#   project      : FavMark
#   file         : scanner.py
#   file_relpath : src/favmark/inject/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimiter-aware scanning of object-literal bodies.

The scanner is a small automaton over three states: *normal*, *in-string*
(one of ``'``, ``"`` or `` ` ``) and *escaped*. Outside strings it tracks the
nesting depth of ``{}``, ``[]`` and ``()``; inside strings it only tracks the
escape flag and the closing delimiter, so structural characters embedded in
string literals never affect depth.

Depth is always relative to the start of the scanned region: a property is
"top level" when every counter is zero at its first character.

Comments are not recognized. A ``//`` or ``/* */`` comment containing quotes or
brackets can confuse the depth count; callers treat the resulting miss as
"not found".

Example:
    ```python
    body = 'title: "x", icons: { icon: [1, 2] }, other: 1'
    start = find_property_start(body, "icons")   # 12
    end = find_property_end(body, start)         # just past "},"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

IDENTIFIER_CHARS: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$"
)
QUOTE_CHARS: Final[frozenset[str]] = frozenset("'\"`")


@dataclass
class ScanCursor:
    """Mutable scan state for one pass over a buffer.

    Attributes:
        curly (int): Depth of ``{`` minus ``}`` seen outside strings.
        square (int): Depth of ``[`` minus ``]`` seen outside strings.
        paren (int): Depth of ``(`` minus ``)`` seen outside strings.
        quote (str | None): Active string delimiter, or None outside strings.
        escaped (bool): True when the previous in-string character was a backslash.
    """

    curly: int = 0
    square: int = 0
    paren: int = 0
    quote: str | None = None
    escaped: bool = False

    @property
    def in_string(self) -> bool:
        """Whether the cursor is inside a string literal."""
        return self.quote is not None

    @property
    def at_top_level(self) -> bool:
        """Whether the cursor is outside strings with all counters at zero."""
        return self.quote is None and self.curly == 0 and self.square == 0 and self.paren == 0

    def feed(self, ch: str) -> None:
        """Advance the automaton by one character.

        Args:
            ch (str): The next character of the buffer.
        """
        if self.quote is not None:
            if self.escaped:
                self.escaped = False
            elif ch == "\\":
                self.escaped = True
            elif ch == self.quote:
                self.quote = None
            return

        if ch in QUOTE_CHARS:
            self.quote = ch
        elif ch == "{":
            self.curly += 1
        elif ch == "}":
            self.curly -= 1
        elif ch == "[":
            self.square += 1
        elif ch == "]":
            self.square -= 1
        elif ch == "(":
            self.paren += 1
        elif ch == ")":
            self.paren -= 1


@dataclass(frozen=True, slots=True)
class PropertySpan:
    """Half-open ``[start, end)`` range of one property inside a buffer.

    ``start`` is the first character of the property name; ``end`` is just past
    the separating comma, or the end of the buffer for a trailing property.
    """

    start: int
    end: int


def _is_identifier_char(text: str, index: int) -> bool:
    return 0 <= index < len(text) and text[index] in IDENTIFIER_CHARS


def _colon_follows(text: str, index: int) -> bool:
    j = index
    while j < len(text) and text[j].isspace():
        j += 1
    return j < len(text) and text[j] == ":"


def find_property_start(text: str, name: str) -> int | None:
    """Return the offset of the leftmost top-level ``name:`` property in ``text``.

    A candidate is accepted only when all nesting counters are zero, the cursor
    is outside any string, ``name`` is not part of a longer identifier on
    either side, and the next non-whitespace character after it is ``:``.

    Args:
        text (str): The object-literal body to scan.
        name (str): The property name to look for.

    Returns:
        int | None: Offset of the first character of the name, or None if absent.
    """
    if not name:
        return None
    cursor = ScanCursor()
    size = len(name)
    for i, ch in enumerate(text):
        if (
            cursor.at_top_level
            and ch == name[0]
            and text.startswith(name, i)
            and not _is_identifier_char(text, i - 1)
            and not _is_identifier_char(text, i + size)
            and _colon_follows(text, i + size)
        ):
            return i
        cursor.feed(ch)
    return None


def find_property_end(text: str, start: int) -> int:
    """Return the offset just past the value of the property starting at ``start``.

    Scanning resumes after the first ``:`` following ``start`` and stops at the
    first ``,`` seen at depth zero outside strings.

    Args:
        text (str): The object-literal body.
        start (int): Offset of the property name, as returned by `find_property_start`.

    Returns:
        int: Offset just past the terminating comma, or ``len(text)`` when the
            value runs to the end of the buffer.
    """
    colon = text.find(":", start)
    if colon == -1:
        return len(text)
    cursor = ScanCursor()
    for i in range(colon + 1, len(text)):
        ch = text[i]
        if ch == "," and cursor.at_top_level:
            return i + 1
        cursor.feed(ch)
    return len(text)


def find_closing_brace(text: str, body_start: int) -> int | None:
    """Return the offset of the ``}`` that closes an object literal.

    Args:
        text (str): The buffer holding the object literal.
        body_start (int): Offset just past the opening ``{``.

    Returns:
        int | None: Offset of the matching ``}``, or None when the literal is
            unterminated.
    """
    cursor = ScanCursor()
    for i in range(body_start, len(text)):
        ch = text[i]
        if ch == "}" and not cursor.in_string and cursor.curly == 0:
            return i
        cursor.feed(ch)
    return None


def property_span(text: str, name: str) -> PropertySpan | None:
    """Return the span of the leftmost top-level ``name`` property, if any."""
    start = find_property_start(text, name)
    if start is None:
        return None
    return PropertySpan(start=start, end=find_property_end(text, start))
