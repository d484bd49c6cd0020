# topmark:header:start
#
#   project      : FavMark
#   file         : colored_enum.py
#   file_relpath : src/favmark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enum used for status reporting.

`ColoredStrEnum` keeps the enum value a plain string and stores a colorizer
(typically a yachalk style) next to it, so outcome enums can render
themselves for the terminal without the rest of the code knowing about
colors.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.value            # 'ok'
    Outcome.OK.color("done")    # green "done"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. `yachalk.ChalkBuilder`)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated, ``sep``-joined arguments."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value of the member.
            color (Colorizer): Callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The new member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def colored(self) -> str:
        """Return the member's value rendered with its own colorizer."""
        return self._color(self._value_)
