"""Column alignment and formatting mode enums.

Alignment is stored per column and encoded in the delimiter row:

| Syntax | Alignment |
|--------|-----------|
| ``---`` | NONE |
| ``:--`` | LEFT |
| ``--:`` | RIGHT |
| ``:-:`` | CENTER |

"""

from __future__ import annotations

import re
from enum import Enum

_DELIMITER_PATTERN = re.compile(r"^\s*:?-+:?\s*$")


class Alignment(Enum):
    """Column alignment.

    NONE means the delimiter cell carries no colon marker; the formatter
    decides how such columns are padded.
    """

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def from_delimiter(cls, text: str) -> Alignment | None:
        """Parse a delimiter cell into its alignment.

        Returns None if the text is not a delimiter cell.

        Example:
            >>> Alignment.from_delimiter(" :---: ")
            <Alignment.CENTER: 'center'>
            >>> Alignment.from_delimiter("abc") is None
            True
        """
        if not is_delimiter_text(text):
            return None
        text = text.strip()
        if text.startswith(":"):
            return cls.CENTER if text.endswith(":") else cls.LEFT
        if text.endswith(":"):
            return cls.RIGHT
        return cls.NONE


class FormatType(Enum):
    """How aggressively a table is re-laid out.

    NORMAL aligns every column to a common width. WEAK only normalizes cell
    padding to a single space, leaving column widths ragged.
    """

    NORMAL = "normal"
    WEAK = "weak"


def is_delimiter_text(text: str) -> bool:
    """Check whether a raw cell matches the delimiter cell grammar."""
    return _DELIMITER_PATTERN.match(text) is not None


def delimiter_text(alignment: Alignment, width: int) -> str:
    """Render a padded delimiter cell for a column of the given width.

    The result is always ``width + 2`` characters long, the same as a padded
    content cell of that column.

    Example:
        >>> delimiter_text(Alignment.RIGHT, 3)
        ' ---:'
    """
    bar = "-" * width
    match alignment:
        case Alignment.LEFT:
            return f":{bar} "
        case Alignment.RIGHT:
            return f" {bar}:"
        case Alignment.CENTER:
            return f":{bar}:"
        case _:
            return f" {bar} "
