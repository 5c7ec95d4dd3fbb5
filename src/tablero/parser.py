"""Row and table reading.

Splits raw lines into cells. A ``|`` separates cells unless it is escaped
with a backslash or sits inside a backtick code span::

    | a \\| b | `x | y` |   ->   [" a \\| b ", " `x | y` "]

Cell text is kept verbatim (escapes included) so rendering a row that was
not reformatted reproduces the original line exactly.

Thread Safety:
All functions are pure.

"""

from __future__ import annotations

from collections.abc import Iterable

from tablero.nodes import Cell, Row
from tablero.table import RawTable


def is_table_row(line: str) -> bool:
    """Check whether a line is a table row (starts with ``|`` after indentation)."""
    return line.lstrip().startswith("|")


def split_cells(text: str) -> list[str]:
    """Split a line on its separating pipes.

    The pieces before the first pipe and after the last pipe are included,
    so a line with n separating pipes yields n + 1 pieces.

    Example:
        >>> split_cells("| a | b |")
        ['', ' a ', ' b ', '']
    """
    cells: list[str] = []
    buf: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char == "`":
            # Code span: a run of backticks closed by a run of the same length
            run_end = i
            while run_end < n and text[run_end] == "`":
                run_end += 1
            run_length = run_end - i
            j = run_end
            close_end = -1
            while j < n:
                if text[j] == "`":
                    k = j
                    while k < n and text[k] == "`":
                        k += 1
                    if k - j == run_length:
                        close_end = k
                        break
                    j = k
                else:
                    j += 1
            if close_end >= 0:
                buf.append(text[i:close_end])
                i = close_end
            else:
                buf.append("`")
                i += 1
        elif char == "\\":
            buf.append(text[i : i + 2])
            i += 2
        elif char == "|":
            cells.append("".join(buf))
            buf = []
            i += 1
        else:
            buf.append(char)
            i += 1
    cells.append("".join(buf))
    return cells


def read_row(text: str) -> Row:
    """Read one line into a Row.

    The piece before the first pipe becomes the left margin when it is blank.
    The piece after the last pipe becomes the right margin when it is blank;
    otherwise it is kept as a trailing cell (a row without closing pipe).
    """
    cells = split_cells(text)
    margin_left = ""
    if cells and cells[0].strip() == "":
        margin_left = cells.pop(0)
    margin_right = ""
    if len(cells) > 1 and cells[-1].strip() == "":
        margin_right = cells.pop()
    return Row(tuple(Cell(cell) for cell in cells), margin_left, margin_right)


def read_table(lines: Iterable[str]) -> RawTable:
    """Read consecutive table lines into a RawTable.

    The result is not normalized: rows may be ragged and the delimiter row
    may be missing. Pass it through ``complete_table`` before formatting.

    Example:
        >>> table = read_table(["| a | b |", "|---|:-:|", "| 1 |"])
        >>> table.alignments
        (<Alignment.NONE: 'none'>, <Alignment.CENTER: 'center'>)
    """
    return RawTable(tuple(read_row(line) for line in lines))
