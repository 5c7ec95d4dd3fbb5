"""In-memory TextEditor implementation.

LineBuffer holds a list of lines, a cursor and a selection, and records one
undo snapshot per outermost transaction. It is what tests and scripts use in
place of a real editor.

Example:
    >>> buffer = LineBuffer("| a |\\n| 1 |", cursor=Point(0, 2))
    >>> TableEditor(buffer).format()
    >>> buffer.text
    '| a   |\\n| --- |\\n| 1   |'
    >>> buffer.undo()
    >>> buffer.text
    '| a |\\n| 1 |'

Thread Safety:
    LineBuffer is not thread-safe. Use one buffer per thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager

from tablero.location import Point, Range


class LineBuffer:
    """A list of lines that implements the TextEditor protocol.

    Args:
        text: Initial content, either one string (split on newlines) or an
            iterable of lines
        cursor: Initial cursor position
        readonly_rows: Rows that refuse table edits

    Attributes:
        lines: Current lines
        operations: Log of structural edits as ``(kind, row, ...)`` tuples,
            in the order they were applied
        history: Undo snapshots, one per outermost transaction

    """

    __slots__ = ("lines", "operations", "history", "readonly_rows", "_selection", "_depth")

    def __init__(
        self,
        text: str | Iterable[str] = "",
        *,
        cursor: Point = Point(0, 0),
        readonly_rows: Iterable[int] = (),
    ) -> None:
        self.lines: list[str] = text.split("\n") if isinstance(text, str) else list(text)
        if not self.lines:
            self.lines = [""]
        self.operations: list[tuple[object, ...]] = []
        self.history: list[tuple[list[str], Range]] = []
        self.readonly_rows = frozenset(readonly_rows)
        self._selection = Range.at(cursor)
        self._depth = 0

    @property
    def text(self) -> str:
        """Buffer content joined with newlines."""
        return "\n".join(self.lines)

    def get_selection_range(self) -> Range:
        return self._selection

    def get_cursor_position(self) -> Point:
        return self._selection.end

    def set_cursor_position(self, pos: Point) -> None:
        self._selection = Range.at(pos)

    def set_selection_range(self, range: Range) -> None:
        self._selection = range

    def get_last_row(self) -> int:
        return len(self.lines) - 1

    def accepts_table_edit(self, row: int) -> bool:
        return row not in self.readonly_rows

    def get_line(self, row: int) -> str:
        return self.lines[row]

    def insert_line(self, row: int, line: str) -> None:
        self.lines.insert(row, line)
        self.operations.append(("insert", row, line))

    def delete_line(self, row: int) -> None:
        del self.lines[row]
        self.operations.append(("delete", row))

    def replace_lines(self, start_row: int, end_row: int, lines: Sequence[str]) -> None:
        self.lines[start_row:end_row] = list(lines)
        self.operations.append(("replace", start_row, end_row, tuple(lines)))

    @contextmanager
    def transact(self) -> Iterator[None]:
        """Group edits into one undo unit. Nested transactions join the outer one."""
        if self._depth == 0:
            self.history.append((list(self.lines), self._selection))
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def undo(self) -> None:
        """Restore the state from before the last transaction.

        Raises:
            IndexError: If there is nothing to undo.
        """
        lines, selection = self.history.pop()
        self.lines = lines
        self._selection = selection
