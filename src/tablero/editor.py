"""Table editing commands on top of a host text editor.

``TableEditor`` reads the table under the cursor from a ``TextEditor``,
runs the pure pipeline (read -> complete -> alter -> format) and writes the
result back, moving the cursor so it stays on the same logical cell::

    buffer = LineBuffer(["| a | b |", "| 1 | 2 |"], cursor=Point(1, 2))
    TableEditor(buffer).format()
    buffer.lines
    # ['| a   | b   |', '| --- | --- |', '| 1   | 2   |']

Commands are silent no-ops when the cursor is not on a table row.

Smart cursor:
    Cell navigation remembers where a run of ``next_cell`` started, so that
    ``next_row`` goes back to that column (Tab, Tab, Enter behaves like a
    spreadsheet). The state lives in an immutable ``SmartCursor`` that the
    caller holds and passes to each navigation command, one per buffer.

Thread Safety:
    TableEditor keeps no mutable state of its own; thread safety is that of
    the wrapped TextEditor.

"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass, replace
from typing import Protocol

from tablero.alignment import Alignment
from tablero.config import FormatConfig, get_format_config
from tablero.edit_script import apply_edit_script_to_editor, shortest_edit_script
from tablero.focus import shift_focus, translate_focus
from tablero.formatter import CompletedTable, FormattedTable, alter_alignment, complete_table, format_table
from tablero.location import Point, Range
from tablero.nodes import Focus
from tablero.parser import is_table_row, read_table
from tablero.table import RawTable, Table
from tablero.utils.logger import get_logger

logger = get_logger(__name__)


class TextEditor(Protocol):
    """Capabilities a host editor must provide.

    Rows and columns are 0-indexed. Lines are returned without their
    trailing newline.
    """

    def get_cursor_position(self) -> Point:
        """Return the cursor position."""
        ...

    def set_cursor_position(self, pos: Point) -> None:
        """Move the cursor, clearing any selection."""
        ...

    def set_selection_range(self, range: Range) -> None:
        """Select a range of text."""
        ...

    def get_last_row(self) -> int:
        """Return the index of the last line."""
        ...

    def accepts_table_edit(self, row: int) -> bool:
        """Return False for rows that must not be treated as a table (e.g. code blocks)."""
        ...

    def get_line(self, row: int) -> str:
        """Return the text of a line."""
        ...

    def insert_line(self, row: int, line: str) -> None:
        """Insert a line before ``row`` (``row`` may be one past the last line)."""
        ...

    def delete_line(self, row: int) -> None:
        """Delete a line."""
        ...

    def replace_lines(self, start_row: int, end_row: int, lines: Sequence[str]) -> None:
        """Replace lines ``start_row`` to ``end_row - 1`` with ``lines``."""
        ...

    def transact(self) -> AbstractContextManager[None]:
        """Group the edits made inside the context into one undo unit."""
        ...


@dataclass(frozen=True, slots=True)
class SmartCursor:
    """Cell navigation session for one buffer.

    Attributes:
        active: True while a run of navigation commands is in progress
        table_position: Start of the table the session belongs to
        start_focus: Focus where the session started
        last_focus: Focus the last navigation command moved to

    """

    active: bool = False
    table_position: Point | None = None
    start_focus: Focus | None = None
    last_focus: Focus | None = None

    def reset(self) -> SmartCursor:
        """Return an inactive session."""
        return SmartCursor()


@dataclass(frozen=True, slots=True)
class TableInfo:
    """The table under the cursor.

    Attributes:
        range: Buffer span of the table lines
        lines: The table lines as read
        table: Parsed (not yet normalized) table
        focus: Cursor position as a Focus on ``table``

    """

    range: Range
    lines: tuple[str, ...]
    table: RawTable
    focus: Focus

    @property
    def start_row(self) -> int:
        return self.range.start.row

    @property
    def end_row(self) -> int:
        """Row after the last table line."""
        return self.range.end.row + 1


class TableEditor:
    """Editing commands for the table under the cursor.

    Args:
        editor: Host editor adapter
        config: Format configuration (uses context config if None, read at
            each command)

    """

    __slots__ = ("_editor", "_config")

    def __init__(self, editor: TextEditor, config: FormatConfig | None = None) -> None:
        self._editor = editor
        self._config = config

    @property
    def config(self) -> FormatConfig:
        return self._config if self._config is not None else get_format_config()

    def cursor_is_in_table(self) -> bool:
        """Check whether the cursor is on a table row.

        Useful to decide whether table keybindings should be active.
        """
        pos = self._editor.get_cursor_position()
        return self._is_table_row(pos.row)

    def find_table(self) -> TableInfo | None:
        """Find the table under the cursor.

        The table extends up and down from the cursor line over consecutive
        table rows.

        Returns:
            TableInfo, or None if the cursor is not on a table row.
        """
        pos = self._editor.get_cursor_position()
        if not self._is_table_row(pos.row):
            return None
        start_row = pos.row
        while start_row > 0 and self._is_table_row(start_row - 1):
            start_row -= 1
        end_row = pos.row
        last_row = self._editor.get_last_row()
        while end_row < last_row and self._is_table_row(end_row + 1):
            end_row += 1

        lines = tuple(self._editor.get_line(row) for row in range(start_row, end_row + 1))
        table = read_table(lines)
        focus = table.focus_of_position(pos, start_row)
        assert focus is not None
        return TableInfo(
            range=Range(Point(start_row, 0), Point(end_row, len(lines[-1]))),
            lines=lines,
            table=table,
            focus=focus,
        )

    def format(self) -> None:
        """Format the table under the cursor, keeping the cursor on its cell."""
        info = self.find_table()
        if info is None:
            return
        _, formatted, focus = self._reformat(info)
        with self._editor.transact():
            self._update_lines(info, formatted.table.to_lines())
            self._move_to_focus(info.start_row, formatted.table, focus)

    def escape(self, session: SmartCursor = SmartCursor()) -> SmartCursor:
        """Format the table and move the cursor to the line below it.

        An empty line is appended when the table ends the buffer.

        Returns:
            The session, reset once the cursor has left the table.
        """
        info = self.find_table()
        if info is None:
            return session
        completed, formatted, _ = self._reformat(info)
        new_row = info.range.end.row + (2 if completed.delimiter_inserted else 1)
        with self._editor.transact():
            self._update_lines(info, formatted.table.to_lines())
            if new_row > self._editor.get_last_row():
                self._editor.insert_line(new_row, "")
            self._editor.set_cursor_position(Point(new_row, 0))
        return session.reset()

    def align(self, alignment: Alignment) -> None:
        """Set the alignment of the column under the cursor and format.

        Raises:
            AlignmentIndexError: If the cursor is in a margin rather than a column.
        """
        info = self.find_table()
        if info is None:
            return
        _, formatted, focus = self._reformat(info, alignment)
        with self._editor.transact():
            self._update_lines(info, formatted.table.to_lines())
            self._move_to_focus(info.start_row, formatted.table, focus)

    def select_cell(self) -> None:
        """Format the table and select the content of the cell under the cursor."""
        info = self.find_table()
        if info is None:
            return
        _, formatted, focus = self._reformat(info)
        with self._editor.transact():
            self._update_lines(info, formatted.table.to_lines())
            self._select_focus(info.start_row, formatted.table, focus)

    def next_cell(self, session: SmartCursor = SmartCursor()) -> SmartCursor:
        """Select the next cell, adding a column after the last one.

        From the delimiter row, moves to the first body row (adding one if the
        table has none).

        Returns:
            The updated session.
        """
        info = self.find_table()
        if info is None:
            return session
        completed = complete_table(info.table, self.config)
        focus = shift_focus(info.focus, completed.delimiter_inserted)
        session = self._start_session(self._check_session(session, info, focus), info, focus)
        table = completed.table
        last_column = table.width - 1

        if focus.row == 1:
            target = Focus(2, min(max(focus.column, 0), last_column), 0)
            if table.height <= 2:
                table = table.with_row_inserted(len(table.body))
        else:
            column = min(focus.column, last_column) + 1
            if column > last_column:
                table = table.with_column_inserted(table.width)
            target = Focus(focus.row, column, 0)

        target = self._select_target(info, table, target)
        return replace(session, last_focus=target)

    def previous_cell(self, session: SmartCursor = SmartCursor()) -> SmartCursor:
        """Select the previous cell, wrapping to the end of the previous row.

        The delimiter row is skipped. At the first header cell the focus
        stays where it is.

        Returns:
            The updated session.
        """
        info = self.find_table()
        if info is None:
            return session
        completed = complete_table(info.table, self.config)
        focus = shift_focus(info.focus, completed.delimiter_inserted)
        session = self._check_session(session, info, focus)
        table = completed.table
        last_column = table.width - 1
        column = min(focus.column, table.width)

        if focus.row == 1:
            target = Focus(0, min(max(column, 0), last_column), 0)
        elif column > 0:
            target = Focus(focus.row, column - 1, 0)
        elif focus.row == 0:
            target = Focus(0, 0, 0)
        else:
            target = Focus(0 if focus.row == 2 else focus.row - 1, last_column, 0)

        target = self._select_target(info, table, target)
        return replace(session, last_focus=target) if session.active else session

    def next_row(self, session: SmartCursor = SmartCursor()) -> SmartCursor:
        """Select the cell below, adding a row at the bottom of the table.

        With an active session on this table, the column returns to the one
        where the session started.

        Returns:
            The updated session.
        """
        info = self.find_table()
        if info is None:
            return session
        completed = complete_table(info.table, self.config)
        focus = shift_focus(info.focus, completed.delimiter_inserted)
        session = self._start_session(self._check_session(session, info, focus), info, focus)
        table = completed.table

        column = focus.column
        if session.start_focus is not None:
            column = session.start_focus.column
        column = min(max(column, 0), table.width - 1)
        row = 2 if focus.row < 2 else focus.row + 1
        if row >= table.height:
            table = table.with_row_inserted(len(table.body))

        target = self._select_target(info, table, Focus(row, column, 0))
        return replace(session, last_focus=target)

    def _is_table_row(self, row: int) -> bool:
        return is_table_row(self._editor.get_line(row)) and self._editor.accepts_table_edit(row)

    def _reformat(
        self, info: TableInfo, alignment: Alignment | None = None
    ) -> tuple[CompletedTable, FormattedTable, Focus]:
        """Complete, optionally realign, and format; carry the focus along."""
        config = self.config
        completed = complete_table(info.table, config)
        focus = shift_focus(info.focus, completed.delimiter_inserted)
        table = completed.table
        if alignment is not None:
            table = alter_alignment(table, info.focus.column, alignment, config)
        formatted = format_table(table, config)
        return completed, formatted, translate_focus(focus, completed.table, formatted)

    def _select_target(self, info: TableInfo, table: Table, target: Focus) -> Focus:
        """Format ``table`` into the buffer and select the target cell."""
        formatted = format_table(table, self.config)
        cell = formatted.table.get_focused_cell(target)
        if cell is not None:
            target = target.with_offset(cell.padding_left)
        with self._editor.transact():
            self._update_lines(info, formatted.table.to_lines())
            self._select_focus(info.start_row, formatted.table, target)
        return target

    def _check_session(self, session: SmartCursor, info: TableInfo, focus: Focus) -> SmartCursor:
        """Drop the session if the cursor left the table or the cell it was put in."""
        if not session.active:
            return session
        moved = session.table_position != info.range.start or (
            session.last_focus is not None and not focus.pos_equals(session.last_focus)
        )
        if moved:
            logger.debug("Smart cursor reset: cursor moved away from %s", session.last_focus)
            return session.reset()
        return session

    def _start_session(self, session: SmartCursor, info: TableInfo, focus: Focus) -> SmartCursor:
        if session.active:
            return session
        return SmartCursor(active=True, table_position=info.range.start, start_focus=focus)

    def _update_lines(self, info: TableInfo, new_lines: Sequence[str]) -> None:
        """Write the new table lines, touching only the lines that changed.

        Falls back to replacing the whole range when the difference exceeds
        ``config.max_edit_distance``.
        """
        script = shortest_edit_script(info.lines, new_lines, self.config.max_edit_distance)
        if script is not None:
            apply_edit_script_to_editor(self._editor, script, info.start_row)
            return
        logger.debug(
            "Edit distance above %d, replacing rows %d-%d",
            self.config.max_edit_distance,
            info.start_row,
            info.end_row - 1,
        )
        self._editor.replace_lines(info.start_row, info.end_row, new_lines)

    def _move_to_focus(self, start_row: int, table: Table, focus: Focus) -> None:
        pos = table.position_of_focus(focus, start_row)
        if pos is not None:
            self._editor.set_cursor_position(pos)

    def _select_focus(self, start_row: int, table: Table, focus: Focus) -> None:
        """Select the focused cell's content, or just move there if it is empty."""
        selection = table.selection_range_of_focus(focus, start_row)
        if selection is not None:
            self._editor.set_selection_range(selection)
        else:
            self._move_to_focus(start_row, table, focus)
