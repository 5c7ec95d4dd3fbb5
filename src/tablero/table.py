"""Raw and normalized table models.

A table moves through two shapes:

- RawTable: the rows exactly as read from the buffer. Rows may have
  different lengths and the delimiter row may be missing.
- Table: the normalized shape. Every row has ``width`` cells and there is
  one alignment per column. Only ``complete_table`` turns a RawTable into
  a Table; building a Table from ragged data is a programming error.

Both shapes share the coordinate queries that translate between buffer
positions and Focus values, since both are laid out line by line.

Thread Safety:
Tables are frozen and rebuilt for every editing command.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tablero.alignment import Alignment, delimiter_text
from tablero.errors import TableInvariantError
from tablero.location import Point, Range
from tablero.nodes import Cell, Focus, Row

# Dash count used when a normalized table has to synthesize its delimiter row
DEFAULT_DELIMITER_WIDTH = 3


class _LineLayout:
    """Coordinate queries over a line-ordered sequence of rows.

    Required Host Attributes:
        - rows: tuple[Row, ...] in buffer order

    """

    __slots__ = ()

    rows: tuple[Row, ...]

    @property
    def height(self) -> int:
        """Number of lines the table occupies."""
        return len(self.rows)

    def to_lines(self) -> list[str]:
        """Render every row back to a line of text."""
        return [row.to_text() for row in self.rows]

    def focus_of_position(self, point: Point, start_row: int) -> Focus | None:
        """Convert a buffer position into a Focus.

        A cell owns the raw columns from just after its left pipe up to and
        including its right pipe. Columns before the first pipe belong to the
        left margin (column -1); columns after the last pipe get column
        ``width``.

        Args:
            point: Cursor position in the buffer
            start_row: Buffer row of the first table line

        Returns:
            Focus, or None if the point is outside the table's lines.
        """
        row_index = point.row - start_row
        if not 0 <= row_index < len(self.rows):
            return None
        row = self.rows[row_index]
        column_pos = len(row.margin_left) + 1
        if point.column < column_pos:
            return Focus(row_index, -1, point.column)
        column = 0
        for cell in row.cells:
            if column_pos + len(cell.raw) + 1 > point.column:
                break
            column_pos += len(cell.raw) + 1
            column += 1
        return Focus(row_index, column, point.column - column_pos)

    def get_focused_cell(self, focus: Focus) -> Cell | None:
        """Return the cell under the focus, or None outside the grid."""
        if not 0 <= focus.row < len(self.rows):
            return None
        return self.rows[focus.row].cell_at(focus.column)

    def position_of_focus(self, focus: Focus, start_row: int) -> Point | None:
        """Convert a Focus back into a buffer position.

        Returns None if the focused row does not exist.
        """
        if not 0 <= focus.row < len(self.rows):
            return None
        row = self.rows[focus.row]
        row_pos = focus.row + start_row
        if focus.column < 0:
            return Point(row_pos, focus.offset)
        column_pos = row.cell_start(min(focus.column, row.width))
        return Point(row_pos, column_pos + focus.offset)

    def selection_range_of_focus(self, focus: Focus, start_row: int) -> Range | None:
        """Range covering the focused cell's content.

        Returns None when there is nothing to select: the focus is outside
        the grid or the cell is empty. Callers fall back to
        ``position_of_focus``.
        """
        cell = self.get_focused_cell(focus)
        if cell is None or cell.content == "":
            return None
        row = self.rows[focus.row]
        row_pos = focus.row + start_row
        column_pos = row.cell_start(focus.column) + cell.padding_left
        return Range(
            Point(row_pos, column_pos),
            Point(row_pos, column_pos + len(cell.content)),
        )


@dataclass(frozen=True, slots=True)
class RawTable(_LineLayout):
    """Table as read from the buffer, before any repair.

    The second row is treated as the delimiter row when every one of its
    cells matches the delimiter grammar. Without one, there is no header and
    every row is a body row.

    """

    rows: tuple[Row, ...]

    @property
    def has_delimiter(self) -> bool:
        return len(self.rows) >= 2 and self.rows[1].is_delimiter

    @property
    def header(self) -> Row | None:
        return self.rows[0] if self.has_delimiter else None

    @property
    def delimiter(self) -> Row | None:
        return self.rows[1] if self.has_delimiter else None

    @property
    def body(self) -> tuple[Row, ...]:
        return self.rows[2:] if self.has_delimiter else self.rows

    @property
    def alignments(self) -> tuple[Alignment | None, ...]:
        """Alignments from the delimiter row; may be shorter than the widest row."""
        delimiter = self.delimiter
        if delimiter is None:
            return ()
        return tuple(cell.alignment for cell in delimiter.cells)


@dataclass(frozen=True, slots=True)
class Table(_LineLayout):
    """Normalized table.

    Invariants (checked on construction):
        - width >= 1
        - header (if any) and every body row have exactly ``width`` cells
        - ``len(alignments) == width``
        - a stored delimiter row has exactly ``width`` cells
        - a table without header has at least one body row

    Attributes:
        header: Header row, or None
        body: Body rows
        alignments: One entry per column; None means unspecified
        delimiter: Raw layout of the delimiter row. None synthesizes one from
            the alignments. Kept so a cursor on the delimiter line can be
            tracked through formatting.

    """

    header: Row | None
    body: tuple[Row, ...]
    alignments: tuple[Alignment | None, ...]
    delimiter: Row | None = None
    rows: tuple[Row, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.header is None and not self.body:
            raise TableInvariantError("a table without header needs at least one body row")
        first = self.header if self.header is not None else self.body[0]
        width = first.width
        if width == 0:
            raise TableInvariantError("a table needs at least one column")
        if self.header is not None and self.header.width != width:
            raise TableInvariantError(f"header has {self.header.width} cells, expected {width}", row=0)
        for index, row in enumerate(self.body):
            if row.width != width:
                raise TableInvariantError(f"body row has {row.width} cells, expected {width}", row=index)
        if len(self.alignments) != width:
            raise TableInvariantError(f"{len(self.alignments)} alignments given for {width} columns")
        if self.delimiter is not None and self.delimiter.width != width:
            raise TableInvariantError(f"delimiter row has {self.delimiter.width} cells, expected {width}")

        if self.header is not None:
            rows = (self.header, self.delimiter_row, *self.body)
        else:
            rows = self.body
        object.__setattr__(self, "rows", rows)

    @classmethod
    def create(
        cls,
        header: Row | Sequence[str] | None,
        body: Sequence[Row | Sequence[str]],
        alignments: Sequence[Alignment | None],
        *,
        delimiter: Row | None = None,
    ) -> Table:
        """Build a normalized table, accepting rows as Row or lists of strings.

        Raises:
            TableInvariantError: If the rows and alignments are not rectangular.

        Example:
            >>> table = Table.create(["name", "color"], [["apple", "red"]], [None, None])
            >>> table.width
            2
        """
        return cls(
            header=_as_row(header) if header is not None else None,
            body=tuple(_as_row(row) for row in body),
            alignments=tuple(alignments),
            delimiter=delimiter,
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self.alignments)

    @property
    def delimiter_row(self) -> Row:
        """The delimiter row, synthesized from alignments when not stored."""
        if self.delimiter is not None:
            return self.delimiter
        first = self.header if self.header is not None else self.body[0]
        cells = tuple(
            Cell(delimiter_text(alignment or Alignment.NONE, DEFAULT_DELIMITER_WIDTH))
            for alignment in self.alignments
        )
        return Row(cells, first.margin_left, "")

    def with_row_inserted(self, index: int) -> Table:
        """Return a copy with an empty body row inserted at body index ``index``."""
        first = self.header if self.header is not None else self.body[0]
        empty = Row(tuple(Cell("") for _ in range(self.width)), first.margin_left, "")
        body = (*self.body[:index], empty, *self.body[index:])
        return Table(self.header, body, self.alignments, self.delimiter)

    def with_column_inserted(self, index: int) -> Table:
        """Return a copy with an empty, unaligned column inserted at ``index``."""

        def insert(row: Row, cell: Cell) -> Row:
            cells = (*row.cells[:index], cell, *row.cells[index:])
            return Row(cells, row.margin_left, row.margin_right)

        header = insert(self.header, Cell("")) if self.header is not None else None
        body = tuple(insert(row, Cell("")) for row in self.body)
        alignments = (*self.alignments[:index], None, *self.alignments[index:])
        delimiter = None
        if self.delimiter is not None:
            delimiter = insert(
                self.delimiter, Cell(delimiter_text(Alignment.NONE, DEFAULT_DELIMITER_WIDTH))
            )
        return Table(header, body, alignments, delimiter)


def _as_row(value: Row | Sequence[str]) -> Row:
    if isinstance(value, Row):
        return value
    return Row(tuple(Cell(text) for text in value))
