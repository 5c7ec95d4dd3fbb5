"""Value types for table rows and cursor focus.

All nodes are frozen dataclasses: transformations return new instances
and never mutate in place.

Node Types:
- Cell: one pipe-delimited cell, raw text including its padding
- Row: an ordered sequence of cells plus the text outside the outer pipes
- Focus: a logical cursor coordinate (row, column, offset) that survives
  re-padding

Thread Safety:
All nodes are frozen and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tablero.alignment import Alignment, is_delimiter_text


@dataclass(frozen=True, slots=True)
class Cell:
    """Table cell.

    Markdown: ``|  content  |`` gives ``Cell(raw="  content  ")``

    The raw text is kept verbatim so the cursor offset inside it can be
    translated to an offset inside the trimmed content and back.

    """

    raw: str

    @property
    def content(self) -> str:
        """Cell text with surrounding whitespace removed."""
        return self.raw.strip()

    @property
    def padding_left(self) -> int:
        """Number of characters before the content.

        An empty cell with any raw text counts one padding character, so a
        cursor in a blank cell lands after the first space.
        """
        content = self.content
        if content == "":
            return 0 if self.raw == "" else 1
        return len(self.raw) - len(self.raw.lstrip())

    @property
    def padding_right(self) -> int:
        """Number of characters after the content."""
        return len(self.raw) - len(self.content) - self.padding_left

    @property
    def is_delimiter(self) -> bool:
        """True if this cell matches the delimiter cell grammar."""
        return is_delimiter_text(self.raw)

    @property
    def alignment(self) -> Alignment | None:
        """Alignment encoded by a delimiter cell, None for content cells."""
        return Alignment.from_delimiter(self.raw)

    def compute_content_offset(self, raw_offset: int) -> int:
        """Map an offset in the raw text to an offset in the content.

        Offsets inside the left padding clamp to 0, offsets inside the right
        padding clamp to the content length.
        """
        content = self.content
        if content == "":
            return 0
        padding_left = self.padding_left
        if raw_offset < padding_left:
            return 0
        if raw_offset < padding_left + len(content):
            return raw_offset - padding_left
        return len(content)

    def compute_raw_offset(self, content_offset: int) -> int:
        """Map an offset in the content to an offset in the raw text."""
        return content_offset + self.padding_left


@dataclass(frozen=True, slots=True)
class Row:
    """Table row.

    Markdown: ``  | a | b |  `` gives margin_left ``"  "``, cells
    ``(" a ", " b ")`` and margin_right ``"  "``.

    """

    cells: tuple[Cell, ...]
    margin_left: str = ""
    margin_right: str = ""

    @property
    def width(self) -> int:
        """Number of cells."""
        return len(self.cells)

    @property
    def is_delimiter(self) -> bool:
        """True if every cell is a delimiter cell (and there is at least one)."""
        return bool(self.cells) and all(cell.is_delimiter for cell in self.cells)

    def cell_at(self, index: int) -> Cell | None:
        """Return the cell at index, or None outside ``[0, width)``."""
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return None

    def cell_start(self, index: int) -> int:
        """Raw column where cell ``index`` starts (just after its left pipe).

        Indices past the last cell resolve to the column after the closing
        pipe, where the right margin starts.
        """
        column = len(self.margin_left) + 1
        for cell in self.cells[: max(0, index)]:
            column += len(cell.raw) + 1
        return column

    def to_text(self) -> str:
        """Render the row back to a single line."""
        if not self.cells:
            return self.margin_left
        return f"{self.margin_left}|{'|'.join(cell.raw for cell in self.cells)}|{self.margin_right}"


@dataclass(frozen=True, slots=True)
class Focus:
    """Logical cursor position inside a table.

    Attributes:
        row: Line index relative to the first table line (header 0,
            delimiter 1, first body row 2)
        column: Cell index; -1 is the left margin, ``width`` or more is the
            right margin
        offset: Character offset inside the focused cell's raw text (or
            inside the margin when column is out of range)

    """

    row: int
    column: int
    offset: int

    def with_row(self, row: int) -> Focus:
        return replace(self, row=row)

    def with_column(self, column: int) -> Focus:
        return replace(self, column=column)

    def with_offset(self, offset: int) -> Focus:
        return replace(self, offset=offset)

    def pos_equals(self, other: Focus) -> bool:
        """True if both focuses point at the same cell, whatever the offset."""
        return self.row == other.row and self.column == other.column
