"""Table completion, formatting and alignment changes.

Three pure steps, composed differently by each editing command:

1. ``complete_table``: repair a RawTable into a normalized Table (pad
   ragged rows, synthesize a missing delimiter row).
2. ``alter_alignment``: change one column's alignment.
3. ``format_table``: pad every cell to its column width.

``format_table`` cannot tell whether the delimiter row was missing in the
buffer; ``complete_table`` reports that so the caller can shift the focus.

Example:
    >>> raw = read_table(["| a | b |", "| 1 | 2 |"])
    >>> completed = complete_table(raw)
    >>> completed.delimiter_inserted
    True
    >>> format_table(completed.table).table.to_lines()
    ['| a   | b   |', '| --- | --- |', '| 1   | 2   |']

Thread Safety:
All functions are pure.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tablero.alignment import Alignment, FormatType, delimiter_text
from tablero.config import FormatConfig, get_format_config
from tablero.errors import AlignmentIndexError, TableInvariantError
from tablero.nodes import Cell, Row
from tablero.table import RawTable, Table
from tablero.width import display_width


@dataclass(frozen=True, slots=True)
class CompletedTable:
    """Result of ``complete_table``.

    Attributes:
        table: The normalized table
        delimiter_inserted: True if the source had no delimiter row. Any
            focus below the header must move down one row.

    """

    table: Table
    delimiter_inserted: bool


@dataclass(frozen=True, slots=True)
class FormattedTable:
    """Result of ``format_table``.

    Attributes:
        table: The formatted table
        margin_left: Text prefixed to every rendered line

    """

    table: Table
    margin_left: str


def complete_table(table: RawTable | Table, config: FormatConfig | None = None) -> CompletedTable:
    """Repair a table into normalized form.

    The width is the length of the longest row (delimiter row included).
    Shorter rows get empty cells; the right margin of a short row becomes the
    text of its first new cell. Without a delimiter row, the first row is
    promoted to header and an unaligned delimiter row is synthesized.

    Args:
        table: Table read from the buffer. A normalized table with a header
            is already complete and is returned unchanged. A headerless one
            gets its first body row promoted to header, keeping its
            alignments and cell text as they are.
        config: Format configuration (uses context config if None)

    Returns:
        CompletedTable with the normalized table.

    Raises:
        TableInvariantError: If the table has no rows.
    """
    if config is None:
        config = get_format_config()
    if isinstance(table, Table):
        if table.header is not None:
            return CompletedTable(table, False)
        return CompletedTable(_promote_header(table, config), True)
    if not table.rows:
        raise TableInvariantError("cannot complete an empty table")

    delimiter = table.delimiter
    header = table.rows[0]
    body = table.body if delimiter is not None else table.rows[1:]
    width = max(row.width for row in (header, *body))
    if delimiter is not None:
        width = max(width, delimiter.width)
    width = max(width, 1)

    empty_delimiter = Cell(delimiter_text(Alignment.NONE, config.min_delimiter_width))
    if delimiter is not None:
        delimiter_row = _extend_row(delimiter, width, lambda _: empty_delimiter)
    else:
        delimiter_row = Row(tuple(empty_delimiter for _ in range(width)), header.margin_left, "")

    def fill(row: Row) -> Row:
        return _extend_row(row, width, lambda j: Cell(row.margin_right if j == row.width else ""))

    normalized = Table(
        header=fill(header),
        body=tuple(fill(row) for row in body),
        alignments=tuple(cell.alignment for cell in delimiter_row.cells),
        delimiter=delimiter_row,
    )
    return CompletedTable(normalized, delimiter is None)


def format_table(table: Table, config: FormatConfig | None = None) -> FormattedTable:
    """Pad every cell of a normalized table to its column width.

    Column width is the widest display width in the column (header and
    body), but never less than ``config.min_delimiter_width``. Columns with
    no alignment marker use ``config.default_alignment``; header cells use
    ``config.header_alignment`` when it is set.

    Args:
        table: Normalized table (see ``complete_table``)
        config: Format configuration (uses context config if None)

    Returns:
        FormattedTable with the re-laid-out table and the margin used.
    """
    if config is None:
        config = get_format_config()
    first = table.header if table.header is not None else table.body[0]
    margin_left = config.margin_left if config.margin_left is not None else first.margin_left

    if config.format_type is FormatType.WEAK:
        return _weak_format_table(table, margin_left, config)

    content_rows = ([table.header] if table.header is not None else []) + list(table.body)
    column_widths = [config.min_delimiter_width] * table.width
    for row in content_rows:
        for j, cell in enumerate(row.cells):
            column_widths[j] = max(column_widths[j], display_width(_cell_text(cell, config), config))

    column_alignments = [_resolve(alignment, config.default_alignment) for alignment in table.alignments]
    header_alignments = column_alignments
    if config.header_alignment is not None and config.header_alignment is not Alignment.NONE:
        header_alignments = [config.header_alignment] * table.width

    def render(row: Row, alignments: list[Alignment]) -> Row:
        cells = tuple(
            Cell(f" {_align_text(_cell_text(cell, config), column_widths[j], alignments[j], config)} ")
            for j, cell in enumerate(row.cells)
        )
        return Row(cells, margin_left, "")

    header = render(table.header, header_alignments) if table.header is not None else None
    delimiter = Row(
        tuple(
            Cell(delimiter_text(alignment or Alignment.NONE, column_widths[j]))
            for j, alignment in enumerate(table.alignments)
        ),
        margin_left,
        "",
    )
    body = tuple(render(row, column_alignments) for row in table.body)
    return FormattedTable(Table(header, body, table.alignments, delimiter), margin_left)


def alter_alignment(
    table: Table,
    column: int,
    alignment: Alignment,
    config: FormatConfig | None = None,
) -> Table:
    """Return a copy of the table with one column's alignment changed.

    Raises:
        AlignmentIndexError: If column is outside ``[0, width)``.
    """
    if not 0 <= column < table.width:
        raise AlignmentIndexError(column, table.width)
    if config is None:
        config = get_format_config()
    alignments = list(table.alignments)
    alignments[column] = alignment
    delimiter = table.delimiter_row
    cells = list(delimiter.cells)
    cells[column] = Cell(delimiter_text(alignment, config.min_delimiter_width))
    return replace(
        table,
        alignments=tuple(alignments),
        delimiter=Row(tuple(cells), delimiter.margin_left, delimiter.margin_right),
    )


def _weak_format_table(table: Table, margin_left: str, config: FormatConfig) -> FormattedTable:
    """Normalize padding to one space per side without aligning columns."""

    def render(row: Row) -> Row:
        return Row(tuple(Cell(f" {_cell_text(cell, config)} ") for cell in row.cells), margin_left, "")

    header = render(table.header) if table.header is not None else None
    delimiter = Row(
        tuple(
            Cell(delimiter_text(alignment or Alignment.NONE, config.min_delimiter_width))
            for alignment in table.alignments
        ),
        margin_left,
        "",
    )
    body = tuple(render(row) for row in table.body)
    return FormattedTable(Table(header, body, table.alignments, delimiter), margin_left)


def _promote_header(table: Table, config: FormatConfig) -> Table:
    """Turn the first body row of a headerless table into its header.

    The column alignments are kept; the delimiter row is rendered from them.
    """
    header = table.body[0]
    delimiter = Row(
        tuple(
            Cell(delimiter_text(alignment or Alignment.NONE, config.min_delimiter_width))
            for alignment in table.alignments
        ),
        header.margin_left,
        "",
    )
    return Table(header=header, body=table.body[1:], alignments=table.alignments, delimiter=delimiter)


def _extend_row(row: Row, width: int, make_cell) -> Row:
    """Pad a row with cells up to width; a padded row loses its right margin."""
    if row.width >= width:
        return row
    cells = row.cells + tuple(make_cell(j) for j in range(row.width, width))
    return Row(cells, row.margin_left, "")


def _cell_text(cell: Cell, config: FormatConfig) -> str:
    if config.trim_content:
        return cell.content
    text = cell.raw.rstrip()
    return text[1:] if text.startswith(" ") else text


def _resolve(alignment: Alignment | None, default: Alignment) -> Alignment:
    if alignment is None or alignment is Alignment.NONE:
        alignment = default
    return Alignment.LEFT if alignment is Alignment.NONE else alignment


def _align_text(text: str, width: int, alignment: Alignment, config: FormatConfig) -> str:
    space = width - display_width(text, config)
    if space <= 0:
        return text
    match alignment:
        case Alignment.RIGHT:
            return " " * space + text
        case Alignment.CENTER:
            return " " * (space // 2) + text + " " * (space - space // 2)
        case _:
            return text + " " * space
