"""Keeping the cursor on the same logical spot across re-layout.

A Focus taken before formatting names a cell and a raw offset inside its
padded text. Padding changes when the table is formatted, so the offset is
carried over through the cell's content::

    before:  "|   abc|"   focus offset 4 -> content offset 1 ("b")
    after:   "| abc   |"  content offset 1 -> raw offset 2

Focuses that fall outside the grid (margins) keep their row and column and
move to the start of the cell, or to the end of the left margin.

"""

from __future__ import annotations

from tablero.formatter import FormattedTable
from tablero.nodes import Focus
from tablero.table import Table


def shift_focus(focus: Focus, delimiter_inserted: bool) -> Focus:
    """Move a focus below the header down one row if a delimiter row was inserted.

    ``complete_table`` puts the synthesized delimiter at row 1, so rows that
    were at index 1 and beyond now sit one line lower.
    """
    if delimiter_inserted and focus.row > 0:
        return focus.with_row(focus.row + 1)
    return focus


def translate_focus(focus: Focus, before: Table, formatted: FormattedTable) -> Focus:
    """Recompute a focus offset for the formatted layout of the same table.

    Args:
        focus: Focus on ``before`` (already passed through ``shift_focus``)
        before: The completed table the focus was taken on
        formatted: Result of formatting ``before`` (or an altered copy of it)

    Returns:
        Focus with the same row and column and an offset into the new padding.
    """
    before_cell = before.get_focused_cell(focus)
    after_cell = formatted.table.get_focused_cell(focus)
    if before_cell is not None and after_cell is not None:
        content_offset = min(before_cell.compute_content_offset(focus.offset), len(after_cell.content))
        return focus.with_offset(after_cell.compute_raw_offset(content_offset))
    return focus.with_offset(len(formatted.margin_left) if focus.column < 0 else 0)
