"""
Tablero: pipe table formatting with a stable cursor

Reformats pipe-delimited text tables inside a larger buffer: pads cells,
aligns columns, repairs ragged rows and missing delimiter rows, and keeps
the cursor on the same logical cell while doing so. Only lines that changed
are rewritten.

Quick Start:
    >>> from tablero import read_table, complete_table, format_table
    >>> raw = read_table(["| name | qty |", "|---|--:|", "| apple | 3 |"])
    >>> format_table(complete_table(raw).table).table.to_lines()
    ['| name  | qty |', '| ----- | ---:|', '| apple |   3 |']

    >>> # Or drive an editor buffer
    >>> from tablero import LineBuffer, Point, TableEditor
    >>> buffer = LineBuffer(["| a | b |", "| 1 | 2 |"], cursor=Point(1, 2))
    >>> TableEditor(buffer).format()
    >>> buffer.get_cursor_position()
    Point(row=2, column=2)

Installation:
    pip install tablero
"""

from tablero.alignment import Alignment, FormatType, delimiter_text
from tablero.buffer import LineBuffer
from tablero.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from tablero.edit_script import (
    Delete,
    EditOp,
    Insert,
    Replace,
    apply_edit_script,
    apply_edit_script_to_editor,
    shortest_edit_script,
)
from tablero.editor import SmartCursor, TableEditor, TableInfo, TextEditor
from tablero.errors import AlignmentIndexError, TableInvariantError, TableroError
from tablero.focus import shift_focus, translate_focus
from tablero.formatter import (
    CompletedTable,
    FormattedTable,
    alter_alignment,
    complete_table,
    format_table,
)
from tablero.location import Point, Range
from tablero.nodes import Cell, Focus, Row
from tablero.parser import is_table_row, read_row, read_table, split_cells
from tablero.table import RawTable, Table
from tablero.width import display_width

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "AlignmentIndexError",
    "Cell",
    "CompletedTable",
    "Delete",
    "EditOp",
    "Focus",
    "FormatConfig",
    "FormatType",
    "FormattedTable",
    "Insert",
    "LineBuffer",
    "Point",
    "Range",
    "RawTable",
    "Replace",
    "Row",
    "SmartCursor",
    "Table",
    "TableEditor",
    "TableInfo",
    "TableInvariantError",
    "TableroError",
    "TextEditor",
    "alter_alignment",
    "apply_edit_script",
    "apply_edit_script_to_editor",
    "complete_table",
    "delimiter_text",
    "display_width",
    "format_config_context",
    "format_table",
    "get_format_config",
    "is_table_row",
    "read_row",
    "read_table",
    "reset_format_config",
    "set_format_config",
    "shift_focus",
    "shortest_edit_script",
    "split_cells",
    "translate_focus",
]
