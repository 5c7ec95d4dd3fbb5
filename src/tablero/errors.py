"""Exception classes for Tablero.

Two failure categories are kept apart:

- TableInvariantError: a normalized table was built from ragged data.
  This is a programming error (``complete_table`` is the only place where
  irregular input gets repaired), so it subclasses AssertionError.
- AlignmentIndexError: a caller asked for a column that does not exist.
  This comes from user input and subclasses IndexError.

"Cursor not in a table" and "edit script over the bound" are not errors;
they are reported as ``None`` results.
"""

from __future__ import annotations


class TableroError(Exception):
    """Base exception for all Tablero errors.
    
    Subclass this for specific error categories.
    """

    pass


class TableInvariantError(TableroError, AssertionError):
    """A normalized table invariant does not hold.
    
    Raised when rows and alignments disagree on the table width, when a
    table has no columns, or when a headerless table has no body rows.
    """

    def __init__(self, message: str, row: int | None = None) -> None:
        """Initialize invariant error with an optional row index.
        
        Args:
            message: Description of the violated invariant
            row: Index of the offending row (optional)
        """
        self.message = message
        self.row = row
        location = f"row {row}: " if row is not None else ""
        super().__init__(f"{location}{message}")


class AlignmentIndexError(TableroError, IndexError):
    """Column index outside the table was given for an alignment change."""

    def __init__(self, column: int, width: int) -> None:
        """Initialize alignment index error.
        
        Args:
            column: Requested column index
            width: Number of columns in the table
        """
        self.column = column
        self.width = width
        super().__init__(f"Column {column} out of range for table of width {width}")
