"""Text coordinates inside the host buffer.

Provides Point (a position) and Range (a half-open span between two points).
Both are 0-indexed, unlike error locations in most parsers, because they
travel straight to and from the host editor's cursor API.

Thread Safety:
Point and Range are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A position in the text buffer.
    
    Points compare lexicographically: first by row, then by column.
    
    Attributes:
        row: Line index (0-indexed)
        column: Character index within the line (0-indexed)
    
    Examples:
        >>> Point(1, 4) < Point(2, 0)
        True
        >>> Point(1, 4).with_column(0)
        Point(row=1, column=0)
        
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.column < 0:
            raise ValueError(f"Point coordinates must be non-negative, got ({self.row}, {self.column})")

    def with_row(self, row: int) -> Point:
        """Return a copy of this point on another row."""
        return replace(self, row=row)

    def with_column(self, column: int) -> Point:
        """Return a copy of this point at another column."""
        return replace(self, column=column)


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open span ``[start, end)`` of text.
    
    Used for selections and for the lines a table occupies.
    
    Attributes:
        start: First position (inclusive)
        end: Last position (exclusive)
        
    """

    start: Point
    end: Point

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")

    @property
    def is_empty(self) -> bool:
        """True for a zero-width range (a plain cursor)."""
        return self.start == self.end

    @classmethod
    def at(cls, point: Point) -> Range:
        """Create a zero-width range at a point."""
        return cls(point, point)
