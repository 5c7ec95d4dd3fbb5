"""Bounded line-level shortest edit script.

Reformatting a table usually touches only a few lines. Rewriting just those
lines instead of the whole range keeps the host's undo history, markers and
scroll position intact.

The distance is a Levenshtein distance with whole lines as tokens (insert,
delete and replace each cost 1). Only the diagonal band
``|i - j| <= max_distance`` of the cost matrix is computed, and the search
stops as soon as a whole band row exceeds the bound, so the cost is
O((n + m) * max_distance).

Script positions refer to the ORIGINAL lines:

- ``Insert(row, line)`` inserts before original line ``row``
- ``Delete(row)`` removes original line ``row``
- ``Replace(row, line)`` overwrites original line ``row``

Ops are listed in ascending order; applying them back to front keeps every
remaining position valid.

Example:
    >>> script = shortest_edit_script(["a", "b", "c"], ["a", "B", "c", "d"])
    >>> script
    [Replace(row=1, line='B'), Insert(row=3, line='d')]
    >>> apply_edit_script(["a", "b", "c"], script)
    ['a', 'B', 'c', 'd']

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from tablero.editor import TextEditor


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert ``line`` before original line ``row``."""

    row: int
    line: str


@dataclass(frozen=True, slots=True)
class Delete:
    """Delete original line ``row``."""

    row: int


@dataclass(frozen=True, slots=True)
class Replace:
    """Overwrite original line ``row`` with ``line``."""

    row: int
    line: str


EditOp: TypeAlias = Insert | Delete | Replace


def shortest_edit_script(
    old: Sequence[str],
    new: Sequence[str],
    max_distance: int = 3,
) -> list[EditOp] | None:
    """Compute the shortest script turning ``old`` into ``new``.

    Among scripts of equal length, replaces win over delete/insert pairs and
    edits are placed as close to the start as possible.

    Args:
        old: Lines currently in the buffer
        new: Lines to end up with
        max_distance: Largest distance worth computing; negative means
            unbounded

    Returns:
        The edit script, or None if the distance exceeds ``max_distance``.
    """
    n = len(old)
    m = len(new)
    bound = max_distance if max_distance >= 0 else n + m
    if abs(n - m) > bound:
        return None

    # Costs above the bound are clamped to `over`; they never lie on a
    # script within the bound.
    over = bound + 1
    costs: list[dict[int, int]] = []
    previous: dict[int, int] = {}
    for i in range(n + 1):
        current: dict[int, int] = {}
        for j in range(max(0, i - bound), min(m, i + bound) + 1):
            if i == 0:
                cost = j
            elif j == 0:
                cost = i
            else:
                cost = min(
                    previous.get(j - 1, over) + (0 if old[i - 1] == new[j - 1] else 1),
                    previous.get(j, over) + 1,
                    current.get(j - 1, over) + 1,
                )
            current[j] = min(cost, over)
        if min(current.values()) > bound:
            return None
        costs.append(current)
        previous = current

    if costs[n].get(m, over) > bound:
        return None

    script: list[EditOp] = []
    i, j = n, m
    while i > 0 or j > 0:
        cost = costs[i][j]
        diagonal = costs[i - 1].get(j - 1, over) if i > 0 and j > 0 else over
        if i > 0 and j > 0 and old[i - 1] == new[j - 1] and diagonal == cost:
            i -= 1
            j -= 1
        elif diagonal + 1 == cost:
            script.append(Replace(i - 1, new[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and costs[i - 1].get(j, over) + 1 == cost:
            script.append(Delete(i - 1))
            i -= 1
        else:
            script.append(Insert(i, new[j - 1]))
            j -= 1
    script.reverse()
    return script


def apply_edit_script(lines: Sequence[str], script: Sequence[EditOp]) -> list[str]:
    """Apply a script to a list of lines, returning the new lines."""
    result = list(lines)
    for op in reversed(script):
        match op:
            case Insert(row=row, line=line):
                result.insert(row, line)
            case Delete(row=row):
                del result[row]
            case Replace(row=row, line=line):
                result[row] = line
    return result


def apply_edit_script_to_editor(editor: TextEditor, script: Sequence[EditOp], row_offset: int) -> None:
    """Apply a script to the host buffer, where original line 0 is ``row_offset``."""
    for op in reversed(script):
        match op:
            case Insert(row=row, line=line):
                editor.insert_line(row_offset + row, line)
            case Delete(row=row):
                editor.delete_line(row_offset + row)
            case Replace(row=row, line=line):
                editor.replace_lines(row_offset + row, row_offset + row + 1, [line])
