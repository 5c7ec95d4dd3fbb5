"""Property-based tests for formatting and diff invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the table shape, helping catch edge cases that example-based tests miss.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from tablero import (
    FormatConfig,
    Point,
    apply_edit_script,
    complete_table,
    format_table,
    read_table,
    shortest_edit_script,
)
from tablero.focus import shift_focus, translate_focus

# Cell text without pipes, escapes or backticks so splitting is unambiguous
cell_text = st.text(alphabet="ab xy表é-:", max_size=6)
row_cells = st.lists(cell_text, min_size=1, max_size=4)
table_rows = st.lists(row_cells, min_size=1, max_size=5)


def _lines(rows: list[list[str]]) -> list[str]:
    return ["|" + "|".join(f" {cell} " for cell in row) + "|" for row in rows]


def _levenshtein(old: list[str], new: list[str]) -> int:
    previous = list(range(len(new) + 1))
    for i, a in enumerate(old, 1):
        current = [i]
        for j, b in enumerate(new, 1):
            current.append(min(previous[j - 1] + (a != b), previous[j] + 1, current[j - 1] + 1))
        previous = current
    return previous[-1]


class TestNormalization:
    @given(table_rows)
    @settings(max_examples=200)
    def test_complete_is_idempotent(self, rows: list[list[str]]) -> None:
        first = complete_table(read_table(_lines(rows)))
        second = complete_table(first.table)
        assert second.delimiter_inserted is False
        assert second.table == first.table

    @given(table_rows)
    @settings(max_examples=200)
    def test_every_row_has_one_cell_per_alignment(self, rows: list[list[str]]) -> None:
        table = complete_table(read_table(_lines(rows))).table
        formatted = format_table(table).table
        for candidate in (table, formatted):
            assert all(row.width == len(candidate.alignments) for row in candidate.rows)
        assert formatted.width == table.width

    @given(table_rows)
    @settings(max_examples=200)
    def test_render_parse_round_trip(self, rows: list[list[str]]) -> None:
        table = complete_table(read_table(_lines(rows))).table
        reread = read_table(table.to_lines())
        assert reread.header is not None
        assert [c.content for c in reread.header.cells] == [c.content for c in table.header.cells]  # type: ignore[union-attr]
        assert [[c.content for c in row.cells] for row in reread.body] == [
            [c.content for c in row.cells] for row in table.body
        ]
        assert reread.alignments == table.alignments


class TestFormatting:
    @given(table_rows, st.integers(min_value=1, max_value=5))
    @settings(max_examples=200)
    def test_format_is_idempotent(self, rows: list[list[str]], min_width: int) -> None:
        config = FormatConfig(min_delimiter_width=min_width)
        table = complete_table(read_table(_lines(rows)), config).table
        once = format_table(table, config).table
        twice = format_table(once, config).table
        assert twice == once
        assert twice.to_lines() == once.to_lines()

    @given(table_rows, st.data())
    @settings(max_examples=200)
    def test_focus_keeps_content_offset(self, rows: list[list[str]], data: st.DataObject) -> None:
        lines = format_table(complete_table(read_table(_lines(rows))).table).table.to_lines()
        row = data.draw(st.integers(min_value=0, max_value=len(lines) - 1))
        column = data.draw(st.integers(min_value=0, max_value=len(lines[row])))
        point = Point(row, column)

        raw = read_table(lines)
        focus = raw.focus_of_position(point, 0)
        assert focus is not None
        before_cell = raw.get_focused_cell(focus)
        assume(before_cell is not None)

        completed = complete_table(raw)
        shifted = shift_focus(focus, completed.delimiter_inserted)
        formatted = format_table(completed.table)
        moved = translate_focus(shifted, completed.table, formatted)
        after_cell = formatted.table.get_focused_cell(moved)
        assert after_cell is not None
        assert after_cell.compute_content_offset(moved.offset) == before_cell.compute_content_offset(focus.offset)


class TestEditScript:
    lines = st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=8)

    @given(lines, lines, st.integers(min_value=0, max_value=4))
    @settings(max_examples=300)
    def test_script_reproduces_new_lines(self, old: list[str], new: list[str], bound: int) -> None:
        script = shortest_edit_script(old, new, bound)
        distance = _levenshtein(old, new)
        if distance > bound:
            assert script is None
        else:
            assert script is not None
            assert len(script) == distance
            assert apply_edit_script(old, script) == new

    @given(lines, lines)
    @settings(max_examples=200)
    def test_unbounded_script_is_minimal(self, old: list[str], new: list[str]) -> None:
        script = shortest_edit_script(old, new, -1)
        assert script is not None
        assert len(script) == _levenshtein(old, new)
        assert apply_edit_script(old, script) == new
