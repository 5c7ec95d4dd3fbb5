"""Tests for tablero.parser: splitting lines into rows and cells."""

import pytest

from tablero import Alignment, Cell, Row
from tablero.parser import is_table_row, read_row, read_table, split_cells


class TestIsTableRow:
    @pytest.mark.parametrize("line", ["|", "| a |", "   | a", "\t|---|"])
    def test_table_rows(self, line: str) -> None:
        assert is_table_row(line)

    @pytest.mark.parametrize("line", ["", "   ", "a | b", "- | a |", "\\| a |"])
    def test_other_lines(self, line: str) -> None:
        assert not is_table_row(line)


class TestSplitCells:
    def test_basic(self) -> None:
        assert split_cells("| a | b |") == ["", " a ", " b ", ""]

    def test_no_pipes(self) -> None:
        assert split_cells("abc") == ["abc"]
        assert split_cells("") == [""]

    def test_escaped_pipe(self) -> None:
        assert split_cells("| a \\| b | c |") == ["", " a \\| b ", " c ", ""]

    def test_trailing_backslash(self) -> None:
        assert split_cells("| a \\") == ["", " a \\"]

    def test_code_span_protects_pipes(self) -> None:
        assert split_cells("| `a | b` | c |") == ["", " `a | b` ", " c ", ""]

    def test_code_span_needs_matching_run(self) -> None:
        assert split_cells("| ``a | ` | b`` |") == ["", " ``a | ` | b`` ", ""]

    def test_unclosed_backtick_is_literal(self) -> None:
        assert split_cells("| `a | b |") == ["", " `a ", " b ", ""]


class TestReadRow:
    def test_margins(self) -> None:
        row = read_row("  | a | b |  ")
        assert row == Row((Cell(" a "), Cell(" b ")), "  ", "  ")

    def test_missing_closing_pipe(self) -> None:
        row = read_row("| a | b")
        assert row == Row((Cell(" a "), Cell(" b")), "", "")

    def test_single_pipe_is_one_empty_cell(self) -> None:
        assert read_row("|") == Row((Cell(""),), "", "")

    def test_round_trip_text(self) -> None:
        for line in ["| a | b |", "  |a|b|  ", "|x\\|y|`|`|"]:
            assert read_row(line).to_text() == line


class TestReadTable:
    def test_with_delimiter_row(self) -> None:
        table = read_table(["| a | b | c | d |", "|---|:--|--:|:-:|", "| 1 | 2 | 3 | 4 |"])
        assert table.header is not None
        assert [cell.content for cell in table.header.cells] == ["a", "b", "c", "d"]
        assert table.alignments == (Alignment.NONE, Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER)
        assert [[cell.content for cell in row.cells] for row in table.body] == [["1", "2", "3", "4"]]

    def test_without_delimiter_row(self) -> None:
        table = read_table(["| a | b |", "| 1 | 2 |"])
        assert table.header is None
        assert table.delimiter is None
        assert len(table.body) == 2
        assert table.alignments == ()

    def test_delimiter_row_with_spaces(self) -> None:
        table = read_table(["| a |", "| :---: |"])
        assert table.alignments == (Alignment.CENTER,)

    def test_invalid_delimiter_row(self) -> None:
        table = read_table(["| a | b |", "|---| x |"])
        assert table.header is None
        assert len(table.body) == 2

    def test_ragged_rows_are_preserved(self) -> None:
        table = read_table(["| a |", "|---|", "| 1 | 2 | 3 |", "|"])
        assert [row.width for row in table.body] == [3, 1]

    def test_empty(self) -> None:
        assert read_table([]).rows == ()

    def test_to_lines_reproduces_input(self) -> None:
        lines = ["| a |b|", " |---|", "|1|2|3|  "]
        assert read_table(lines).to_lines() == lines
