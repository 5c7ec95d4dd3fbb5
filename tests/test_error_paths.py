"""Error-path and malformed input tests.

Tests that exercise error handling and graceful degradation for ragged or
out-of-range input. These complement the happy-path tests in
test_formatter.py and test_editor.py.
"""

import pytest

from tablero import (
    Alignment,
    FormatConfig,
    LineBuffer,
    Point,
    Table,
    TableEditor,
    alter_alignment,
    complete_table,
    read_table,
    shortest_edit_script,
)
from tablero.errors import AlignmentIndexError, TableInvariantError, TableroError
from tablero.nodes import Cell, Row
from tablero.table import RawTable

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestTableInvariantError:
    """Verify TableInvariantError messages and hierarchy."""

    def test_message_only(self) -> None:
        err = TableInvariantError("ragged table")
        assert str(err) == "ragged table"
        assert err.row is None

    def test_with_row(self) -> None:
        err = TableInvariantError("too few cells", row=3)
        assert str(err) == "row 3: too few cells"
        assert err.message == "too few cells"

    def test_is_assertion_error(self) -> None:
        err = TableInvariantError("x")
        assert isinstance(err, TableroError)
        assert isinstance(err, AssertionError)


class TestAlignmentIndexError:
    def test_attributes(self) -> None:
        err = AlignmentIndexError(5, 2)
        assert err.column == 5
        assert err.width == 2
        assert "5" in str(err)

    def test_is_index_error(self) -> None:
        err = AlignmentIndexError(-1, 2)
        assert isinstance(err, TableroError)
        assert isinstance(err, IndexError)


# =========================================================================
# Invariant violations
# =========================================================================


class TestRaggedTables:
    """Normalized tables refuse inconsistent widths."""

    def test_body_row_too_short(self) -> None:
        with pytest.raises(TableInvariantError) as info:
            Table.create(["a", "b"], [["1", "2"], ["3"]], [None, None])
        assert info.value.row == 1

    def test_header_and_alignments_disagree(self) -> None:
        with pytest.raises(TableInvariantError):
            Table(
                header=Row((Cell(" a "), Cell(" b "))),
                body=(),
                alignments=(None,),
            )

    def test_headerless_table_needs_body(self) -> None:
        with pytest.raises(TableInvariantError):
            Table(header=None, body=(), alignments=())

    def test_zero_width_table(self) -> None:
        with pytest.raises(TableInvariantError):
            Table(header=Row(()), body=(), alignments=())

    def test_complete_empty_table(self) -> None:
        with pytest.raises(TableInvariantError):
            complete_table(RawTable(()))

    def test_caught_as_assertion(self) -> None:
        with pytest.raises(AssertionError):
            Table.create(["a"], [["1", "2"]], [None])


class TestAlignmentOutOfRange:
    @pytest.mark.parametrize("column", [-1, 2, 10])
    def test_alter_alignment(self, column: int) -> None:
        table = complete_table(read_table(["| a | b |", "| 1 | 2 |"])).table
        with pytest.raises(AlignmentIndexError):
            alter_alignment(table, column, Alignment.RIGHT)

    def test_editor_align_in_margin_leaves_buffer(self) -> None:
        buffer = LineBuffer(["| a | b |", "|---|---|"], cursor=Point(0, 0))
        with pytest.raises(AlignmentIndexError):
            TableEditor(buffer).align(Alignment.CENTER)
        assert buffer.lines == ["| a | b |", "|---|---|"]
        assert buffer.operations == []


# =========================================================================
# Graceful degradation
# =========================================================================


class TestNoTable:
    """Operations outside a table are no-ops, not errors."""

    def test_find_table_outside(self) -> None:
        buffer = LineBuffer(["text", "| a |"], cursor=Point(0, 1))
        assert TableEditor(buffer).find_table() is None

    @pytest.mark.parametrize("operation", ["format", "escape", "select_cell"])
    def test_commands_outside_table(self, operation: str) -> None:
        buffer = LineBuffer(["plain text"], cursor=Point(0, 3))
        getattr(TableEditor(buffer), operation)()
        assert buffer.lines == ["plain text"]
        assert buffer.operations == []
        assert buffer.history == []

    def test_edit_script_over_bound(self) -> None:
        assert shortest_edit_script(["a"] * 5, ["b"] * 5, 2) is None


class TestConfigValidation:
    def test_min_delimiter_width_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            FormatConfig(min_delimiter_width=0)

    def test_unknown_alignment_name(self) -> None:
        with pytest.raises(ValueError):
            FormatConfig.from_dict({"default_alignment": "diagonal"})


class TestLocationValidation:
    def test_negative_point(self) -> None:
        with pytest.raises(ValueError):
            Point(-1, 0)

    def test_inverted_range(self) -> None:
        from tablero import Range

        with pytest.raises(ValueError):
            Range(Point(2, 0), Point(1, 0))
