"""Tests for display width measurement."""

import pytest

from tablero import FormatConfig, complete_table, format_table, read_table
from tablero.width import char_width, display_width


class TestCharWidth:
    @pytest.mark.parametrize(
        "char,expected",
        [
            ("a", 1),
            ("表", 2),
            ("Ａ", 2),  # fullwidth A
            ("😀", 2),
            ("\u0301", 0),  # combining acute accent
            ("\u200b", 0),  # zero width space
            ("\x07", 1),
            ("\t", 1),
        ],
    )
    def test_default_widths(self, char: str, expected: int) -> None:
        assert char_width(char, FormatConfig()) == expected

    def test_ambiguous_is_narrow_by_default(self) -> None:
        assert char_width("α", FormatConfig()) == 1

    def test_ambiguous_as_wide(self) -> None:
        assert char_width("α", FormatConfig(ambiguous_as_wide=True)) == 2

    def test_override_sets_win(self) -> None:
        config = FormatConfig(wide_chars=frozenset("→"), narrow_chars=frozenset("表"))
        assert char_width("→", config) == 2
        assert char_width("表", config) == 1


class TestDisplayWidth:
    def test_mixed_text(self) -> None:
        assert display_width("ab表", FormatConfig()) == 4

    def test_decomposed_accent(self) -> None:
        assert display_width("e\u0301", FormatConfig()) == 1

    def test_normalize_composes_first(self) -> None:
        config = FormatConfig(normalize=True, narrow_chars=frozenset("\u0301"))
        # Without NFC the combining mark would count as a narrow char
        assert display_width("e\u0301", config) == 1
        assert display_width("e\u0301", FormatConfig(narrow_chars=frozenset("\u0301"))) == 2

    def test_custom_measure_replaces_rules(self) -> None:
        config = FormatConfig(text_width=lambda text: 10)
        assert display_width("", config) == 10

    def test_empty(self) -> None:
        assert display_width("", FormatConfig()) == 0


class TestWidthInFormatting:
    def test_wide_chars_pad_by_display_width(self) -> None:
        table = complete_table(read_table(["| 表表 | a |", "| --- | --- |", "| x | y |"])).table
        assert format_table(table).table.to_lines() == [
            "| 表表 | a   |",
            "| ---- | --- |",
            "| x    | y   |",
        ]

    def test_ambiguous_setting_changes_layout(self) -> None:
        table = complete_table(read_table(["| ααα |", "| --- |", "| x |"])).table
        config = FormatConfig(ambiguous_as_wide=True)
        assert format_table(table, config).table.to_lines() == [
            "| ααα    |",
            "| ------ |",
            "| x      |",
        ]

    def test_tab_counts_one_column(self) -> None:
        table = complete_table(read_table(["| a\tb |", "| --- |", "| x |"])).table
        assert format_table(table).table.to_lines() == [
            "| a\tb |",
            "| --- |",
            "| x   |",
        ]
