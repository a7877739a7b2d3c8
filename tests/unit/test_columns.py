"""
Unit tests for column definitions and row formatting.

Tests Column lookup, per-column values, header labels and line layout.
"""

import pytest

from unitable.contexts.tabulation.columns import (
    Column,
    format_header,
    format_line,
    format_row,
    parse_columns,
)
from unitable.contexts.tabulation.defaults import DEFAULT_COLUMNS
from unitable.contexts.tabulation.exceptions import ConfigurationError, UnknownColumnError

pytestmark = pytest.mark.unit

DISPLAY_COLUMNS = [Column.CODEPOINT, Column.UTF8_BYTES, Column.GLYPH, Column.NAME]


class TestFormatRow:
    """Tests for format_row()."""

    def test_ascii_letter(self):
        assert format_row("a", DISPLAY_COLUMNS, 0, 0) == (
            "000061",
            "61",
            "a",
            "LATIN SMALL LETTER A",
        )

    def test_two_byte_letter(self):
        assert format_row("ä", DISPLAY_COLUMNS, 0, 0) == (
            "0000E4",
            "C3 A4",
            "ä",
            "LATIN SMALL LETTER A WITH DIAERESIS",
        )

    def test_three_byte_symbol(self):
        assert format_row("→", DISPLAY_COLUMNS, 0, 0) == (
            "002192",
            "E2 86 92",
            "→",
            "RIGHTWARDS ARROW",
        )

    def test_newline(self):
        columns = [Column.CODEPOINT, Column.UTF8_BYTES, Column.NAME]
        assert format_row("\n", columns, 0, 0) == ("00000A", "0A", "LINE FEED (LF)")

    def test_four_byte_emoji(self):
        assert format_row("\U0001F642", DISPLAY_COLUMNS, 0, 0) == (
            "01F642",
            "F0 9F 99 82",
            "\U0001F642",
            "SLIGHTLY SMILING FACE",
        )

    def test_indexes_are_decimal(self):
        columns = [Column.CHARACTER_INDEX, Column.BYTE_INDEX]
        assert format_row("x", columns, 1234, 56789) == ("1234", "56789")

    def test_column_order_is_preserved(self):
        columns = [Column.NAME, Column.CHARACTER_INDEX, Column.CODEPOINT]
        assert format_row("b", columns, 7, 9) == ("LATIN SMALL LETTER B", "7", "000062")

    def test_empty_column_list(self):
        assert format_row("a", [], 0, 0) == ()

    def test_unnamed_character_uses_sentinel(self):
        assert format_row("\x7f", [Column.NAME], 0, 0) == ("NAME UNKNOWN",)

    def test_lone_surrogate_does_not_fail(self):
        row = format_row("\ud800", [Column.UTF8_BYTES, Column.GLYPH, Column.NAME], 0, 0)
        assert row == ("ED A0 80", "\\u{d800}", "NAME UNKNOWN")


class TestFormatHeader:
    """Tests for format_header()."""

    def test_all_labels(self):
        assert format_header(DEFAULT_COLUMNS) == (
            "character",
            "byte",
            "UTF-32",
            "encoded as",
            "glyph",
            "name",
        )

    def test_header_is_deterministic(self):
        assert format_header(DISPLAY_COLUMNS) == format_header(list(DISPLAY_COLUMNS))

    def test_empty_header(self):
        assert format_header([]) == ()


class TestFormatLine:
    """Tests for format_line() padding and joining."""

    def test_index_and_name(self):
        columns = [Column.CHARACTER_INDEX, Column.NAME]
        assert format_line(columns, ("0", "LATIN SMALL LETTER A")) == "        0  LATIN SMALL LETTER A\n"
        assert format_line(columns, format_header(columns)) == "character  name\n"

    def test_widths_and_alignment(self):
        columns = [Column.BYTE_INDEX, Column.UTF8_BYTES, Column.GLYPH, Column.CODEPOINT]
        line = format_line(columns, ("12", "C3 A4", "ä", "0000E4"))
        assert line == "   12" + "  " + "C3 A4" + " " * 7 + "  " + "   ä    " + "  " + "0000E4\n"

    def test_glyph_centering_puts_extra_space_right(self):
        assert format_line([Column.GLYPH], ("ab",)) == "   ab   \n"
        assert format_line([Column.GLYPH], ("abc",)) == "  abc   \n"

    def test_long_values_are_not_truncated(self):
        assert format_line([Column.BYTE_INDEX], ("1234567",)) == "1234567\n"

    def test_empty_columns_give_empty_line(self):
        assert format_line([], ()) == "\n"


class TestColumnLookup:
    """Tests for Column.from_name() and parse_columns()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("character-index", Column.CHARACTER_INDEX),
            ("CharacterIndex", Column.CHARACTER_INDEX),
            ("BYTE_INDEX", Column.BYTE_INDEX),
            ("codepoint", Column.CODEPOINT),
            ("utf32", Column.CODEPOINT),
            ("UTF-32", Column.CODEPOINT),
            ("utf8 bytes", Column.UTF8_BYTES),
            ("Glyph", Column.GLYPH),
            ("name", Column.NAME),
        ],
    )
    def test_from_name(self, name, expected):
        assert Column.from_name(name) is expected

    def test_cli_names_round_trip(self):
        for column in Column:
            assert Column.from_name(column.cli_name) is column

    def test_unknown_column(self):
        with pytest.raises(UnknownColumnError, match="colour"):
            Column.from_name("colour")

    def test_unknown_column_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            parse_columns(["name", "bogus"])

    def test_parse_columns_keeps_order(self):
        assert parse_columns(["name", "glyph"]) == [Column.NAME, Column.GLYPH]
