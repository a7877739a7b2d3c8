"""
Column definitions and per-character row formatting.

A Column is a fixed formatting policy: its header label, plus the alignment and
width applied when a value is laid out on an output line. Rows hold the raw
text values; padding only happens in format_line().
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from unitable.contexts.tabulation.exceptions import UnknownColumnError
from unitable.contexts.tabulation.glyphs import escape_glyph
from unitable.contexts.tabulation.names import resolve_name

Row = Tuple[str, ...]

COLUMN_SEPARATOR = "  "

# Alternate spellings accepted by Column.from_name()
COLUMN_ALIASES = {
    "utf32": "codepoint",
}


class Column(Enum):
    """Report column kinds."""

    CHARACTER_INDEX = ("character", ">", 9)
    BYTE_INDEX = ("byte", ">", 5)
    CODEPOINT = ("UTF-32", None, None)
    UTF8_BYTES = ("encoded as", "<", 12)
    GLYPH = ("glyph", "^", 8)
    NAME = ("name", None, None)

    def __init__(self, label: str, align: Optional[str], width: Optional[int]):
        """
        Args:
            label: Column header text
            align: Alignment ('<' left, '>' right, '^' center), None for no padding
            width: Column width in characters, None for no padding
        """
        self.label = label
        self.align = align
        self.width = width

    @property
    def cli_name(self) -> str:
        """Name used on the command line and in config files (e.g. 'character-index')."""
        return self.name.lower().replace("_", "-")

    def format_value(self, value: str) -> str:
        """Format column value with alignment."""
        if self.width is None:
            return value
        return f"{value:{self.align}{self.width}}"

    @classmethod
    def from_name(cls, name: str) -> "Column":
        """
        Look up a column by name.

        Matching ignores case, hyphens, underscores and spaces, so
        'character-index', 'CharacterIndex' and 'CHARACTER_INDEX' all match.

        Raises:
            UnknownColumnError: If no column matches
        """
        key = "".join(ch for ch in name.lower() if ch not in "-_ ")
        key = COLUMN_ALIASES.get(key, key)
        for column in cls:
            if column.name.lower().replace("_", "") == key:
                return column
        raise UnknownColumnError(name)


def parse_columns(names: Sequence[str]) -> List[Column]:
    """Convert column names to Columns, preserving order."""
    return [Column.from_name(name) for name in names]


def encode_utf8(char: str) -> bytes:
    """UTF-8 bytes of a character. Lone surrogates are encoded rather than rejected."""
    return char.encode("utf-8", "surrogatepass")


def format_cell(column: Column, char: str, char_index: int, byte_index: int) -> str:
    """Raw text value of one column for one character."""
    if column is Column.CHARACTER_INDEX:
        return str(char_index)
    elif column is Column.BYTE_INDEX:
        return str(byte_index)
    elif column is Column.CODEPOINT:
        return f"{ord(char):06X}"
    elif column is Column.UTF8_BYTES:
        return " ".join(f"{b:02X}" for b in encode_utf8(char))
    elif column is Column.GLYPH:
        return escape_glyph(char)
    elif column is Column.NAME:
        return resolve_name(char)
    raise AssertionError(f"unhandled column {column!r}")


def format_row(char: str, columns: Sequence[Column], char_index: int, byte_index: int) -> Row:
    """
    Build the data row for one character.

    Args:
        char: A single-character string
        columns: Active columns, in display order
        char_index: 0-based position of char in the input
        byte_index: UTF-8 byte offset of char in the input

    Returns:
        One text value per column

    Example:
        >>> format_row("a", [Column.CODEPOINT, Column.UTF8_BYTES, Column.GLYPH, Column.NAME], 0, 0)
        ('000061', '61', 'a', 'LATIN SMALL LETTER A')
    """
    return tuple(format_cell(column, char, char_index, byte_index) for column in columns)


def format_header(columns: Sequence[Column]) -> Row:
    """Header row: one label per column."""
    return tuple(column.label for column in columns)


def format_line(columns: Sequence[Column], row: Row) -> str:
    """Lay out a row as one newline-terminated output line."""
    cells = [column.format_value(value) for column, value in zip(columns, row)]
    return COLUMN_SEPARATOR.join(cells) + "\n"
