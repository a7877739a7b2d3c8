"""
Streaming table builder.

Pulls characters one at a time, tracks the character index and UTF-8 byte
offset, and emits a header line before every row whose index is a multiple of
the header interval. Nothing is retained between characters, so input of any
length is rendered in constant memory.
"""

import time
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Sequence

from unitable.contexts.tabulation.columns import (
    Column,
    Row,
    encode_utf8,
    format_header,
    format_line,
    format_row,
)
from unitable.contexts.tabulation.defaults import DEFAULT_HEADER_INTERVAL
from unitable.contexts.tabulation.logger import (
    log_render_failure,
    log_render_interrupted,
    log_render_result,
    log_render_start,
)


@dataclass
class StreamPosition:
    """Where the next character starts in the input."""

    char_index: int = 0
    byte_index: int = 0

    def advance(self, char: str) -> None:
        """Move past char."""
        self.char_index += 1
        self.byte_index += len(encode_utf8(char))


@dataclass
class RenderResult:
    """Totals from a completed render()."""

    characters: int
    bytes: int


def iter_rows(
    columns: Sequence[Column],
    chars: Iterable[str],
    header_interval: int = DEFAULT_HEADER_INTERVAL,
) -> Iterator[Row]:
    """
    Lazily yield header and data rows for a character stream.

    Args:
        columns: Active columns, in display order
        chars: Any iterable of single-character strings
        header_interval: Number of data rows between repeated headers

    Yields:
        The header row (when due) followed by the data row, for each character
    """
    _check_header_interval(header_interval)
    yield from _iter_rows_from(columns, chars, header_interval, StreamPosition())


def iter_lines(
    columns: Sequence[Column],
    chars: Iterable[str],
    header_interval: int = DEFAULT_HEADER_INTERVAL,
) -> Iterator[str]:
    """Like iter_rows(), but yield laid-out, newline-terminated lines."""
    for row in iter_rows(columns, chars, header_interval):
        yield format_line(columns, row)


def _check_header_interval(header_interval: int) -> None:
    if header_interval < 1:
        raise ValueError(f"header_interval must be positive, got {header_interval}")


def _iter_rows_from(columns, chars, header_interval, position):
    # position is advanced in place so callers can report where a failure happened
    for char in chars:
        if position.char_index % header_interval == 0:
            yield format_header(columns)
        yield format_row(char, columns, position.char_index, position.byte_index)
        position.advance(char)


def render(
    columns: Sequence[Column],
    chars: Iterable[str],
    output: BinaryIO,
    header_interval: int = DEFAULT_HEADER_INTERVAL,
) -> RenderResult:
    """
    Write the report for a character stream to a binary sink.

    Each line is written as soon as its character is read. Lines already
    written stay written if a later write fails.

    Args:
        columns: Active columns, in display order
        chars: Any iterable of single-character strings
        output: Binary sink (e.g. sys.stdout.buffer)
        header_interval: Number of data rows between repeated headers

    Returns:
        RenderResult with the number of characters and input bytes consumed

    Raises:
        OSError: If writing to output fails; rendering stops immediately
            (BrokenPipeError is logged at DEBUG only)
    """
    _check_header_interval(header_interval)
    log_render_start(columns, header_interval)
    start = time.time()

    position = StreamPosition()
    try:
        for row in _iter_rows_from(columns, chars, header_interval, position):
            output.write(format_line(columns, row).encode("utf-8"))
    except BrokenPipeError as e:
        log_render_interrupted(e, position)
        raise
    except OSError as e:
        log_render_failure(e, position)
        raise

    result = RenderResult(characters=position.char_index, bytes=position.byte_index)
    log_render_result(result, time.time() - start)
    return result
