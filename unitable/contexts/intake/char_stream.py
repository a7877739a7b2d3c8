"""
Character-at-a-time reading of text streams.

Reads one line at a time from the underlying stream and hands out its
characters individually, so only the current line is ever held in memory.
"""

import io
import sys
from typing import Iterator, Optional, TextIO

INPUT_ENCODING = "utf-8"


class LineBufferedChars:
    """
    Iterator over the characters of a text stream.

    Once the stream reports end of input the iterator stays exhausted, even if
    the stream would later produce more data.

    Example:
        >>> list(LineBufferedChars(io.StringIO("ab\\nc")))
        ['a', 'b', '\\n', 'c']
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._line = ""
        self._pos = 0
        self._finished = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._finished:
            raise StopIteration

        if self._pos >= len(self._line):
            self._line = self.stream.readline()
            self._pos = 0
            if not self._line:
                self._finished = True
                raise StopIteration

        char = self._line[self._pos]
        self._pos += 1
        return char


def wrap_binary_input(binary: io.BufferedIOBase) -> TextIO:
    """
    Decode a binary stream as UTF-8 text for character reading.

    Invalid byte sequences become U+FFFD and line endings are passed through
    untranslated, so '\\r\\n' reaches the table as two characters.
    """
    return io.TextIOWrapper(binary, encoding=INPUT_ENCODING, errors="replace", newline="")


def open_text_input(path) -> TextIO:
    """Open a file for character reading with the same decoding rules as stdin."""
    return open(path, encoding=INPUT_ENCODING, errors="replace", newline="")


def stdin_chars(stdin: Optional[TextIO] = None) -> Iterator[str]:
    """
    Characters of standard input.

    Args:
        stdin: Text stream to read from (defaults to sys.stdin); its underlying
            binary buffer is re-decoded with the rules of wrap_binary_input()
    """
    stdin = stdin if stdin is not None else sys.stdin
    wrapper = wrap_binary_input(stdin.buffer)
    try:
        yield from LineBufferedChars(wrapper)
    finally:
        # Leave the caller's stdin open
        wrapper.detach()
