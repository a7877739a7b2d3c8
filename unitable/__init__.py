"""
unitable - character-by-character Unicode report for text streams

Reads text and prints one row per Unicode scalar value: its position, byte
offset, codepoint, UTF-8 encoding, a displayable glyph and its Unicode name.

Architecture:
- Intake Context: Turning stdin or files into a lazy character stream
- Tabulation Context: Per-character row formatting and streaming output
"""

__version__ = "0.1.0"
