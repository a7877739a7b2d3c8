"""
Intake Context

Responsibilities:
- Turns stdin or an input file into a lazy stream of single characters

Owns: Input decoding and line buffering
Never: Formats or writes output
"""

from unitable.contexts.intake.char_stream import (
    LineBufferedChars,
    open_text_input,
    stdin_chars,
    wrap_binary_input,
)

__all__ = ["LineBufferedChars", "open_text_input", "stdin_chars", "wrap_binary_input"]
