"""Rendering of single characters for the glyph column."""

import unicodedata

# Characters with a short backslash form
SHORT_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\0": "\\0",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}

# General categories that are invisible, or attach to a neighbour, when shown alone:
# controls, format, surrogates, private use, unassigned, nonspacing and
# enclosing marks, space, line and paragraph separators.
ESCAPED_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn", "Mn", "Me", "Zs", "Zl", "Zp"})

# Plain space is the one separator that reads fine in a padded cell
LITERAL_SPACES = frozenset({" "})

# Emoji skin tone modifiers (category Sk) only extend the preceding emoji
EMOJI_MODIFIERS = range(0x1F3FB, 0x1F400)


def escape_glyph(char: str) -> str:
    r"""
    Return char itself if it displays safely on its own, else an escaped form.

    Examples:
        >>> escape_glyph("a")
        'a'
        >>> escape_glyph("\n")
        '\\n'
        >>> escape_glyph("\u200d")
        '\\u{200d}'
    """
    short = SHORT_ESCAPES.get(char)
    if short is not None:
        return short

    if char in LITERAL_SPACES:
        return char

    if unicodedata.category(char) in ESCAPED_CATEGORIES or ord(char) in EMOJI_MODIFIERS:
        return f"\\u{{{ord(char):x}}}"

    return char
