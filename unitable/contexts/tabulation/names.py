"""
Unicode display names for single characters.

Python's Unicode database has no names for the C0 control characters, so
those come from a fixed table. Everything else goes through unicodedata.
"""

import unicodedata

UNKNOWN_NAME = "NAME UNKNOWN"

# C0 controls (0x00-0x1F), names as given in the Unicode name aliases
CONTROL_CHARACTER_NAMES = {
    0x00: "NULL",
    0x01: "START OF HEADING",
    0x02: "START OF TEXT",
    0x03: "END OF TEXT",
    0x04: "END OF TRANSMISSION",
    0x05: "ENQUIRY",
    0x06: "ACKNOWLEDGE",
    0x07: "BELL",
    0x08: "BACKSPACE",
    0x09: "CHARACTER TABULATION",
    0x0A: "LINE FEED (LF)",
    0x0B: "LINE TABULATION",
    0x0C: "FORM FEED (FF)",
    0x0D: "CARRIAGE RETURN (CR)",
    0x0E: "SHIFT OUT",
    0x0F: "SHIFT IN",
    0x10: "DATA LINK ESCAPE",
    0x11: "DEVICE CONTROL ONE",
    0x12: "DEVICE CONTROL TWO",
    0x13: "DEVICE CONTROL THREE",
    0x14: "DEVICE CONTROL FOUR",
    0x15: "NEGATIVE ACKNOWLEDGE",
    0x16: "SYNCHRONOUS IDLE",
    0x17: "END OF TRANSMISSION BLOCK",
    0x18: "CANCEL",
    0x19: "END OF MEDIUM",
    0x1A: "SUBSTITUTE",
    0x1B: "ESCAPE",
    0x1C: "INFORMATION SEPARATOR FOUR",
    0x1D: "INFORMATION SEPARATOR THREE",
    0x1E: "INFORMATION SEPARATOR TWO",
    0x1F: "INFORMATION SEPARATOR ONE",
}

CONTROL_CHARACTER_LIMIT = 0x20


def resolve_name(char: str) -> str:
    """
    Return the display name of a single character.

    Args:
        char: A single-character string

    Returns:
        Control-character name for ordinals below 0x20, the Unicode name
        otherwise, or "NAME UNKNOWN" when the database has none.

    Raises:
        AssertionError: If a C0 control is missing from the control table
    """
    ordinal = ord(char)
    if ordinal < CONTROL_CHARACTER_LIMIT:
        name = CONTROL_CHARACTER_NAMES.get(ordinal)
        if name is None:
            raise AssertionError(f"control character 0x{ordinal:02X} missing from name table")
        return name

    return unicodedata.name(char, UNKNOWN_NAME)
