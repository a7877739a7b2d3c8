"""
Tabulation Context

Responsibilities:
- Resolves display names and safe glyphs for single characters
- Formats one row of column values per character
- Streams rows to an output sink with periodic header lines

Owns: Column definitions, row formatting, header cadence, byte-offset bookkeeping
Never: Reads from the console or decides where input comes from
"""

from unitable.contexts.tabulation.columns import (
    Column,
    Row,
    format_header,
    format_line,
    format_row,
    parse_columns,
)
from unitable.contexts.tabulation.defaults import DEFAULT_COLUMNS, DEFAULT_HEADER_INTERVAL
from unitable.contexts.tabulation.exceptions import ConfigurationError, UnknownColumnError
from unitable.contexts.tabulation.glyphs import escape_glyph
from unitable.contexts.tabulation.names import UNKNOWN_NAME, resolve_name
from unitable.contexts.tabulation.table_stream import (
    RenderResult,
    StreamPosition,
    iter_lines,
    iter_rows,
    render,
)

__all__ = [
    # Column model and row formatting
    "Column",
    "Row",
    "format_row",
    "format_header",
    "format_line",
    "parse_columns",
    "DEFAULT_COLUMNS",
    "DEFAULT_HEADER_INTERVAL",
    # Per-character lookups
    "resolve_name",
    "escape_glyph",
    "UNKNOWN_NAME",
    # Streaming
    "render",
    "iter_rows",
    "iter_lines",
    "RenderResult",
    "StreamPosition",
    # Errors
    "ConfigurationError",
    "UnknownColumnError",
]
