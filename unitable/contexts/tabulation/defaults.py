"""
Default values for table rendering.

Used by:
- utils/config.py (base layer merged under any YAML config file)
- table_stream.py (keyword defaults)
"""

from typing import Any, Dict

from unitable.contexts.tabulation.columns import Column

# Report order used when no column list is configured
DEFAULT_COLUMNS = [
    Column.CHARACTER_INDEX,
    Column.BYTE_INDEX,
    Column.CODEPOINT,
    Column.UTF8_BYTES,
    Column.GLYPH,
    Column.NAME,
]

# A header line precedes every row whose character index is a multiple of this
DEFAULT_HEADER_INTERVAL = 100


def get_default_config() -> Dict[str, Any]:
    """
    Get the complete default config structure with all expected fields.

    Returns:
        Dict with columns (as config names), header_interval and log_dir
    """
    return {
        "columns": [column.cli_name for column in DEFAULT_COLUMNS],
        "header_interval": DEFAULT_HEADER_INTERVAL,
        "log_dir": None,
    }
