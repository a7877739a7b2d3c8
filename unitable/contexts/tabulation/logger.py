"""
Tabulation context logger.

Provides logging interface for the tabulation context with automatic [table] prefix.
All tabulation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from unitable.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[table]"


def setup_tabulation_logger(
    log_dir: Optional[Path] = None, level: str = "WARNING", columns: Sequence = ()
) -> Optional[Path]:
    """
    Setup logger for the tabulation context.

    Args:
        log_dir: Directory for this session's log file (None for console only)
        level: Console log level
        columns: Active columns, recorded in the provenance header

    Returns:
        Path to log file, or None
    """
    return _setup_logger(
        context_name="table",
        log_dir=log_dir,
        level=level,
        extra_provenance={"Columns": ", ".join(c.cli_name for c in columns) or "(none)"},
    )


# Wrapper functions with automatic [table] prefix


def _log_info(message: str) -> None:
    """Log info message with [table] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [table] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [table] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [table] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level tabulation-specific logging helpers


def log_render_start(columns: Sequence, header_interval: int) -> None:
    """Log start of a render with its layout."""
    _log_debug(f"Rendering {len(columns)} columns, header every {header_interval} rows")


def log_render_result(result, elapsed_time: float) -> None:
    """
    Log the outcome of a render.

    Args:
        result: RenderResult from render()
        elapsed_time: Time taken to render
    """
    _log_success(
        f"Rendered {result.characters} characters ({result.bytes} bytes) ({elapsed_time:.2f}s)"
    )


def log_render_failure(error: Exception, position) -> None:
    """Log an I/O failure with the stream position it happened at."""
    _log_error(f"I/O failed at character {position.char_index} (byte {position.byte_index})")
    _log_error(f"  Error: {error}")


def log_render_interrupted(error: Exception, position) -> None:
    """Log the reader closing the pipe early; quiet, as with `head`."""
    _log_debug(f"Output closed at character {position.char_index} (byte {position.byte_index}): {error}")


def log_config_source(config_path: Optional[Path]) -> None:
    """Log which config file (if any) the run was configured from."""
    if config_path is None:
        _log_info("Using built-in defaults (no config file)")
    else:
        _log_info(f"Config: {config_path}")
