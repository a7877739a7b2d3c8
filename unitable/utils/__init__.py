"""
Shared utilities for unitable.

Common functionality used across contexts:
- Logger configuration (utils.logger)
- Configuration management (utils.config)
"""

from unitable.utils.logger import setup_logger

__all__ = ["setup_logger"]
