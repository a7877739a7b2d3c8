"""
Table configuration loading.

Merges the built-in defaults with an optional YAML config file. The file path
comes from the caller or, failing that, the UNITABLE_CONFIG environment
variable (which may be set in a .env file).

Example config file:
    columns: [character-index, codepoint, name]
    header_interval: 50
    log_dir: outs/logs
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from unitable.contexts.tabulation.columns import Column, parse_columns
from unitable.contexts.tabulation.defaults import get_default_config
from unitable.contexts.tabulation.exceptions import ConfigurationError

load_dotenv()

CONFIG_ENV_VAR = "UNITABLE_CONFIG"


@dataclass
class TableConfig:
    """Validated settings for one render."""

    columns: List[Column]
    header_interval: int
    log_dir: Optional[Path] = None
    source: Optional[Path] = None


def resolve_config_path(config_path: Optional[Path] = None) -> Optional[Path]:
    """Return the explicit config path, else the one named by UNITABLE_CONFIG, else None."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return None


def load_table_config(config_path: Optional[Path] = None) -> TableConfig:
    """
    Load and validate the table configuration.

    Args:
        config_path: Optional YAML file (defaults to UNITABLE_CONFIG, then built-in defaults)

    Returns:
        TableConfig with parsed columns

    Raises:
        ConfigurationError: If the file is missing or a value is invalid
    """
    config_path = resolve_config_path(config_path)

    merged = OmegaConf.create(get_default_config())
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigurationError(f"Config file not found: {config_path}")
        merged = OmegaConf.merge(merged, OmegaConf.load(config_path))

    data = OmegaConf.to_container(merged, resolve=True)
    config = build_table_config(
        columns=data["columns"],
        header_interval=data["header_interval"],
        log_dir=data["log_dir"],
    )
    config.source = config_path
    return config


def build_table_config(columns, header_interval, log_dir=None) -> TableConfig:
    """
    Validate raw settings (from a config file or the command line).

    Raises:
        ConfigurationError: If columns is not a list of known names or
            header_interval is not a positive integer
    """
    if isinstance(columns, str) or not isinstance(columns, (list, tuple)):
        raise ConfigurationError("columns must be a list of column names", "columns", columns)

    if isinstance(header_interval, bool) or not isinstance(header_interval, int):
        raise ConfigurationError(
            "header_interval must be an integer", "header_interval", header_interval
        )
    if header_interval < 1:
        raise ConfigurationError(
            "header_interval must be positive", "header_interval", header_interval
        )

    return TableConfig(
        columns=parse_columns([str(name) for name in columns]),
        header_interval=header_interval,
        log_dir=Path(log_dir) if log_dir else None,
    )
