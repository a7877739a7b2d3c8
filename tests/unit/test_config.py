"""Unit tests for table configuration loading."""

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from unitable.contexts.tabulation.columns import Column
from unitable.contexts.tabulation.defaults import DEFAULT_COLUMNS, DEFAULT_HEADER_INTERVAL
from unitable.contexts.tabulation.exceptions import ConfigurationError, UnknownColumnError
from unitable.utils.config import CONFIG_ENV_VAR, build_table_config, load_table_config


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def write_config(path: Path, data: dict) -> Path:
    OmegaConf.save(OmegaConf.create(data), path)
    return path


@pytest.mark.unit
def test_defaults_without_config_file():
    config = load_table_config()

    assert config.columns == DEFAULT_COLUMNS
    assert config.header_interval == DEFAULT_HEADER_INTERVAL == 100
    assert config.log_dir is None
    assert config.source is None


@pytest.mark.unit
def test_config_file_overrides_defaults(tmp_path):
    path = write_config(
        tmp_path / "unitable.yaml",
        {"columns": ["character-index", "name"], "header_interval": 10, "log_dir": "logs"},
    )

    config = load_table_config(path)

    assert config.columns == [Column.CHARACTER_INDEX, Column.NAME]
    assert config.header_interval == 10
    assert config.log_dir == Path("logs")
    assert config.source == path


@pytest.mark.unit
def test_partial_config_keeps_other_defaults(tmp_path):
    path = write_config(tmp_path / "unitable.yaml", {"header_interval": 5})

    config = load_table_config(path)

    assert config.columns == DEFAULT_COLUMNS
    assert config.header_interval == 5


@pytest.mark.unit
def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path / "env.yaml", {"columns": ["glyph"]})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    config = load_table_config()

    assert config.columns == [Column.GLYPH]
    assert config.source == path


@pytest.mark.unit
def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_table_config(tmp_path / "absent.yaml")


@pytest.mark.unit
def test_unknown_column_in_config(tmp_path):
    path = write_config(tmp_path / "unitable.yaml", {"columns": ["name", "colour"]})

    with pytest.raises(UnknownColumnError, match="colour"):
        load_table_config(path)


@pytest.mark.unit
@pytest.mark.parametrize("interval", [0, -3, "ten", True])
def test_invalid_header_interval(interval):
    with pytest.raises(ConfigurationError, match="header_interval"):
        build_table_config(columns=["name"], header_interval=interval)


@pytest.mark.unit
def test_columns_must_be_a_list():
    with pytest.raises(ConfigurationError, match="columns"):
        build_table_config(columns="name", header_interval=100)


@pytest.mark.unit
def test_empty_column_list_is_allowed():
    assert build_table_config(columns=[], header_interval=100).columns == []
