from pathlib import Path

import pytest

from astar_grid.config import CONFIG_ENV_VAR, load_config, resolve_config_path


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert (cfg.grid.rows, cfg.grid.cols) == (50, 50)
    assert cfg.search.steps_per_second == 60.0
    assert cfg.gui.enabled is True
    assert cfg.gui.window_size == (900, 900)
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_values_read_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  rows: 12\n"
        "  cols: 20\n"
        "search:\n"
        "  steps_per_second: 5\n"
        "gui:\n"
        "  enabled: false\n"
        "  window_size: [400, 240]\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    astar_grid.search.driver: WARNING\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert (cfg.grid.rows, cfg.grid.cols) == (12, 20)
    assert cfg.search.steps_per_second == 5.0
    assert cfg.gui.enabled is False
    assert cfg.gui.window_size == (400, 240)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"astar_grid.search.driver": "WARNING"}


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).grid.rows == 50


@pytest.mark.parametrize(
    "body",
    ["grid:\n  rows: 0\n", "grid:\n  cols: -3\n", "search:\n  steps_per_second: 0\n"],
)
def test_invalid_values_rejected(tmp_path: Path, body: str):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_env_var_overrides_default_path(tmp_path: Path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("grid:\n  rows: 7\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert resolve_config_path() == path
    assert load_config().grid.rows == 7
    assert resolve_config_path(tmp_path / "explicit.yaml") == tmp_path / "explicit.yaml"
