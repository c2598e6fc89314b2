"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict
import os

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"
CONFIG_ENV_VAR = "ASTAR_GRID_CONFIG"


@dataclass
class GridConfig:
    """Dimensions of the search grid."""

    rows: int = 50
    cols: int = 50


@dataclass
class SearchConfig:
    """Pacing of the animated search."""

    steps_per_second: float = 60.0


@dataclass
class GUIConfig:
    """pygame window settings."""

    enabled: bool = True
    window_size: tuple[int, int] = (900, 900)
    caption: str = "A* Algorithm"


@dataclass
class LoggingConfig:
    """Global and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    gui: GUIConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        rows=int(grid_data.get("rows", 50)),
        cols=int(grid_data.get("cols", 50)),
    )
    if grid.rows <= 0 or grid.cols <= 0:
        raise ValueError(f"grid.rows and grid.cols must be positive, got {grid.rows}x{grid.cols}")

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        steps_per_second=float(search_data.get("steps_per_second", 60)),
    )
    if search.steps_per_second <= 0:
        raise ValueError("search.steps_per_second must be positive")

    gui_data = data.get("gui", {}) or {}
    size = gui_data.get("window_size", [900, 900])
    gui = GUIConfig(
        enabled=bool(gui_data.get("enabled", True)),
        window_size=(int(size[0]), int(size[1])),
        caption=str(gui_data.get("caption", "A* Algorithm")),
    )

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, gui=gui, logging=logging_cfg)


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return ``path``, the ``ASTAR_GRID_CONFIG`` override or the default."""

    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_PATH


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    config_path = resolve_config_path(path)
    if config_path.is_file():
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_ENV_VAR",
    "Config",
    "GridConfig",
    "SearchConfig",
    "GUIConfig",
    "LoggingConfig",
    "load_config",
    "resolve_config_path",
]
