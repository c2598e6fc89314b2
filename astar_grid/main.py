"""Session bootstrap plus the GUI and headless main loops."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import logging
import time

from dotenv import load_dotenv

from .config import Config, load_config
from .core.grid import Grid
from .core.session import Session
from .core.time_manager import TimeManager
from .utils import observer
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view

logger = logging.getLogger(__name__)

FRAME_RATE = 60


def configure_logging(cfg: Config) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> tuple[Session, Config]:
    """Load ``.env`` and configuration, then build an empty session."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    cfg = load_config(config_path)
    configure_logging(cfg)

    grid = Grid(cfg.grid.rows, cfg.grid.cols)
    session = Session(grid, TimeManager(cfg.search.steps_per_second))
    session.gui_enabled = cfg.gui.enabled
    logger.info(
        "[Bootstrap] %dx%d grid, %.0f search steps per second, GUI %s",
        grid.rows,
        grid.cols,
        cfg.search.steps_per_second,
        "enabled" if session.gui_enabled else "disabled",
    )
    return session, cfg


def _advance_if_due(session: Session, state: Dict[str, Any], due: bool) -> bool:
    """Advance the search one step when unpaused or single-stepping."""

    if not session.searching:
        state["step"] = False
        return False
    if state.get("step"):
        state["step"] = False
    elif state.get("paused") or not due:
        return False
    session.advance()
    return True


def run_gui(session: Session, cfg: Config) -> None:
    import pygame

    from .gui import input as gui_input
    from .gui.renderer import Renderer
    from .gui.window import Window

    pygame.init()
    renderer = Renderer(Window(cfg.gui.window_size, cfg.gui.caption))
    tm = session.time_manager
    state: Dict[str, Any] = {"running": True, "paused": False, "step": False, "fps_enabled": False}
    clock = pygame.time.Clock()
    logger.info("Left click: start, end, walls. Right click: erase. SPACE: search. C: clear. ESC: quit.")

    try:
        while state["running"]:
            gui_input.handle_events(session, renderer, state)
            if not state["running"]:
                break
            _advance_if_due(session, state, tm.tick_due())

            renderer.window.clear()
            renderer.update(session)
            renderer.window.refresh()
            observer.record_tick(clock.tick(FRAME_RATE) / 1000.0)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        session.cancel_search()
        if pygame.get_init():
            pygame.quit()


def run_headless(session: Session) -> None:
    tm = session.time_manager
    observer.install_tick_observer(tm)
    view = get_view()
    state: Dict[str, Any] = {"running": True, "paused": False, "step": False}
    cli_thread = start_cli_thread()

    try:
        while state["running"]:
            cmd = poll_command()
            if cmd:
                execute(cmd.name, cmd.args, session, state)
            if not state["running"]:
                break
            if _advance_if_due(session, state, True):
                view.render(session.grid)
                if not session.searching:
                    logger.info(session.status_text())
                tm.sleep_until_next_tick()
            else:
                time.sleep(1.0 / FRAME_RATE)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        session.cancel_search()
        stop_cli_thread()
        if cli_thread.is_alive():
            cli_thread.join(timeout=0.1)


def main() -> None:
    session, cfg = bootstrap()
    if session.gui_enabled:
        run_gui(session, cfg)
    else:
        run_headless(session)
    logger.info("Application shutting down...")


if __name__ == "__main__":
    main()
