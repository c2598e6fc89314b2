"""Implementations of development CLI commands."""

from __future__ import annotations

from typing import Any, Dict, Sequence
import logging

from ...core.grid import Role
from ..observer import toggle_live_fps, print_fps as observer_print_fps
from .command_parser import parse_coord
from .terminal_view import get_view

logger = logging.getLogger(__name__)

_PLACE_ROLES = {
    "start": Role.START,
    "end": Role.END,
    "wall": Role.BARRIER,
}


def place(session: Any, role: Role, args: Sequence[str]) -> None:
    coord = parse_coord(args)
    if coord is None:
        logger.error("Usage: /start|/end|/wall <row> <col>")
        return
    if not session.grid.in_bounds(coord):
        logger.error("Cell %s is outside the %dx%d grid.", coord, session.grid.rows, session.grid.cols)
        return
    if session.place(coord, role):
        logger.info("Placed %s at %s.", role.value, coord)


def erase(session: Any, args: Sequence[str]) -> None:
    coord = parse_coord(args)
    if coord is None or not session.grid.in_bounds(coord):
        logger.error("Usage: /erase <row> <col> (inside the grid)")
        return
    if session.erase(coord):
        logger.info("Erased %s.", coord)


def run(session: Any, state: Dict[str, Any]) -> None:
    if session.start_search():
        state["paused"] = False
        logger.info("Search started.")


def pause(state: Dict[str, Any]) -> None:
    state["paused"] = not state.get("paused", False)
    logger.info("Search %s.", "paused" if state["paused"] else "resumed")


def step(state: Dict[str, Any]) -> None:
    if state.get("paused", False):
        state["step"] = True
        logger.info("Stepping one expansion.")
    else:
        logger.info("Search is not paused. Use /pause first.")


def reset(session: Any) -> None:
    session.reset()


def cancel(session: Any) -> None:
    if session.searching:
        session.cancel_search()
    else:
        logger.info("No search is running.")


def view(session: Any, state: Dict[str, Any]) -> None:
    terminal = get_view()
    state["view"] = terminal.toggle()
    terminal.render(session.grid)


def fps(session: Any, state: Dict[str, Any]) -> None:
    fps_is_now_enabled = toggle_live_fps()
    state["fps_enabled"] = fps_is_now_enabled
    session.fps_enabled = fps_is_now_enabled
    if fps_is_now_enabled:
        logger.info("Live FPS display enabled.")
        observer_print_fps()
    else:
        logger.info("Live FPS display disabled.")


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                - Show this help message.",
        "  /start <row> <col>   - Place the start cell.",
        "  /end <row> <col>     - Place the end cell.",
        "  /wall <row> <col>    - Place a barrier.",
        "  /erase <row> <col>   - Clear a cell.",
        "  /run                 - Start the search.",
        "  /pause               - Pause or resume the search.",
        "  /step                - Advance one expansion if paused.",
        "  /cancel              - Abort the running search.",
        "  /reset               - Cancel any search and clear the grid.",
        "  /view                - Toggle the ASCII grid view.",
        "  /fps                 - Toggle live FPS display in console.",
        "  /quit                - Exit the application.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], session: Any, state: Dict[str, Any]) -> None:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    if cmd_lower in _PLACE_ROLES:
        place(session, _PLACE_ROLES[cmd_lower], args)
    elif cmd_lower == "erase":
        erase(session, args)
    elif cmd_lower == "run":
        run(session, state)
    elif cmd_lower == "pause":
        pause(state)
    elif cmd_lower == "step":
        step(state)
    elif cmd_lower == "cancel":
        cancel(session)
    elif cmd_lower == "reset":
        reset(session)
    elif cmd_lower == "view":
        view(session, state)
    elif cmd_lower == "fps":
        fps(session, state)
    elif cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)


__all__ = [
    "place", "erase", "run", "pause", "step", "cancel", "reset",
    "view", "fps", "help_command", "execute",
]
