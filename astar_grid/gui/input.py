"""Handle basic input events and translate them into session commands."""

from __future__ import annotations

from typing import Any, Dict
import logging

import pygame

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


def _handle_click(session: Any, renderer: Any, button: int, pos: tuple[int, int]) -> None:
    coord = renderer.screen_to_cell(session.grid, pos)
    if coord is None:
        return
    if button == LEFT_BUTTON:
        session.paint(coord)
    elif button == RIGHT_BUTTON:
        session.erase(coord)


def handle_events(session: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events: edit the grid or run hot-key commands."""

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN:
            _handle_click(session, renderer, ev.button, ev.pos)

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                if session.start_search():
                    state["paused"] = False
            elif ev.key == pygame.K_p:
                state["paused"] = not state.get("paused", False)
                logger.info("Search %s.", "paused" if state["paused"] else "resumed")
            elif ev.key == pygame.K_n:
                state["step"] = True
            elif ev.key == pygame.K_c:
                session.reset()
            elif ev.key == pygame.K_f:
                state["fps_enabled"] = not state.get("fps_enabled", False)
                session.fps_enabled = state["fps_enabled"]
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
