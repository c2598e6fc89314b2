"""Simple ``pygame`` window for rendering rectangles and text."""

from __future__ import annotations

import pygame

from ..config import CONFIG


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int] | None = None, caption: str | None = None) -> None:
        self.size = size if size is not None else CONFIG.gui.window_size

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption if caption is not None else CONFIG.gui.caption)

        try:
            self._font = pygame.font.SysFont(None, 24)
        except pygame.error:
            self._font = pygame.font.Font(None, 24)

    def draw_rect(
        self, x: int, y: int, width: int, height: int, colour: tuple[int, int, int]
    ) -> None:
        pygame.draw.rect(self._surface, colour, (x, y, width, height))

    def draw_line(
        self, start: tuple[int, int], end: tuple[int, int], colour: tuple[int, int, int]
    ) -> None:
        pygame.draw.line(self._surface, colour, start, end)

    def draw_text(
        self, text: str, x: int, y: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: tuple[int, int, int] = (200, 200, 200)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
