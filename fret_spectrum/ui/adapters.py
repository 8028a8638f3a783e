"""Adapters connecting render instructions to pygame surfaces."""

from pathlib import Path
from typing import Dict, Tuple, Union

import pygame

from ..core.interfaces import IRenderSurface
from ..logger import get_logger

logger = get_logger(__name__)

# Keyword arguments accepted by pygame.Rect for positioning
_ANCHORS = {
    "center",
    "topleft",
    "topright",
    "bottomleft",
    "bottomright",
    "midtop",
    "midbottom",
    "midleft",
    "midright",
}


class PygameSurface(IRenderSurface):
    """Draws render instructions onto a pygame.Surface."""

    def __init__(
        self,
        surface: "pygame.Surface",
        font_name: str = "Arial",
        background: Tuple[int, int, int] = (255, 255, 255),
    ):
        """Initialize the adapter.

        Args:
            surface: Target surface (a window or an off-screen surface)
            font_name: System font used for labels
            background: Fill color used by clear()
        """
        self.surface = surface
        self.font_name = font_name
        self.background = background
        self._fonts: Dict[Tuple[int, bool], "pygame.font.Font"] = {}

    def _font(self, size: int, bold: bool) -> "pygame.font.Font":
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(self.font_name, size, bold=bold)
        return self._fonts[key]

    def clear(self) -> None:
        self.surface.fill(self.background)

    def draw_line(self, start, end, color, width) -> None:
        pygame.draw.line(self.surface, color, start, end, max(int(width), 1))

    def fill_circle(self, center, radius, color) -> None:
        pygame.draw.circle(
            self.surface, color, (round(center[0]), round(center[1])), round(radius)
        )

    def draw_text(self, position, text, color, size, bold, anchor) -> None:
        if anchor not in _ANCHORS:
            raise ValueError(f"Unknown text anchor: {anchor}")
        text_surf = self._font(size, bold).render(text, True, color)
        text_rect = text_surf.get_rect(**{anchor: (round(position[0]), round(position[1]))})
        self.surface.blit(text_surf, text_rect)

    def save_png(self, path: Union[str, Path]) -> Path:
        """Export the surface as a PNG image."""
        path = Path(path)
        pygame.image.save(self.surface, str(path))
        logger.info(f"Saved fretboard image to {path}")
        return path
