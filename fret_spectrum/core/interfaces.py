"""Defines the core interfaces for the Fret Spectrum application."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Tuple

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class IRenderSurface(ABC):
    """Interface for drawing targets fed with render instructions."""

    @abstractmethod
    def draw_line(self, start: Point, end: Point, color: Color, width: int) -> None:
        """Stroke a straight line."""
        pass

    @abstractmethod
    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        """Fill a circle."""
        pass

    @abstractmethod
    def draw_text(
        self,
        position: Point,
        text: str,
        color: Color,
        size: int,
        bold: bool,
        anchor: str,
    ) -> None:
        """Render a text label anchored at a point (e.g. 'midtop', 'midright')."""
        pass


class INotePlayer(ABC):
    """Interface for audio backends that sound a pitch at an octave."""

    @abstractmethod
    def play(self, pitch_class: str, octave: int = 4, duration: float = 0.6) -> bool:
        """Start playing a note without waiting for it to finish.

        Returns:
            True if playback was started, False otherwise
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop any playing sound."""
        pass
