"""Pixel layout of the fretboard and click hit-testing."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .note_types import HighlightedPosition
from .tuning import NUM_FRETS, NUM_STRINGS

Point = Tuple[float, float]

INLAY_FRETS = (3, 5, 7, 9, 12, 15, 17, 19, 21, 24, 27)


@dataclass(frozen=True)
class FretboardLayout:
    """Equal fret spacing, strings drawn as horizontal lines top to bottom."""

    offset_x: float = 40
    offset_y: float = 20
    fret_spacing: float = 40
    string_spacing: float = 25
    dot_radius: float = 8
    inlay_radius: float = 6
    num_strings: int = NUM_STRINGS
    num_frets: int = NUM_FRETS
    footer_height: float = 60  # Room for fret numbers below the board

    def fret_x(self, fret: int) -> float:
        return self.offset_x + fret * self.fret_spacing

    def string_y(self, string: int) -> float:
        return self.offset_y + string * self.string_spacing

    def point_for(self, string: int, fret: int) -> Point:
        """Center of the dot for a (string, fret) position."""
        return (self.fret_x(fret), self.string_y(string))

    @property
    def board_width(self) -> float:
        return self.num_frets * self.fret_spacing

    @property
    def board_height(self) -> float:
        return (self.num_strings - 1) * self.string_spacing

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (
            int(self.offset_x * 2 + self.board_width),
            int(self.offset_y * 2 + self.board_height + self.footer_height),
        )

    def inlay_points(self) -> List[Point]:
        """Position markers, centered between frets; octave frets get two."""
        y_mid = self.offset_y + self.string_spacing * (self.num_strings - 1) / 2
        points: List[Point] = []
        for fret in INLAY_FRETS:
            if fret > self.num_frets:
                continue
            x = (self.fret_x(fret - 1) + self.fret_x(fret)) / 2
            if fret % 12 == 0:
                points.append((x, y_mid - self.string_spacing * 1.5))
                points.append((x, y_mid + self.string_spacing * 1.5))
            else:
                points.append((x, y_mid))
        return points


def hit(center: Point, radius: float, x: float, y: float) -> bool:
    """Point-in-circle test, boundary included."""
    dx = x - center[0]
    dy = y - center[1]
    return dx * dx + dy * dy <= radius * radius


def find_position_at(
    positions: Iterable[HighlightedPosition],
    x: float,
    y: float,
    layout: FretboardLayout = FretboardLayout(),
) -> Optional[HighlightedPosition]:
    """The first highlighted position whose dot contains (x, y), if any."""
    for position in positions:
        if hit(layout.point_for(position.string, position.fret), layout.dot_radius, x, y):
            return position
    return None
