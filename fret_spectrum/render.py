"""Render instructions for the fretboard drawing.

The instructions are plain pixel/color records. A surface implementing
IRenderSurface turns them into pixels; nothing here knows how.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .core.interfaces import IRenderSurface
from .geometry import FretboardLayout
from .logger import get_logger
from .note_types import HighlightedPosition, HighlightResult
from .pitch import hex_to_rgb

logger = get_logger(__name__)

Color = Tuple[int, int, int]
Point = Tuple[float, float]

STRING_COLOR: Color = hex_to_rgb("#999999")
FRET_COLOR: Color = hex_to_rgb("#999999")
NUT_COLOR: Color = hex_to_rgb("#000000")
LABEL_COLOR: Color = hex_to_rgb("#000000")
INLAY_COLOR: Color = hex_to_rgb("#ADD8E6")

STRING_WIDTH = 1
FRET_WIDTH = 2
NUT_WIDTH = 4


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: Color


@dataclass(frozen=True)
class Text:
    position: Point
    text: str
    color: Color = LABEL_COLOR
    size: int = 10
    bold: bool = True
    anchor: str = "center"


Instruction = Union[Line, Circle, Text]


def fretboard_instructions(
    layout: FretboardLayout, string_names: Sequence[str]
) -> List[Instruction]:
    """Strings, frets, fret numbers, string names and inlays."""
    instructions: List[Instruction] = []
    left = layout.fret_x(0)
    right = layout.fret_x(layout.num_frets)
    top = layout.string_y(0)
    bottom = layout.string_y(layout.num_strings - 1)

    # Strings (horizontal lines)
    for string in range(layout.num_strings):
        y = layout.string_y(string)
        instructions.append(Line((left, y), (right, y), STRING_COLOR, STRING_WIDTH))

    # Frets (vertical lines), the nut thicker and black
    for fret in range(layout.num_frets + 1):
        x = layout.fret_x(fret)
        if fret == 0:
            instructions.append(Line((x, top), (x, bottom), NUT_COLOR, NUT_WIDTH))
        else:
            instructions.append(Line((x, top), (x, bottom), FRET_COLOR, FRET_WIDTH))

    # Fret numbers under the board
    label_y = bottom + layout.string_spacing * 0.5
    for fret in range(layout.num_frets + 1):
        instructions.append(
            Text((layout.fret_x(fret), label_y), str(fret), size=10, anchor="midtop")
        )

    # String names left of the nut
    for string, name in enumerate(string_names[: layout.num_strings]):
        instructions.append(
            Text((left - 10, layout.string_y(string)), name, size=12, anchor="midright")
        )

    for point in layout.inlay_points():
        instructions.append(Circle(point, layout.inlay_radius, INLAY_COLOR))

    return instructions


def note_instructions(
    positions: Iterable[HighlightedPosition], layout: FretboardLayout
) -> List[Instruction]:
    """One filled dot per highlighted position, in its pitch-class color."""
    return [
        Circle(layout.point_for(p.string, p.fret), layout.dot_radius, p.color)
        for p in positions
    ]


def scene_instructions(
    result: HighlightResult, layout: FretboardLayout, string_names: Sequence[str]
) -> List[Instruction]:
    """The board followed by the note dots of a query result."""
    return fretboard_instructions(layout, string_names) + note_instructions(
        result.positions, layout
    )


def render(instructions: Iterable[Instruction], surface: IRenderSurface) -> int:
    """Replay instructions onto a surface; returns the number drawn."""
    count = 0
    for instruction in instructions:
        if isinstance(instruction, Line):
            surface.draw_line(
                instruction.start, instruction.end, instruction.color, instruction.width
            )
        elif isinstance(instruction, Circle):
            surface.fill_circle(instruction.center, instruction.radius, instruction.color)
        elif isinstance(instruction, Text):
            surface.draw_text(
                instruction.position,
                instruction.text,
                instruction.color,
                instruction.size,
                instruction.bold,
                instruction.anchor,
            )
        else:
            raise TypeError(f"Unknown render instruction: {instruction!r}")
        count += 1
    logger.debug(f"Rendered {count} instructions")
    return count
