"""Type definitions for the Fret Spectrum project."""

from typing import Optional, Tuple
from dataclasses import dataclass, field

# An (r, g, b) triple with 0-255 channels
Color = Tuple[int, int, int]


class InvalidNoteError(ValueError):
    """Raised when a pitch-class name is not one of the twelve known classes."""


@dataclass(frozen=True)
class NotePosition:
    """Represents a position on the guitar fretboard."""

    string: int  # String index (0 is the highest-pitched string)
    fret: int  # Fret number (0 for open string)

    def __str__(self):
        return f"S{self.string}F{self.fret}"


@dataclass(frozen=True)
class StringDef:
    """One string of the instrument: its open pitch class and register."""

    index: int
    open_pitch: str
    octave: int  # Octave of the open string


@dataclass(frozen=True)
class HighlightedPosition:
    """A fret/string position whose sounded pitch class belongs to the query."""

    string: int
    fret: int
    pitch_class: str  # e.g. 'C#'
    octave: int  # e.g. 5
    color: Color

    @property
    def position(self) -> NotePosition:
        return NotePosition(self.string, self.fret)

    @property
    def note_name(self) -> str:
        """Pitch class with octave, e.g. 'C#5'."""
        return f"{self.pitch_class}{self.octave}"


@dataclass(frozen=True)
class HighlightResult:
    """The outcome of one highlight query.

    Instances are immutable and replaced wholesale on every query; a renderer
    or click handler holding one never observes a partially built collection.
    """

    root: Optional[str] = None
    chord: Optional[str] = None  # Only set when the name was recognized
    positions: Tuple[HighlightedPosition, ...] = field(default_factory=tuple)
    advisory: Optional[str] = None  # e.g. an unrecognized chord/scale name
    error: Optional[str] = None  # Input validation failure, positions empty

    @property
    def title(self) -> str:
        if not self.root:
            return ""
        return f"{self.root} {self.chord}" if self.chord else self.root

    @property
    def pitch_classes(self) -> frozenset:
        return frozenset(p.pitch_class for p in self.positions)

    def __len__(self) -> int:
        return len(self.positions)
