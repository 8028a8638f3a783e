"""Fixed six-string standard tuning and octave bookkeeping."""

from typing import Iterator, List, Optional, Sequence, Tuple

from .logger import get_logger
from .note_types import StringDef
from .pitch import NUM_PITCH_CLASSES, index_of, normalize_pitch_class, standard_index

logger = get_logger(__name__)

NUM_STRINGS = 6
NUM_FRETS = 21  # Matching a stratocaster

# Ordered top-to-bottom as displayed: high E -> B -> G -> D -> A -> low E
STANDARD_OPEN_PITCHES: Tuple[str, ...] = ("E", "B", "G", "D", "A", "E")

# Octave of each open string, string 0 first
DEFAULT_STRING_OCTAVES: Tuple[int, ...] = (6, 5, 5, 5, 4, 4)


def fret_range(num_frets: int = NUM_FRETS) -> range:
    """Frets 0..num_frets inclusive."""
    if num_frets < 0:
        raise ValueError(f"Fret count must be non-negative, got {num_frets}")
    return range(num_frets + 1)


class Tuning:
    """An ordered set of exactly NUM_STRINGS strings, index 0 highest-pitched."""

    def __init__(self, strings: Sequence[StringDef]):
        if len(strings) != NUM_STRINGS:
            raise ValueError(
                f"A tuning needs exactly {NUM_STRINGS} strings, got {len(strings)}"
            )
        for expected, string in enumerate(strings):
            if string.index != expected:
                raise ValueError(
                    f"String {string.open_pitch} has index {string.index}, expected {expected}"
                )
        self._strings: Tuple[StringDef, ...] = tuple(
            StringDef(s.index, normalize_pitch_class(s.open_pitch), int(s.octave))
            for s in strings
        )

    @classmethod
    def standard(cls, octaves: Optional[Sequence[int]] = None) -> "Tuning":
        """Standard EADGBE tuning, optionally with a different octave table."""
        octaves = tuple(octaves) if octaves is not None else DEFAULT_STRING_OCTAVES
        if len(octaves) != NUM_STRINGS:
            raise ValueError(
                f"Expected {NUM_STRINGS} string octaves, got {len(octaves)}"
            )
        return cls(
            [
                StringDef(i, pitch, octave)
                for i, (pitch, octave) in enumerate(zip(STANDARD_OPEN_PITCHES, octaves))
            ]
        )

    def string_def(self, string_index: int) -> StringDef:
        if not 0 <= string_index < NUM_STRINGS:
            raise IndexError(f"String index out of range: {string_index}")
        return self._strings[string_index]

    def open_pitch_index(self, string_index: int) -> int:
        """Position of the string's open pitch class in the internal cycle."""
        return index_of(self.string_def(string_index).open_pitch)

    def octave_at(self, string_index: int, fret: int) -> int:
        """Octave of the pitch sounded at a fret.

        Counted from the open string's C-rooted position, so crossing each
        full 12-semitone span above the last C adds exactly one octave.
        """
        string = self.string_def(string_index)
        standard_open_index = standard_index(string.open_pitch)
        return string.octave + (standard_open_index + fret) // NUM_PITCH_CLASSES

    def names(self) -> List[str]:
        return [s.open_pitch for s in self._strings]

    @property
    def strings(self) -> Tuple[StringDef, ...]:
        return self._strings

    def __len__(self) -> int:
        return len(self._strings)

    def __iter__(self) -> Iterator[StringDef]:
        return iter(self._strings)

    def __repr__(self) -> str:
        spelled = " ".join(f"{s.open_pitch}{s.octave}" for s in self._strings)
        return f"Tuning({spelled})"


STANDARD_TUNING = Tuning.standard()
