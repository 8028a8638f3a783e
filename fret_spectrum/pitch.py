"""Pitch classes, their wavelength colors and playback frequencies."""

from typing import Dict, List, Optional

from .logger import get_logger
from .note_types import Color, InvalidNoteError

# Get logger for this module
logger = get_logger(__name__)

NUM_PITCH_CLASSES = 12

# Internal cyclic order used for fretboard index arithmetic. Starts at E so
# that the open low and high strings sit at index 0.
NOTE_SEQUENCE: List[str] = [
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
    "C",
    "C#",
    "D",
    "D#",
]

# Standard chromatic order (C=0), used for colors and octave numbering
STANDARD_NOTES: List[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

FLAT_TO_SHARP: Dict[str, str] = {
    "Ab": "G#",
    "Bb": "A#",
    "Cb": "B",
    "Db": "C#",
    "Eb": "D#",
    "Fb": "E",
    "Gb": "F#",
    "E#": "F",
    "B#": "C",
}

# C (lowest) at 700nm red down to B at 425nm violet-blue
WAVELENGTH_COLOR_MAP: Dict[str, str] = {
    "C": "#ff0000",  # 700nm
    "C#": "#ff2a00",  # 675nm
    "D": "#ff5500",  # 650nm
    "D#": "#ff8000",  # 625nm
    "E": "#ffab00",  # 600nm
    "F": "#ffd600",  # 575nm
    "F#": "#eaff00",  # 550nm
    "G": "#b5ff00",  # 525nm
    "G#": "#00ff80",  # 500nm
    "A": "#00ffd6",  # 475nm
    "A#": "#00aaff",  # 450nm
    "B": "#0055ff",  # 425nm
}

DEFAULT_DOT_COLOR: Color = (128, 128, 128)

# Rounded concert-pitch frequencies at octave 4. Kept literal rather than
# derived from A4=440Hz so values match the published table exactly.
REFERENCE_OCTAVE = 4
NOTE_FREQUENCIES: Dict[str, float] = {
    "C": 261.63,
    "C#": 277.18,
    "Db": 277.18,
    "D": 293.66,
    "D#": 311.13,
    "Eb": 311.13,
    "E": 329.63,
    "F": 349.23,
    "F#": 369.99,
    "Gb": 369.99,
    "G": 392.00,
    "G#": 415.30,
    "Ab": 415.30,
    "A": 440.00,
    "A#": 466.16,
    "Bb": 466.16,
    "B": 493.88,
}


def hex_to_rgb(hex_color: str) -> Color:
    """Convert #RRGGBB to a tuple of ints (R, G, B)."""
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


_COLORS: Dict[str, Color] = {
    name: hex_to_rgb(value) for name, value in WAVELENGTH_COLOR_MAP.items()
}


def safe_mod(value: int, modulus: int = NUM_PITCH_CLASSES) -> int:
    """Remainder that is always in [0, modulus), even for negative values."""
    return ((value % modulus) + modulus) % modulus


def normalize_pitch_class(name: str) -> str:
    """Return the sharp spelling of a pitch-class name.

    Raises:
        InvalidNoteError: If the name is not one of the twelve pitch classes
    """
    note = str(name).strip() if name is not None else ""
    if len(note) > 1:
        note = note[0].upper() + note[1:]
    else:
        note = note.upper()
    note = FLAT_TO_SHARP.get(note, note)
    if note not in STANDARD_NOTES:
        raise InvalidNoteError(f"Note '{name}' not found in note sequence")
    return note


def is_pitch_class(name: str) -> bool:
    try:
        normalize_pitch_class(name)
    except InvalidNoteError:
        return False
    return True


def pitch_class_at(index: int) -> str:
    """Pitch class at an unbounded internal index (wraps every 12)."""
    return NOTE_SEQUENCE[safe_mod(index)]


def index_of(name: str) -> int:
    """Position of a pitch class inside NOTE_SEQUENCE."""
    return NOTE_SEQUENCE.index(normalize_pitch_class(name))


def standard_index(name: str) -> int:
    """Position of a pitch class in the C-rooted ordering (C=0 ... B=11)."""
    return STANDARD_NOTES.index(normalize_pitch_class(name))


def color_of(name: str) -> Color:
    """Wavelength color of a pitch class, falling back to DEFAULT_DOT_COLOR."""
    try:
        return _COLORS[normalize_pitch_class(name)]
    except InvalidNoteError:
        logger.warning(f"No color for '{name}', using default dot color")
        return DEFAULT_DOT_COLOR


def frequency_of(name: str, octave: Optional[int] = REFERENCE_OCTAVE) -> float:
    """Playback frequency in Hz for a pitch class at the given octave.

    Args:
        name: Pitch class, sharp or flat spelling (e.g. 'C#' or 'Db')
        octave: Octave number; 4 is the reference octave

    Returns:
        The table frequency scaled by 2 ** (octave - 4)

    Raises:
        InvalidNoteError: If the name has no frequency entry
    """
    if octave is None:
        octave = REFERENCE_OCTAVE
    freq = NOTE_FREQUENCIES.get(str(name).strip())
    if freq is None:
        freq = NOTE_FREQUENCIES[normalize_pitch_class(name)]
    return freq * (2.0 ** (octave - REFERENCE_OCTAVE))
