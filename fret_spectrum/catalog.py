"""Chord and scale interval catalog.

Entries are grouped by category for presentation; lookups go through a flat
name -> intervals mapping built once when the catalog is constructed.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .logger import get_logger
from .pitch import NUM_PITCH_CLASSES

logger = get_logger(__name__)

Intervals = Tuple[int, ...]
Groups = Mapping[str, Mapping[str, Sequence[int]]]

# Prefix marking an entry (as opposed to a category header) in display lists
DISPLAY_INDENT = "  "

CHORD_GROUPS: Dict[str, Dict[str, List[int]]] = {
    "TRIADS (3 notes)": {
        "Major": [0, 4, 7],
        "Minor": [0, 3, 7],
        "Diminished": [0, 3, 6],
        "Augmented": [0, 4, 8],
        "Suspended 2nd (sus2)": [0, 2, 7],
        "Suspended 4th (sus4)": [0, 5, 7],
    },
    "SEVENTH CHORDS (4 notes)": {
        "Major 7th (maj7)": [0, 4, 7, 11],
        "Dominant 7th (7)": [0, 4, 7, 10],
        "Minor 7th (m7)": [0, 3, 7, 10],
        "Minor-Major 7th (mM7)": [0, 3, 7, 11],
        "Half-Diminished 7th (ø7)": [0, 3, 6, 10],
        "Diminished 7th (dim7)": [0, 3, 6, 9],
        "Augmented 7th (aug7)": [0, 4, 8, 10],
        "Augmented Major 7th (augM7)": [0, 4, 8, 11],
    },
    "EXTENDED CHORDS (5+ notes)": {
        "Major 9th (maj9)": [0, 4, 7, 11, 14],
        "Dominant 9th (9)": [0, 4, 7, 10, 14],
        "Minor 9th (m9)": [0, 3, 7, 10, 14],
        "Major 11th (maj11)": [0, 4, 7, 11, 14, 17],
        "Dominant 11th (11)": [0, 4, 7, 10, 14, 17],
        "Minor 11th (m11)": [0, 3, 7, 10, 14, 17],
        "Major 13th (maj13)": [0, 4, 7, 11, 14, 17, 21],
        "Dominant 13th (13)": [0, 4, 7, 10, 14, 17, 21],
        "Minor 13th (m13)": [0, 3, 7, 10, 14, 17, 21],
    },
    "ALTERED CHORDS": {
        "7th ♭5": [0, 4, 6, 10],
        "7th #5": [0, 4, 8, 10],
        "7th ♭9": [0, 4, 7, 10, 13],
        "7th #9": [0, 4, 7, 10, 15],
        "7th ♭5♭9": [0, 4, 6, 10, 13],
        "7th #5#9": [0, 4, 8, 10, 15],
        "7alt (altered)": [0, 4, 6, 10, 13, 15],
    },
    "ADD CHORDS": {
        "Add 9 (add9)": [0, 4, 7, 14],
        "Minor Add 9 (madd9)": [0, 3, 7, 14],
        "Add 11 (add11)": [0, 4, 7, 17],
        "6th (6)": [0, 4, 7, 9],
        "Minor 6th (m6)": [0, 3, 7, 9],
        "6/9": [0, 4, 7, 9, 14],
    },
    "POWER CHORDS & OTHERS": {
        "Power Chord (5)": [0, 7],
        "5add9": [0, 7, 14],
        "Major Triad no 5th": [0, 4],
        "Minor Triad no 5th": [0, 3],
    },
}

_MODES: Dict[str, List[int]] = {
    "Major (Ionian)": [0, 2, 4, 5, 7, 9, 11],
    "Minor (Aeolian)": [0, 2, 3, 5, 7, 8, 10],
    "Dorian": [0, 2, 3, 5, 7, 9, 10],
    "Phrygian": [0, 1, 3, 5, 7, 8, 10],
    "Lydian": [0, 2, 4, 6, 7, 9, 11],
    "Mixolydian": [0, 2, 4, 5, 7, 9, 10],
    "Locrian": [0, 1, 3, 5, 6, 8, 10],
    "Pentatonic Major": [0, 2, 4, 7, 9],
    "Pentatonic Minor": [0, 3, 5, 7, 10],
    "Blues Scale": [0, 3, 5, 6, 7, 10],
}

SCALE_GROUPS: Dict[str, Dict[str, Dict[str, List[int]]]] = {
    "standard": {
        "Scales": {
            **_MODES,
            "Japanese Scale (hirajoushi)": [0, 2, 3, 7, 8],
            "Ryukyu Scale": [0, 4, 5, 7, 11],
        }
    },
    "classic": {
        "Scales": {
            **_MODES,
            "Japanese Scale": [0, 2, 5, 7, 9],
        }
    },
}

DEFAULT_VARIANT = "standard"


@dataclass(frozen=True)
class ChordOrScaleEntry:
    """A named interval set and the category it is presented under."""

    name: str
    intervals: Intervals
    category: str


def reduce_to_pitch_class_set(intervals: Iterable[int]) -> FrozenSet[int]:
    """Reduce semitone offsets modulo 12; duplicates after reduction collapse.

    >>> sorted(reduce_to_pitch_class_set([0, 4, 7, 11, 14]))
    [0, 2, 4, 7, 11]
    """
    return frozenset(offset % NUM_PITCH_CLASSES for offset in intervals)


def _validate_intervals(name: str, intervals: Sequence[int]) -> Intervals:
    values = tuple(int(i) for i in intervals)
    if not values or values[0] != 0:
        raise ValueError(f"Intervals for '{name}' must start with 0: {list(values)}")
    if any(i < 0 for i in values):
        raise ValueError(f"Intervals for '{name}' must be non-negative: {list(values)}")
    return values


class IntervalCatalog:
    """Immutable, categorized collection of chord and scale interval sets."""

    def __init__(self, entries: Iterable[ChordOrScaleEntry]):
        ordered: List[ChordOrScaleEntry] = []
        flat: Dict[str, Intervals] = {}
        for entry in entries:
            if entry.name in flat:
                raise ValueError(f"Duplicate chord/scale name: '{entry.name}'")
            intervals = _validate_intervals(entry.name, entry.intervals)
            flat[entry.name] = intervals
            ordered.append(ChordOrScaleEntry(entry.name, intervals, entry.category))

        self._entries: Tuple[ChordOrScaleEntry, ...] = tuple(ordered)
        self._lookup: Mapping[str, Intervals] = MappingProxyType(flat)
        logger.debug(f"Catalog built with {len(flat)} entries")

    @classmethod
    def from_groups(cls, groups: Groups) -> "IntervalCatalog":
        """Flatten {category: {name: intervals}} into a catalog."""
        return cls(
            ChordOrScaleEntry(name, tuple(intervals), category)
            for category, members in groups.items()
            for name, intervals in members.items()
        )

    @classmethod
    def builtin(cls, variant: str = DEFAULT_VARIANT) -> "IntervalCatalog":
        """The built-in chord table plus one of the scale table variants.

        Raises:
            ValueError: If the variant is unknown
        """
        if variant not in SCALE_GROUPS:
            raise ValueError(
                f"Unknown catalog variant: {variant} "
                f"(expected one of {sorted(SCALE_GROUPS)})"
            )
        return cls.from_groups({**CHORD_GROUPS, **SCALE_GROUPS[variant]})

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "IntervalCatalog":
        """Load a catalog from a JSON file shaped like {category: {name: [0, ...]}}."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            groups = json.load(f)
        if not isinstance(groups, dict) or not all(
            isinstance(members, dict) for members in groups.values()
        ):
            raise ValueError(f"Catalog file {path} must map categories to name/interval objects")
        catalog = cls.from_groups(groups)
        logger.info(f"Loaded {len(catalog)} chord/scale entries from {path}")
        return catalog

    def lookup(self, name: Optional[str]) -> Optional[Intervals]:
        """Intervals for an exact name, or None when the name is not recognized."""
        if not name:
            return None
        return self._lookup.get(name)

    def categories(self) -> List[str]:
        seen: List[str] = []
        for entry in self._entries:
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    def entries(self, category: Optional[str] = None) -> List[ChordOrScaleEntry]:
        if category is None:
            return list(self._entries)
        return [e for e in self._entries if e.category == category]

    def names(self) -> List[str]:
        return [e.name for e in self._entries]

    def display_options(self) -> List[Tuple[str, str]]:
        """Grouped (label, name) options for a chord selector.

        The first option is blank and category headers map to '' (no chord);
        entries are indented under their category.
        """
        options: List[Tuple[str, str]] = [("", "")]
        for category in self.categories():
            options.append((category, ""))
            for entry in self.entries(category):
                options.append((DISPLAY_INDENT + entry.name, entry.name))
        return options

    def as_mapping(self) -> Mapping[str, Intervals]:
        return self._lookup

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)

    def __iter__(self):
        return iter(self._entries)
