"""Map a root pitch class and optional chord/scale onto fretboard positions.

This is the music-theory core: it walks every (string, fret) pair of the
tuning, works out the sounded pitch class with modular arithmetic over the
internal note cycle, and keeps the positions whose pitch class belongs to
the requested set. Each match carries its absolute octave (for playback) and
its wavelength color (for rendering).
"""

from typing import Optional, Sequence, Tuple

from .catalog import IntervalCatalog, reduce_to_pitch_class_set
from .logger import get_logger
from .note_types import HighlightedPosition, HighlightResult
from .pitch import color_of, index_of, normalize_pitch_class, pitch_class_at, safe_mod
from .tuning import NUM_FRETS, STANDARD_TUNING, Tuning, fret_range

logger = get_logger(__name__)

_DEFAULT_CATALOG: Optional[IntervalCatalog] = None


def default_catalog() -> IntervalCatalog:
    """The built-in catalog, built on first use and shared afterwards."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = IntervalCatalog.builtin()
    return _DEFAULT_CATALOG


def map_positions(
    root: str,
    intervals: Optional[Sequence[int]] = None,
    tuning: Tuning = STANDARD_TUNING,
    num_frets: int = NUM_FRETS,
) -> Tuple[HighlightedPosition, ...]:
    """Every position whose sounded pitch class matches the query.

    Args:
        root: Root pitch class (e.g. 'C', 'F#' or 'Gb')
        intervals: Semitone offsets from the root; empty or None highlights
            the root alone
        tuning: Instrument tuning
        num_frets: Highest fret, inclusive

    Returns:
        Matches ordered by string, then by fret

    Raises:
        InvalidNoteError: If root is not one of the twelve pitch classes
    """
    root = normalize_pitch_class(root)
    root_index = index_of(root)
    target_set = reduce_to_pitch_class_set(intervals) if intervals else None

    matches = []
    for string in tuning:
        open_index = tuning.open_pitch_index(string.index)
        for fret in fret_range(num_frets):
            sounded_index = open_index + fret
            sounded = pitch_class_at(sounded_index)

            if target_set is not None:
                semitone_distance = safe_mod(sounded_index - root_index)
                matched = semitone_distance in target_set
            else:
                matched = sounded == root

            if matched:
                matches.append(
                    HighlightedPosition(
                        string=string.index,
                        fret=fret,
                        pitch_class=sounded,
                        octave=tuning.octave_at(string.index, fret),
                        color=color_of(sounded),
                    )
                )

    return tuple(matches)


def compute_highlights(
    root: str,
    chord: Optional[str] = None,
    catalog: Optional[IntervalCatalog] = None,
    tuning: Tuning = STANDARD_TUNING,
    num_frets: int = NUM_FRETS,
) -> HighlightResult:
    """Resolve a chord/scale name and map the result onto the fretboard.

    An unrecognized chord name is not an error: the note alone is shown and
    the result carries an advisory message.

    Raises:
        InvalidNoteError: If root is not one of the twelve pitch classes
    """
    catalog = catalog if catalog is not None else default_catalog()
    root = normalize_pitch_class(root)

    intervals = catalog.lookup(chord)
    advisory = None
    if chord and intervals is None:
        advisory = f"Chord '{chord}' not recognized. Showing note only."
        logger.warning(advisory)

    positions = map_positions(root, intervals, tuning=tuning, num_frets=num_frets)
    logger.debug(
        f"Highlighted {len(positions)} positions for {root} "
        f"{chord if intervals else '(single note)'}"
    )
    return HighlightResult(
        root=root,
        chord=chord if intervals is not None else None,
        positions=positions,
        advisory=advisory,
    )
