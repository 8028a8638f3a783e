"""A fretboard session: the current query result plus click-to-play."""

import re
from typing import List, Optional

from .catalog import IntervalCatalog
from .core.events import FretboardEvents
from .core.interfaces import INotePlayer
from .fretboard import compute_highlights, default_catalog
from .geometry import FretboardLayout, find_position_at
from .logger import get_logger
from .note_types import HighlightedPosition, HighlightResult, InvalidNoteError
from .render import Instruction, scene_instructions
from .tuning import STANDARD_TUNING, Tuning

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9 _.-]")


def export_filename(title: Optional[str]) -> str:
    """A PNG file name derived from a display title, e.g. 'C_Major.png'."""
    safe = _UNSAFE_FILENAME_CHARS.sub("", title or "fretboard").replace(" ", "_").strip()
    return (safe or "fretboard") + ".png"


class FretboardSession:
    """Owns the current HighlightResult and answers clicks against it.

    Each query builds a complete, immutable result and then swaps the
    reference; readers only ever see a whole result.
    """

    def __init__(
        self,
        player: INotePlayer,
        catalog: Optional[IntervalCatalog] = None,
        tuning: Tuning = STANDARD_TUNING,
        layout: Optional[FretboardLayout] = None,
        events: Optional[FretboardEvents] = None,
        note_duration: float = 0.6,
    ):
        self.player = player
        self.catalog = catalog if catalog is not None else default_catalog()
        self.tuning = tuning
        self.layout = layout or FretboardLayout()
        self.events = events or FretboardEvents()
        self.note_duration = note_duration
        self._current = HighlightResult()

    @property
    def current(self) -> HighlightResult:
        return self._current

    @property
    def title(self) -> str:
        return self._current.title

    def query(self, root: str, chord: Optional[str] = None) -> HighlightResult:
        """Recompute highlights and publish them as the current result.

        An invalid root publishes an empty result carrying the error message.
        """
        try:
            result = compute_highlights(
                root,
                chord,
                catalog=self.catalog,
                tuning=self.tuning,
                num_frets=self.layout.num_frets,
            )
        except InvalidNoteError as e:
            logger.error(str(e))
            result = HighlightResult(error=str(e))

        self._current = result
        self.events.emit_highlights_changed(result)
        if result.error:
            self.events.emit_advisory(result.error)
        elif result.advisory:
            self.events.emit_advisory(result.advisory)
        return result

    def clear(self) -> None:
        self._current = HighlightResult()
        self.events.emit_highlights_changed(self._current)

    def position_at(self, x: float, y: float) -> Optional[HighlightedPosition]:
        return find_position_at(self._current.positions, x, y, self.layout)

    def click(self, x: float, y: float) -> Optional[HighlightedPosition]:
        """Play the note under (x, y), if any, and return its position."""
        position = self.position_at(x, y)
        if position is None:
            return None

        logger.info(f"Clicked {position.note_name} at {position.position}")
        self.player.play(position.pitch_class, position.octave, self.note_duration)
        self.events.emit_note_played(position)
        return position

    def instructions(self) -> List[Instruction]:
        return scene_instructions(self._current, self.layout, self.tuning.names())

    def export_filename(self) -> str:
        return export_filename(self.title)
