"""Event system for Fret Spectrum components."""

from typing import Dict, List, Callable, Any
from enum import Enum, auto

from ..logger import get_logger

logger = get_logger(__name__)


class FretboardEventType(Enum):
    """Event types raised by a fretboard session."""

    HIGHLIGHTS_CHANGED = auto()
    NOTE_PLAYED = auto()
    ADVISORY = auto()


class EventEmitter:
    """Event emitter for Fret Spectrum components."""

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners: Dict[Any, List[Callable]] = {}

    def on(self, event_type: Any, callback: Callable) -> None:
        """Register a callback for an event type.

        Args:
            event_type: Event type to listen for
            callback: Function to call when the event occurs
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []

        if callback not in self._listeners[event_type]:
            self._listeners[event_type].append(callback)
            logger.debug(f"Added listener for event {event_type}")

    def emit(self, event_type: Any, *args, **kwargs) -> None:
        """Emit an event.

        Args:
            event_type: Event type to emit
            *args: Positional arguments to pass to listeners
            **kwargs: Keyword arguments to pass to listeners
        """
        if event_type not in self._listeners:
            return

        for callback in self._listeners[event_type]:
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in event listener for {event_type}: {e}")

    def clear(self) -> None:
        """Remove all event listeners."""
        self._listeners = {}
        logger.debug("Cleared all event listeners")


class FretboardEvents:
    """Event emitter specifically for fretboard session events."""

    def __init__(self):
        self._emitter = EventEmitter()

    def on_highlights_changed(self, callback: Callable) -> None:
        """Register a callback receiving each newly published HighlightResult."""
        self._emitter.on(FretboardEventType.HIGHLIGHTS_CHANGED, callback)

    def on_note_played(self, callback: Callable) -> None:
        """Register a callback receiving the HighlightedPosition that was clicked."""
        self._emitter.on(FretboardEventType.NOTE_PLAYED, callback)

    def on_advisory(self, callback: Callable) -> None:
        """Register a callback receiving advisory and validation messages."""
        self._emitter.on(FretboardEventType.ADVISORY, callback)

    def emit_highlights_changed(self, result) -> None:
        self._emitter.emit(FretboardEventType.HIGHLIGHTS_CHANGED, result)

    def emit_note_played(self, position) -> None:
        self._emitter.emit(FretboardEventType.NOTE_PLAYED, position)

    def emit_advisory(self, message: str) -> None:
        self._emitter.emit(FretboardEventType.ADVISORY, message)

    def clear(self) -> None:
        """Remove all event listeners."""
        self._emitter.clear()
