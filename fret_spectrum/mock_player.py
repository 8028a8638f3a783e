from typing import List, Optional

from .core.interfaces import INotePlayer
from .playback import DEFAULT_DURATION, ToneRequest


class NullPlayer(INotePlayer):
    """A player that accepts every request and makes no sound."""

    def play(self, pitch_class, octave=4, duration=None):
        return True

    def stop(self):
        pass


class RecordingPlayer(INotePlayer):
    """A player for unit tests. Records every request instead of playing it."""

    def __init__(self):
        self.requests: List[ToneRequest] = []
        self.stopped = False

    def play(self, pitch_class, octave=4, duration: Optional[float] = None):
        self.requests.append(ToneRequest(pitch_class, octave, duration or DEFAULT_DURATION))
        return True

    def stop(self):
        self.stopped = True
