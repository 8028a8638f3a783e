"""Note playback through sounddevice."""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from .core.interfaces import INotePlayer
from .logger import get_logger
from .note_types import InvalidNoteError
from .pitch import REFERENCE_OCTAVE, frequency_of

logger = get_logger(__name__)

DEFAULT_DURATION = 0.6  # seconds
DEFAULT_VOLUME = 0.2


@dataclass(frozen=True)
class ToneRequest:
    """A pitch class at an octave, sounded for a duration in seconds."""

    pitch_class: str
    octave: int = REFERENCE_OCTAVE
    duration: float = DEFAULT_DURATION

    @property
    def frequency(self) -> float:
        return frequency_of(self.pitch_class, self.octave)


def synthesize_tone(
    frequency: float,
    duration: float = DEFAULT_DURATION,
    sample_rate: int = 44100,
    volume: float = DEFAULT_VOLUME,
) -> np.ndarray:
    """Generate a sine wave whose gain ramps linearly from volume to 0.

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        sample_rate: Samples per second
        volume: Starting gain (0-1)

    Returns:
        Mono float32 samples
    """
    if frequency <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency}")
    n_samples = max(int(sample_rate * duration), 0)
    t = np.arange(n_samples) / sample_rate
    envelope = np.linspace(volume, 0.0, n_samples)
    tone = np.sin(2 * np.pi * frequency * t) * envelope
    return tone.astype(np.float32)


class SoundDevicePlayer(INotePlayer):
    """Fire-and-forget sine playback on the default output device."""

    SAMPLE_RATE: ClassVar[int] = 44100  # Hz

    def __init__(
        self,
        device_id: Optional[int] = None,
        sample_rate: Optional[int] = None,
        volume: float = DEFAULT_VOLUME,
        duration: float = DEFAULT_DURATION,
    ) -> None:
        """Initialize the player.

        Args:
            device_id: Output device ID, or None for the system default
            sample_rate: Sample rate in Hz, or None for default (44100)
            volume: Starting gain of each tone
            duration: Default tone length in seconds
        """
        self._device_id = device_id
        self._sample_rate = sample_rate or self.SAMPLE_RATE
        self._volume = volume
        self._duration = duration
        self._sd = None

    def _backend(self):
        # Import sounddevice here so that PortAudio is only needed for sound
        if self._sd is None:
            import sounddevice as sd

            self._sd = sd
        return self._sd

    def play(
        self, pitch_class: str, octave: int = REFERENCE_OCTAVE, duration: Optional[float] = None
    ) -> bool:
        request = ToneRequest(pitch_class, octave, duration or self._duration)
        try:
            frequency = request.frequency
        except InvalidNoteError:
            logger.warning(f"No frequency for note '{pitch_class}', not playing")
            return False

        samples = synthesize_tone(
            frequency, request.duration, self._sample_rate, self._volume
        )
        try:
            sd = self._backend()
            sd.play(samples, self._sample_rate, device=self._device_id)
        except Exception as e:
            logger.error(f"Error playing {pitch_class}{octave} ({frequency:.2f}Hz): {e}")
            return False

        logger.debug(f"Playing {pitch_class}{octave} at {frequency:.2f}Hz for {request.duration}s")
        return True

    def stop(self) -> None:
        if self._sd is not None:
            self._sd.stop()

    @property
    def sample_rate(self) -> int:
        return self._sample_rate
