"""Command-line interface for Fret Spectrum."""

from .main import cli, format_fretboard

__all__ = ["cli", "format_fretboard"]
