"""Core components for the Fret Spectrum application."""

# Import interfaces for easier access
from .interfaces import (
    INotePlayer,
    IRenderSurface,
)

__all__ = ["INotePlayer", "IRenderSurface"]
