"""Centralized logging configuration for Fret Spectrum.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "fret_spectrum": logging.INFO,
    "fret_spectrum.main": logging.INFO,
    # Music theory engine
    "fret_spectrum.pitch": logging.INFO,
    "fret_spectrum.catalog": logging.INFO,
    "fret_spectrum.tuning": logging.INFO,
    "fret_spectrum.fretboard": logging.INFO,  # Set to DEBUG for per-query counts
    "fret_spectrum.geometry": logging.INFO,
    "fret_spectrum.render": logging.INFO,
    "fret_spectrum.session": logging.INFO,
    "fret_spectrum.playback": logging.INFO,
    "fret_spectrum.core": logging.INFO,
    "fret_spectrum.cli": logging.WARNING,
    "fret_spectrum.ui": logging.WARNING,  # UI modules often noisy, keep at WARNING
    "fret_spectrum.logger": logging.WARNING,  # Logger module itself should be quiet
    # Libraries/third-party
    "pygame": logging.ERROR,
    "PIL": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'fret_spectrum' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler if it doesn't exist
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("fret_spectrum"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        # Clear existing handlers and add the shared one
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        if _console_handler not in logger.handlers:
            logger.addHandler(_console_handler)
        logger.propagate = False

    logging.getLogger("fret_spectrum").info("Logging configuration complete")
