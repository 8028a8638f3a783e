#!/usr/bin/env python3

import argparse
import sys

from fret_spectrum.catalog import SCALE_GROUPS
from fret_spectrum.core.config import ConfigManager
from fret_spectrum.core.factory import ComponentFactory
from fret_spectrum.logger import get_logger
from fret_spectrum.logging_config import setup_logging
from fret_spectrum.pitch import is_pitch_class, normalize_pitch_class


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fret Spectrum - Guitar fretboard chord and scale explorer"
    )

    parser.add_argument(
        "--root", type=str, help="Root note to display at startup (e.g. C, F#, Bb)."
    )
    parser.add_argument(
        "--chord",
        type=str,
        help="Chord or scale name to display at startup (e.g. 'Major', 'Dorian').",
    )
    parser.add_argument(
        "--catalog-variant",
        type=str,
        choices=sorted(SCALE_GROUPS),
        help="Built-in scale table to use (default: from configuration).",
    )
    parser.add_argument(
        "--config-dir", type=str, help="Configuration directory (default: ~/.config/fret_spectrum)."
    )
    parser.add_argument(
        "--export-dir", type=str, help="Directory for saved PNG images (default: cwd)."
    )
    parser.add_argument("--mute", action="store_true", help="Disable note playback.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the Fret Spectrum window."""
    args = parse_arguments(argv)

    # Configure logging
    setup_logging(level="DEBUG" if args.debug else "INFO")
    logger = get_logger(__name__)

    if args.root and not is_pitch_class(args.root):
        logger.error(f"Unknown root note: {args.root}")
        return 2

    # Imported here so that the text CLI and tests never pull in a display
    from fret_spectrum.ui import PygameUI

    try:
        factory = ComponentFactory(ConfigManager(args.config_dir))
        player = factory.create_player("null" if args.mute else "default")
        session = factory.create_session(player=player, catalog_variant=args.catalog_variant)

        ui = PygameUI(session, export_dir=args.export_dir)
        root = normalize_pitch_class(args.root) if args.root else None
        ui.run(root=root, chord=args.chord)

    except Exception:
        logger.exception("An unhandled error occurred in the main application.")
        raise
    finally:
        logger.info("Fret Spectrum is shutting down.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
