"""Text command-line interface for Fret Spectrum."""

import time
from typing import List, Optional

import click
import pyfiglet

from ..catalog import DEFAULT_VARIANT, SCALE_GROUPS, IntervalCatalog
from ..fretboard import compute_highlights
from ..logging_config import setup_logging
from ..note_types import HighlightResult, InvalidNoteError
from ..pitch import frequency_of, normalize_pitch_class
from ..tuning import NUM_FRETS, STANDARD_TUNING, Tuning

CELL_WIDTH = 4


def format_fretboard(
    result: HighlightResult, tuning: Tuning = STANDARD_TUNING, num_frets: int = NUM_FRETS
) -> str:
    """Render a result as a text fretboard, one line per string.

    Highlighted frets show their pitch class, e.g. '-C#-'; others show '----'.
    """
    by_position = {(p.string, p.fret): p for p in result.positions}
    header = "   " + "".join(f"{fret:^{CELL_WIDTH}}" for fret in range(num_frets + 1))
    lines: List[str] = [header.rstrip()]
    for string in tuning:
        cells = []
        for fret in range(num_frets + 1):
            position = by_position.get((string.index, fret))
            label = position.pitch_class if position else ""
            cells.append(f"{label:-^{CELL_WIDTH - 1}}")
        lines.append(f"{string.open_pitch:<2}|" + "|".join(cells) + "|")
    return "\n".join(lines)


def format_positions(result: HighlightResult) -> str:
    lines = [f"{'string':>6} {'fret':>4} {'note':>5} {'freq (Hz)':>10}"]
    for p in result.positions:
        freq = frequency_of(p.pitch_class, p.octave)
        lines.append(f"{p.string:>6} {p.fret:>4} {p.note_name:>5} {freq:>10.2f}")
    return "\n".join(lines)


def _load_catalog(variant: str, catalog_file: Optional[str]) -> IntervalCatalog:
    try:
        if catalog_file:
            return IntervalCatalog.from_json(catalog_file)
        return IntervalCatalog.builtin(variant)
    except ValueError as e:
        raise click.ClickException(str(e))


def _validate_root(ctx, param, value):
    try:
        return normalize_pitch_class(value)
    except InvalidNoteError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.option("--debug", is_flag=True, help="Show debug information")
def cli(debug):
    """Explore chords and scales on a guitar fretboard"""
    setup_logging(level="DEBUG" if debug else "ERROR")


@cli.command()
@click.argument("root")
@click.option("--chord", "-c", default=None, help="Chord or scale name, e.g. 'Major'")
@click.option(
    "--frets",
    "-f",
    type=click.IntRange(min=0),
    default=NUM_FRETS,
    show_default=True,
    help="Number of frets",
)
@click.option("--positions", "-p", is_flag=True, help="List every position with its octave")
@click.option(
    "--variant",
    type=click.Choice(sorted(SCALE_GROUPS)),
    default=DEFAULT_VARIANT,
    show_default=True,
    help="Built-in scale table",
)
@click.option("--catalog-file", type=click.Path(exists=True, dir_okay=False), help="JSON catalog file")
@click.option("--banner/--no-banner", default=True, help="Print the title as a figlet banner")
def show(root, chord, frets, positions, variant, catalog_file, banner):
    """Show the positions of ROOT plus an optional chord or scale"""
    catalog = _load_catalog(variant, catalog_file)
    try:
        result = compute_highlights(root, chord, catalog=catalog, num_frets=frets)
    except InvalidNoteError as e:
        raise click.BadParameter(str(e), param_hint="ROOT")

    if result.advisory:
        click.echo(f"Warning: {result.advisory}", err=True)

    if banner:
        click.echo(pyfiglet.figlet_format(result.title).rstrip())
    else:
        click.echo(result.title)
    click.echo(format_fretboard(result, num_frets=frets))

    if positions:
        click.echo()
        click.echo(format_positions(result))


@cli.command(name="list")
@click.option(
    "--variant",
    type=click.Choice(sorted(SCALE_GROUPS)),
    default=DEFAULT_VARIANT,
    show_default=True,
    help="Built-in scale table",
)
@click.option("--catalog-file", type=click.Path(exists=True, dir_okay=False), help="JSON catalog file")
def list_catalog(variant, catalog_file):
    """List the known chords and scales by category"""
    catalog = _load_catalog(variant, catalog_file)
    for category in catalog.categories():
        click.echo(category)
        for entry in catalog.entries(category):
            click.echo(f"  {entry.name:<32} {list(entry.intervals)}")


@cli.command()
@click.argument("root", callback=_validate_root)
@click.argument("octave", type=int, default=4)
@click.option("--duration", "-d", default=0.6, show_default=True, help="Seconds to play")
@click.option("--config-dir", default=None, help="Configuration directory")
def play(root, octave, duration, config_dir):
    """Play ROOT at OCTAVE through the audio device"""
    from ..core.config import ConfigManager
    from ..core.factory import ComponentFactory

    player = ComponentFactory(ConfigManager(config_dir)).create_player()
    click.echo(f"Playing {root}{octave} ({frequency_of(root, octave):.2f} Hz)")
    if not player.play(root, octave, duration):
        raise click.ClickException("Playback failed, see log for details")
    # sounddevice plays in the background; keep the process alive until done
    time.sleep(duration)


def main():
    cli()


if __name__ == "__main__":
    main()
