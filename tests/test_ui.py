import os
import shutil
import tempfile
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from fret_spectrum.mock_player import RecordingPlayer  # noqa: E402
from fret_spectrum.render import Circle, Line, Text, render  # noqa: E402
from fret_spectrum.session import FretboardSession  # noqa: E402
from fret_spectrum.ui import PygameUI  # noqa: E402
from fret_spectrum.ui.adapters import PygameSurface  # noqa: E402

WHITE = (255, 255, 255)
RED = (255, 0, 0)


class TestPygameSurface(unittest.TestCase):
    def setUp(self):
        self.surface = pygame.Surface((100, 60))
        self.adapter = PygameSurface(self.surface)
        self.adapter.clear()

    def pixel(self, x, y):
        return tuple(self.surface.get_at((x, y)))[:3]

    def test_clear(self):
        self.assertEqual(self.pixel(0, 0), WHITE)
        self.assertEqual(self.pixel(99, 59), WHITE)

    def test_fill_circle(self):
        self.adapter.fill_circle((50, 30), 8, RED)
        self.assertEqual(self.pixel(50, 30), RED)
        self.assertEqual(self.pixel(53, 30), RED)
        self.assertEqual(self.pixel(70, 30), WHITE)

    def test_draw_line(self):
        self.adapter.draw_line((10, 10), (90, 10), (0, 0, 0), 2)
        self.assertEqual(self.pixel(50, 10), (0, 0, 0))
        self.assertEqual(self.pixel(50, 20), WHITE)

    def test_draw_text(self):
        before = pygame.image.tostring(self.surface, "RGB")
        render([Text((50, 30), "E", anchor="center")], self.adapter)
        self.assertNotEqual(pygame.image.tostring(self.surface, "RGB"), before)

    def test_bad_anchor(self):
        with self.assertRaises(ValueError):
            self.adapter.draw_text((0, 0), "E", (0, 0, 0), 10, True, "middle")

    def test_render_instructions(self):
        count = render(
            [Line((0, 50), (100, 50), (0, 0, 0), 4), Circle((20, 20), 6, RED)], self.adapter
        )
        self.assertEqual(count, 2)
        self.assertEqual(self.pixel(20, 20), RED)
        self.assertEqual(self.pixel(60, 50), (0, 0, 0))

    def test_save_png(self):
        tmp = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tmp, ignore_errors=True)
        self.adapter.fill_circle((50, 30), 8, RED)
        path = self.adapter.save_png(os.path.join(tmp, "C_Major.png"))
        self.assertTrue(path.exists())
        loaded = pygame.image.load(str(path))
        self.assertEqual(loaded.get_size(), (100, 60))
        self.assertEqual(tuple(loaded.get_at((50, 30)))[:3], RED)


class TestPygameUISelection(unittest.TestCase):
    """Selector and click handling, without opening a window."""

    def setUp(self):
        self.player = RecordingPlayer()
        self.session = FretboardSession(self.player)
        self.ui = PygameUI(self.session, export_dir=tempfile.gettempdir())

    def test_initial_selection_is_blank(self):
        self.assertEqual(self.ui.selected_root, "")
        self.assertEqual(self.ui.selected_chord, "")

    def test_display_without_root(self):
        self.ui.display()
        self.assertEqual(self.ui.notice, "Please select a base note")
        self.assertEqual(len(self.session.current), 0)

    def test_select_and_display(self):
        self.ui.select("C", "Major")
        self.ui.display()
        self.assertEqual(self.session.title, "C Major")
        self.assertEqual(self.ui.notice, "")

    def test_category_header_shows_note_only(self):
        self.ui.select("G")
        self.ui.cycle_chord(1)  # first category header
        self.assertEqual(self.ui.selected_chord, "")
        self.ui.display()
        self.assertEqual(self.session.title, "G")

    def test_cycle_root_wraps(self):
        self.ui.cycle_root(-1)
        self.assertEqual(self.ui.selected_root, "D#")
        self.ui.cycle_root(1)
        self.ui.cycle_root(1)
        self.assertEqual(self.ui.selected_root, "E")

    def test_click_on_board_plays(self):
        self.ui.select("E")
        self.ui.display()
        x, y = self.session.layout.point_for(0, 12)
        self.ui._handle_click((x, y + self.ui.controls_height))
        self.assertEqual(len(self.player.requests), 1)
        self.assertEqual(self.player.requests[0].octave, 7)

    def test_advisory_shown(self):
        self.session.query("C", "Nope")
        self.assertIn("not recognized", self.ui.notice)

    def test_unknown_startup_chord_reports_advisory(self):
        with self.assertLogs("fret_spectrum.fretboard", level="WARNING"):
            self.ui.select("C", "Bogus Chord")
            self.ui.display()
        self.assertIn("not recognized", self.ui.notice)
        self.assertEqual(self.session.title, "C")
        self.assertEqual(self.session.current.pitch_classes, {"C"})

    def test_cycling_clears_unknown_chord(self):
        self.ui.select("C", "Bogus Chord")
        self.assertEqual(self.ui.selected_chord, "Bogus Chord")
        self.ui.cycle_chord(1)
        self.assertIsNone(self.ui.unknown_chord)
        self.assertEqual(self.ui.selected_chord, "")

    def test_save_before_init(self):
        self.assertIsNone(self.ui.save())

    def test_save_board(self):
        tmp = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tmp, ignore_errors=True)
        ui = PygameUI(self.session, export_dir=tmp)
        ui.board = pygame.Surface(self.session.layout.canvas_size)
        self.session.query("A", "Minor")
        path = ui.save()
        self.assertEqual(path.name, "A_Minor.png")
        self.assertTrue(path.exists())


if __name__ == "__main__":
    unittest.main()
