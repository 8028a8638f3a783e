"""
Verify every module of the package imports without errors.
"""

import importlib
import os
import pkgutil
import unittest
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import fret_spectrum  # noqa: E402


def find_modules():
    """All module names below the fret_spectrum package."""
    return sorted(
        name
        for _, name, _ in pkgutil.walk_packages(fret_spectrum.__path__, "fret_spectrum.")
    )


class TestImports(unittest.TestCase):
    def test_all_modules_import(self):
        modules = find_modules()
        self.assertIn("fret_spectrum.fretboard", modules)
        for name in modules:
            with self.subTest(module=name):
                importlib.import_module(name)

    def test_pyproject_declares_no_readme(self):
        root = Path(__file__).resolve().parent.parent
        pyproject = (root / "pyproject.toml").read_text()
        self.assertIn('name = "fret-spectrum"', pyproject)
        self.assertNotIn("readme", pyproject)

    def test_player_defers_sounddevice_import(self):
        from fret_spectrum.playback import SoundDevicePlayer

        self.assertIsNone(SoundDevicePlayer()._sd)


if __name__ == "__main__":
    unittest.main()
