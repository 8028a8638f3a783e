import json
import shutil
import tempfile
import unittest
from pathlib import Path

from fret_spectrum.core.config import ConfigManager
from fret_spectrum.core.factory import ComponentFactory
from fret_spectrum.geometry import FretboardLayout
from fret_spectrum.mock_player import NullPlayer
from fret_spectrum.playback import SoundDevicePlayer


class ConfigTestCase(unittest.TestCase):
    def setUp(self):
        self.config_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.config_dir, ignore_errors=True)


class TestConfigManager(ConfigTestCase):
    def test_creates_default_files(self):
        ConfigManager(self.config_dir)
        for name in ("display", "playback", "catalog", "tuning"):
            self.assertTrue((Path(self.config_dir) / f"{name}.json").exists())

    def test_defaults(self):
        config = ConfigManager(self.config_dir)
        self.assertEqual(config.get_config("tuning")["string_octaves"], [6, 5, 5, 5, 4, 4])
        self.assertEqual(config.get_config("catalog")["variant"], "standard")
        self.assertEqual(config.get_config("playback")["duration"], 0.6)

    def test_update_persists(self):
        config = ConfigManager(self.config_dir)
        self.assertTrue(config.update_config("playback", {"volume": 0.5}))
        reloaded = ConfigManager(self.config_dir)
        self.assertEqual(reloaded.get_config("playback")["volume"], 0.5)

    def test_missing_keys_filled_from_defaults(self):
        with open(Path(self.config_dir) / "display.json", "w") as f:
            json.dump({"fret_spacing": 50}, f)
        display = ConfigManager(self.config_dir).get_config("display")
        self.assertEqual(display["fret_spacing"], 50)
        self.assertEqual(display["string_spacing"], 25)

    def test_corrupt_file_uses_defaults(self):
        with open(Path(self.config_dir) / "catalog.json", "w") as f:
            f.write("{not json")
        with self.assertLogs("fret_spectrum.core.config", level="ERROR"):
            config = ConfigManager(self.config_dir)
        self.assertEqual(config.get_config("catalog")["variant"], "standard")

    def test_get_returns_copy(self):
        config = ConfigManager(self.config_dir)
        config.get_config("tuning")["string_octaves"].append(3)
        self.assertEqual(len(config.get_config("tuning")["string_octaves"]), 6)

    def test_unknown_section(self):
        config = ConfigManager(self.config_dir)
        with self.assertLogs("fret_spectrum.core.config", level="ERROR"):
            self.assertFalse(config.update_config("nope", {"a": 1}))
        self.assertEqual(config.get_config("nope"), {})

    def test_reset(self):
        config = ConfigManager(self.config_dir)
        config.update_config("catalog", {"variant": "classic"})
        self.assertTrue(config.reset_config("catalog"))
        self.assertEqual(config.get_config("catalog")["variant"], "standard")


class TestComponentFactory(ConfigTestCase):
    def setUp(self):
        super().setUp()
        self.config = ConfigManager(self.config_dir)
        self.factory = ComponentFactory(self.config)

    def test_layout_from_config(self):
        self.config.update_config("display", {"fret_spacing": 50})
        layout = self.factory.create_layout()
        self.assertIsInstance(layout, FretboardLayout)
        self.assertEqual(layout.fret_spacing, 50)
        self.assertEqual(self.factory.create_layout(num_frets=12).num_frets, 12)

    def test_catalog_variants(self):
        self.assertEqual(
            self.factory.create_catalog().lookup("Japanese Scale (hirajoushi)"), (0, 2, 3, 7, 8)
        )
        classic = self.factory.create_catalog(variant="classic")
        self.assertEqual(classic.lookup("Japanese Scale"), (0, 2, 5, 7, 9))

    def test_catalog_file(self):
        path = Path(self.config_dir) / "mine.json"
        with open(path, "w") as f:
            json.dump({"Mine": {"Power": [0, 7]}}, f)
        self.config.update_config("catalog", {"catalog_file": str(path)})
        catalog = self.factory.create_catalog()
        self.assertEqual(catalog.names(), ["Power"])

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            self.factory.create_catalog(variant="nope")

    def test_tuning_octaves(self):
        self.config.update_config("tuning", {"string_octaves": [5, 4, 4, 4, 3, 3]})
        tuning = self.factory.create_tuning()
        self.assertEqual(tuning.octave_at(0, 0), 5)
        self.assertEqual(tuning.octave_at(5, 0), 3)

    def test_players(self):
        self.assertIsInstance(self.factory.create_player("null"), NullPlayer)
        player = self.factory.create_player()
        self.assertIsInstance(player, SoundDevicePlayer)
        self.assertEqual(player.sample_rate, 44100)
        with self.assertRaises(ValueError):
            self.factory.create_player("bogus")

    def test_session(self):
        self.config.update_config("playback", {"duration": 1.2})
        session = self.factory.create_session(player=NullPlayer(), catalog_variant="classic")
        self.assertEqual(session.note_duration, 1.2)
        self.assertIn("Japanese Scale", session.catalog)
        self.assertEqual(session.query("E").root, "E")


if __name__ == "__main__":
    unittest.main()
