import unittest

import pytest

from fret_spectrum.catalog import IntervalCatalog
from fret_spectrum.fretboard import compute_highlights, map_positions
from fret_spectrum.note_types import InvalidNoteError
from fret_spectrum.pitch import NOTE_SEQUENCE, color_of, pitch_class_at
from fret_spectrum.tuning import NUM_FRETS, STANDARD_TUNING


def frets_on(positions, string):
    return [p.fret for p in positions if p.string == string]


class TestSingleNoteMode(unittest.TestCase):
    def test_root_e(self):
        positions = map_positions("E")
        self.assertEqual(frets_on(positions, 0), [0, 12])
        self.assertEqual(frets_on(positions, 1), [5, 17])
        self.assertEqual(frets_on(positions, 2), [9, 21])
        self.assertEqual(frets_on(positions, 3), [2, 14])
        self.assertEqual(frets_on(positions, 4), [7, 19])
        self.assertEqual(frets_on(positions, 5), [0, 12])
        self.assertEqual(len(positions), 12)

    def test_root_e_octaves(self):
        positions = map_positions("E")
        by_pos = {(p.string, p.fret): p.octave for p in positions}
        self.assertEqual(by_pos[(0, 0)], 6)
        self.assertEqual(by_pos[(0, 12)], 7)
        self.assertEqual(by_pos[(5, 0)], 4)
        self.assertEqual(by_pos[(5, 12)], 5)

    def test_every_string_has_the_root(self):
        for root in NOTE_SEQUENCE:
            positions = map_positions(root)
            self.assertTrue(positions)
            for string in range(6):
                frets = frets_on(positions, string)
                self.assertTrue(frets, f"{root} missing on string {string}")
                # Exactly one match per 12-fret span
                self.assertEqual(len([f for f in frets if f < 12]), 1)
            self.assertTrue(all(p.pitch_class == root for p in positions))

    def test_matches_direct_computation(self):
        for root in NOTE_SEQUENCE:
            expected = [
                (s, f)
                for s in range(6)
                for f in range(NUM_FRETS + 1)
                if pitch_class_at(STANDARD_TUNING.open_pitch_index(s) + f) == root
            ]
            actual = [(p.string, p.fret) for p in map_positions(root)]
            self.assertEqual(actual, expected)

    def test_empty_intervals_mean_single_note(self):
        self.assertEqual(map_positions("G", []), map_positions("G"))
        self.assertEqual(map_positions("G", ()), map_positions("G", None))

    def test_flat_root_accepted(self):
        positions = map_positions("Db")
        self.assertTrue(all(p.pitch_class == "C#" for p in positions))


class TestChordMode(unittest.TestCase):
    def test_c_major_on_low_e(self):
        positions = map_positions("C", [0, 4, 7])
        self.assertEqual(frets_on(positions, 5), [0, 3, 8, 12, 15, 20])
        self.assertEqual({p.pitch_class for p in positions}, {"C", "E", "G"})

    def test_a_power_chord(self):
        positions = map_positions("A", [0, 7])
        self.assertEqual({p.pitch_class for p in positions}, {"A", "E"})
        self.assertEqual(frets_on(positions, 0), [0, 5, 12, 17])
        for string in range(6):
            in_first_octave = [f for f in frets_on(positions, string) if f < 12]
            self.assertEqual(len(in_first_octave), 2)

    def test_compound_interval_equivalence(self):
        self.assertEqual(
            map_positions("C", [0, 4, 7, 11, 14]), map_positions("C", [0, 4, 7, 11, 2])
        )
        self.assertEqual(map_positions("F#", [0, 3, 19]), map_positions("F#", [0, 3, 7]))

    def test_repeated_reduced_values_do_not_duplicate(self):
        positions = map_positions("D", [0, 12, 24])
        keys = [(p.string, p.fret) for p in positions]
        self.assertEqual(len(keys), len(set(keys)))
        self.assertEqual(positions, map_positions("D"))

    def test_ordered_by_string_then_fret(self):
        positions = map_positions("C", [0, 2, 4, 5, 7, 9, 11])
        keys = [(p.string, p.fret) for p in positions]
        self.assertEqual(keys, sorted(keys))

    def test_colors_follow_pitch_class(self):
        for p in map_positions("C", [0, 4, 7]):
            self.assertEqual(p.color, color_of(p.pitch_class))

    def test_low_frets_below_root_index(self):
        # Sounded index below the root index exercises the negative subtraction
        positions = map_positions("D#", [0, 1])
        self.assertEqual(frets_on(positions, 0), [0, 11, 12])

    def test_fewer_frets(self):
        positions = map_positions("E", num_frets=4)
        self.assertEqual([(p.string, p.fret) for p in positions], [(0, 0), (3, 2), (5, 0)])

    def test_idempotent(self):
        self.assertEqual(map_positions("G", [0, 4, 7, 10]), map_positions("G", [0, 4, 7, 10]))


class TestInvalidRoot(unittest.TestCase):
    def test_map_positions_rejects(self):
        with self.assertRaises(InvalidNoteError):
            map_positions("H", [0, 4, 7])

    def test_compute_highlights_rejects(self):
        with self.assertRaises(InvalidNoteError):
            compute_highlights("Q#")

    def test_invalid_root_is_a_value_error(self):
        with self.assertRaises(ValueError):
            compute_highlights("")


class TestComputeHighlights(unittest.TestCase):
    def setUp(self):
        self.catalog = IntervalCatalog.builtin()

    def test_known_chord(self):
        result = compute_highlights("C", "Major", catalog=self.catalog)
        self.assertEqual(result.root, "C")
        self.assertEqual(result.chord, "Major")
        self.assertIsNone(result.advisory)
        self.assertEqual(result.title, "C Major")
        self.assertEqual(result.pitch_classes, frozenset({"C", "E", "G"}))

    def test_no_chord(self):
        result = compute_highlights("E", catalog=self.catalog)
        self.assertIsNone(result.chord)
        self.assertEqual(result.title, "E")
        self.assertEqual(len(result), 12)

    def test_unknown_chord_falls_back_to_note(self):
        with self.assertLogs("fret_spectrum.fretboard", level="WARNING") as logs:
            result = compute_highlights("C", "Mystery Chord", catalog=self.catalog)
        self.assertIn("not recognized", logs.output[0])
        self.assertIsNotNone(result.advisory)
        self.assertIsNone(result.chord)
        self.assertEqual(result.positions, compute_highlights("C", catalog=self.catalog).positions)

    def test_empty_chord_name_is_no_chord(self):
        result = compute_highlights("C", "", catalog=self.catalog)
        self.assertIsNone(result.advisory)
        self.assertEqual(result.positions, map_positions("C"))

    def test_idempotent(self):
        first = compute_highlights("A", "Blues Scale", catalog=self.catalog)
        second = compute_highlights("A", "Blues Scale", catalog=self.catalog)
        self.assertEqual(first, second)

    def test_maj9_matches_hypothetical_reduced_set(self):
        result = compute_highlights("C", "Major 9th (maj9)", catalog=self.catalog)
        self.assertEqual(result.positions, map_positions("C", [0, 4, 7, 11, 2]))


@pytest.mark.parametrize(
    "root, chord, expected",
    [
        ("C", "Major", {"C", "E", "G"}),
        ("A", "Minor", {"A", "C", "E"}),
        ("G", "Dominant 7th (7)", {"G", "B", "D", "F"}),
        ("D", "Suspended 4th (sus4)", {"D", "G", "A"}),
        ("E", "Pentatonic Minor", {"E", "G", "A", "B", "D"}),
        ("C", "Add 11 (add11)", {"C", "E", "G", "F"}),
    ],
)
def test_chord_pitch_classes(root, chord, expected):
    assert compute_highlights(root, chord).pitch_classes == frozenset(expected)
