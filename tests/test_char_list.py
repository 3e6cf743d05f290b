"""
Tests for CharData and CharList.
"""

import math
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from charlm.char_data import CharData
from charlm.char_list import FALLBACK_CHAR, CharList


def build_row(text):
    row = CharList()
    for ch in text:
        row.update(ch)
    return row


class TestCharData(unittest.TestCase):
    """Tests for the frequency record."""

    def test_equality_ignores_counts(self):
        self.assertEqual(CharData("a", 1), CharData("a", 7))
        self.assertNotEqual(CharData("a"), CharData("b"))

    def test_equals_bare_character(self):
        self.assertEqual(CharData("x", 3), "x")
        self.assertNotEqual(CharData("x", 3), "y")

    def test_str(self):
        rec = CharData("a", 1, 0.5, 0.5)
        self.assertEqual(str(rec), "(a 1 0.5 0.5)")


class TestCharList(unittest.TestCase):
    """Tests for the context table row."""

    def test_update_prepends_new_characters(self):
        row = build_row("abc")
        self.assertEqual([rec.character for rec in row], ["c", "b", "a"])
        self.assertEqual(row.size, 3)

    def test_update_counts_repeats(self):
        row = build_row("abacaba")
        counts = {rec.character: rec.count for rec in row}
        self.assertEqual(counts, {"a": 4, "b": 2, "c": 1})
        self.assertEqual(len(row), 3)

    def test_index_of(self):
        row = build_row("ab")
        self.assertEqual(row.index_of("b"), 0)
        self.assertEqual(row.index_of("a"), 1)
        self.assertEqual(row.index_of("z"), -1)

    def test_get_index_of_round_trip(self):
        row = build_row("the quick brown fox")
        for ch in set("the quick brown fox"):
            self.assertEqual(row.get(row.index_of(ch)).character, ch)

    def test_get_out_of_range(self):
        row = build_row("ab")
        with self.assertRaises(IndexError):
            row.get(2)
        with self.assertRaises(IndexError):
            row.get(-1)
        with self.assertRaises(IndexError):
            CharList().get_first()

    def test_remove(self):
        row = build_row("abc")
        self.assertTrue(row.remove("b"))
        self.assertFalse(row.remove("b"))
        self.assertEqual([rec.character for rec in row], ["c", "a"])
        self.assertEqual(row.size, 2)

    def test_str(self):
        self.assertEqual(str(CharList()), "()")
        row = build_row("ab")
        self.assertEqual(str(row), "((b 1 0.0 0.0) (a 1 0.0 0.0))")

    def test_iter_from_and_to_array(self):
        row = build_row("abc")
        self.assertEqual([rec.character for rec in row.iter_from(1)], ["b", "a"])
        arr = row.to_array()
        arr.clear()
        self.assertEqual(row.size, 3)

    def test_finalize_probabilities(self):
        row = build_row("aaab")
        row.finalize_probabilities()
        b, a = row.get(0), row.get(1)
        self.assertAlmostEqual(b.p, 0.25)
        self.assertAlmostEqual(b.cp, 0.25)
        self.assertAlmostEqual(a.p, 0.75)
        self.assertAlmostEqual(a.cp, 1.0)

    def test_probabilities_sum_to_one(self):
        row = build_row("committee meetings in mississippi")
        row.finalize_probabilities()
        self.assertTrue(math.isclose(sum(rec.p for rec in row), 1.0))
        cps = [rec.cp for rec in row]
        self.assertEqual(cps, sorted(cps))
        self.assertTrue(math.isclose(cps[-1], 1.0))

    def test_finalize_empty_row(self):
        row = CharList()
        row.finalize_probabilities()
        self.assertEqual(row.size, 0)
        with self.assertRaises(RuntimeError):
            row.update("a")

    def test_counts_frozen_after_finalize(self):
        row = build_row("ab")
        row.finalize_probabilities()
        for mutate in (lambda: row.update("a"), lambda: row.add_first("c"), lambda: row.remove("b")):
            with self.assertRaises(RuntimeError):
                mutate()
        self.assertEqual([(rec.character, rec.count, rec.cp) for rec in row], [("b", 1, 0.5), ("a", 1, 1.0)])

    def test_sample_uses_row_order(self):
        row = build_row("ab")
        row.finalize_probabilities()
        # "b" was inserted last, so it owns [0, 0.5]
        self.assertEqual(row.sample(0.0), "b")
        self.assertEqual(row.sample(0.5), "b")
        self.assertEqual(row.sample(0.51), "a")

    def test_sample_fallback(self):
        row = build_row("ab")
        row.finalize_probabilities()
        row.get(1).cp = 0.999999
        self.assertEqual(row.sample(0.9999999), FALLBACK_CHAR)

    def test_merge_sums_counts(self):
        left = build_row("aab")
        right = build_row("bcd")
        left.merge(right)
        self.assertEqual([rec.character for rec in left], ["d", "c", "b", "a"])
        counts = {rec.character: rec.count for rec in left}
        self.assertEqual(counts, {"a": 2, "b": 2, "c": 1, "d": 1})
        self.assertEqual(right.get(right.index_of("b")).count, 1)

    def test_merge_after_finalize(self):
        row = build_row("ab")
        row.finalize_probabilities()
        with self.assertRaises(RuntimeError):
            row.merge(build_row("c"))


if __name__ == "__main__":
    unittest.main()
