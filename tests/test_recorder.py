"""
Tests for headless recording, metrics and comparison mode.
"""

import unittest

from errors import ValidationError
from algorithms import Family
from engine import Recorder, best_algorithm, compare


def record(key, values, target=None):
    rec = Recorder()
    rec.start(key, values, target)
    rec.run_to_completion()
    return rec


class TestRecorder(unittest.TestCase):

    def test_metrics_for_a_sort(self):
        rec = record("merge_sort", [3, 1, 2])
        m = rec.get_metrics()
        self.assertEqual(m.algo_key, "merge_sort")
        self.assertEqual(m.algo_label, "Merge Sort")
        self.assertEqual(m.size, 3)
        self.assertEqual(m.comparisons, 3)
        self.assertEqual(m.exchanges, 0)
        self.assertEqual(m.assignments, 5)
        self.assertEqual(m.inversions, 2)
        self.assertEqual(m.total_steps, len(rec.steps))
        self.assertIsNone(m.found)
        self.assertFalse(m.presorted)
        self.assertEqual(rec.result.values, [1, 2, 3])

    def test_metrics_for_a_search(self):
        m = record("binary_search", [2, 4, 6, 8, 10, 12], 10).metrics
        self.assertTrue(m.found)
        self.assertEqual(m.index, 4)
        self.assertEqual(m.comparisons, 2)
        self.assertIsNone(m.inversions)

    def test_presorted_search_is_flagged(self):
        m = record("exponential_search", [5, 1, 3], 3).metrics
        self.assertTrue(m.presorted)
        self.assertEqual(m.index, 1)

    def test_input_list_is_not_touched(self):
        values = [4, 3, 2, 1]
        rec = record("quick_sort", values)
        self.assertEqual(values, [4, 3, 2, 1])
        self.assertEqual(rec.export()["input"], [4, 3, 2, 1])

    def test_export_is_plain_data(self):
        rec = record("bubble_sort", [2, 1])
        data = rec.export()
        self.assertEqual(data["algo_key"], "bubble_sort")
        self.assertEqual(data["result"]["values"], [1, 2])
        self.assertEqual(data["metrics"]["exchanges"], 1)
        self.assertEqual(len(data["steps"]), len(rec.steps))
        self.assertEqual(data["steps"][0]["kind"], "markRange")

    def test_unknown_key_and_missing_start(self):
        with self.assertRaises(ValidationError):
            Recorder().start("nope", [1, 2])
        with self.assertRaises(RuntimeError):
            Recorder().run_to_completion()


class TestComparison(unittest.TestCase):

    def test_compare_two_sorts(self):
        values = [1, 2, 3, 4, 5, 6, 7, 8]
        result = compare(record("bubble_sort", values), record("selection_sort", values))
        self.assertEqual(result.winner_comparisons, "Bubble Sort")
        self.assertEqual(result.winner_exchanges, "tie")
        self.assertEqual(result.left.comparisons, 7)
        self.assertEqual(result.right.comparisons, 28)

    def test_best_sort_on_sorted_input(self):
        best = best_algorithm(list(range(1, 16)))
        self.assertIn(best.algo_key, ("bubble_sort", "insertion_sort"))
        self.assertEqual(best.comparisons, 14)
        self.assertEqual(best.exchanges, 0)

    def test_best_search(self):
        values = list(range(1, 41))
        best = best_algorithm(values, Family.SEARCHING, target=40)
        self.assertNotEqual(best.algo_key, "linear_search")
        self.assertTrue(best.found)


if __name__ == "__main__":
    unittest.main()
