"""
Tests for the sequence store and input validation.
"""

import unittest

from errors import IndexOutOfRange, ValidationError
from sequence import SequenceStore, parse_values, validate_count, validate_values


class TestSequenceStore(unittest.TestCase):

    def test_get_set_exchange(self):
        store = SequenceStore([5, 3, 8])
        self.assertEqual(store.get(1), 3)
        store.set(1, 9)
        self.assertEqual(store.snapshot(), [5, 9, 8])
        store.exchange(0, 2)
        self.assertEqual(store.snapshot(), [8, 9, 5])
        self.assertEqual(store.length(), 3)
        self.assertEqual(len(store), 3)

    def test_out_of_range_indices_raise(self):
        """Negative indices must not wrap around like plain lists do."""
        store = SequenceStore([1, 2, 3])
        for bad in (-1, 3, 10):
            with self.assertRaises(IndexOutOfRange):
                store.get(bad)
        with self.assertRaises(IndexOutOfRange):
            store.set(3, 1)
        with self.assertRaises(IndexOutOfRange):
            store.exchange(0, 3)
        self.assertEqual(store.snapshot(), [1, 2, 3])

    def test_index_out_of_range_is_an_index_error(self):
        with self.assertRaises(IndexError):
            SequenceStore([]).get(0)

    def test_snapshot_is_a_copy(self):
        store = SequenceStore([1, 2])
        snap = store.snapshot()
        snap[0] = 99
        self.assertEqual(store.get(0), 1)

    def test_is_sorted(self):
        self.assertTrue(SequenceStore([]).is_sorted())
        self.assertTrue(SequenceStore([4]).is_sorted())
        self.assertTrue(SequenceStore([1, 2, 2, 5]).is_sorted())
        self.assertFalse(SequenceStore([2, 1]).is_sorted())

    def test_generate_random_is_seeded_and_in_range(self):
        a = SequenceStore.generate_random(30, seed=7).snapshot()
        b = SequenceStore.generate_random(30, seed=7).snapshot()
        self.assertEqual(a, b)
        self.assertEqual(len(a), 30)
        self.assertTrue(all(50 <= v <= 349 for v in a))

    def test_generate_sorted_is_ascending(self):
        store = SequenceStore.generate_sorted(40, seed=3)
        self.assertEqual(len(store), 40)
        self.assertTrue(store.is_sorted())
        self.assertTrue(all(v > 0 for v in store.snapshot()))

    def test_shuffled_is_a_permutation_and_leaves_original(self):
        store = SequenceStore(range(1, 21))
        shuffled = store.shuffled(seed=1)
        self.assertEqual(sorted(shuffled.snapshot()), list(range(1, 21)))
        self.assertEqual(store.snapshot(), list(range(1, 21)))

    def test_from_text_and_dict_round_trip(self):
        store = SequenceStore.from_text("5, 3,8 1")
        self.assertEqual(store.snapshot(), [5, 3, 8, 1])
        again = SequenceStore.from_dict(store.to_dict())
        self.assertEqual(again.snapshot(), [5, 3, 8, 1])


class TestValidation(unittest.TestCase):

    def test_parse_values(self):
        self.assertEqual(parse_values("1, 2.5 ,3"), [1, 2.5, 3])
        with self.assertRaises(ValidationError):
            parse_values("1, two, 3")

    def test_rejects_empty(self):
        with self.assertRaises(ValidationError):
            validate_values([])

    def test_rejects_non_positive(self):
        with self.assertRaises(ValidationError):
            validate_values([3, 0, 2])
        with self.assertRaises(ValidationError):
            validate_values([3, -1])

    def test_rejects_oversized(self):
        with self.assertRaises(ValidationError):
            validate_values(list(range(1, 102)))
        validate_values(list(range(1, 101)))
        with self.assertRaises(ValidationError):
            validate_values(list(range(1, 52)), max_length=50)

    def test_rejects_non_numbers(self):
        for bad in (["a"], [True], [None]):
            with self.assertRaises(ValidationError):
                validate_values(bad)

    def test_rejects_non_finite(self):
        for bad in ([5, float("nan"), 1], [float("inf")], [2, float("-inf")]):
            with self.assertRaises(ValidationError):
                validate_values(bad)
        with self.assertRaises(ValidationError):
            parse_values("3, nan")

    def test_validation_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            validate_values([])

    def test_validate_count(self):
        self.assertEqual(validate_count(20), 20)
        for bad in (4, 101, "10", 2.5):
            with self.assertRaises(ValidationError):
                validate_count(bad)


if __name__ == "__main__":
    unittest.main()
