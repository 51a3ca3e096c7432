"""
Tests for the Visualizer control surface.
"""

import threading
import unittest

from config import EngineConfig
from errors import AlreadyRunning, ValidationError
from algorithms import SearchResult, StepKind
from engine import Statistics, Visualizer


class TestSortingRuns(unittest.TestCase):

    def setUp(self):
        self.steps = []
        self.stats = []
        self.results = []
        self.vis = Visualizer(
            [3, 1, 2],
            on_step=self.steps.append,
            on_stats_changed=self.stats.append,
            on_complete=self.results.append,
            engine_config=EngineConfig.instant(),
        )

    def test_run_sorts_and_reports(self):
        result = self.vis.run("insertion_sort")
        self.assertEqual(result.values, [1, 2, 3])
        self.assertEqual(self.vis.store.snapshot(), [1, 2, 3])
        self.assertEqual(result.statistics, Statistics(3, 2, 2))
        self.assertFalse(result.cancelled)
        self.assertIsNone(result.search)
        self.assertEqual(result.steps, len(self.steps))
        self.assertEqual(self.results, [result])
        self.assertIs(self.vis.last_result, result)

    def test_every_sort_by_name(self):
        for key in ("bubble_sort", "selection_sort", "insertion_sort", "merge_sort", "quick_sort", "heap_sort"):
            with self.subTest(algorithm=key):
                self.vis.load([9, 4, 7, 1, 8, 2, 2])
                result = self.vis.run(key)
                self.assertEqual(result.values, [1, 2, 2, 4, 7, 8, 9])
                self.assertEqual(result.statistics.inversions, 14)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValidationError):
            self.vis.run("bogo_sort")
        self.assertFalse(self.vis.is_running)

    def test_reset_restores_loaded_values(self):
        self.vis.run("heap_sort")
        self.vis.reset()
        self.assertEqual(self.vis.store.snapshot(), [3, 1, 2])
        self.assertIsNone(self.vis.last_result)

    def test_cancel_from_callback(self):
        vis = Visualizer([5, 4, 3, 2, 1], engine_config=EngineConfig.instant())
        vis.on_step = lambda step: vis.cancel() if step.kind is StepKind.EXCHANGE else None
        result = vis.run("bubble_sort")
        self.assertTrue(result.cancelled)
        self.assertEqual(result.statistics.exchanges, 1)
        self.assertEqual(sorted(result.values), [1, 2, 3, 4, 5])


    def test_cancel_after_first_compare_on_fifty_random_values(self):
        completed = []
        vis = Visualizer(on_complete=completed.append, engine_config=EngineConfig.instant())
        vis.generate(50, seed=8)
        before = vis.store.snapshot()

        def on_step(step):
            if step.kind is StepKind.COMPARE:
                vis.cancel()

        vis.on_step = on_step
        result = vis.run("bubble_sort")

        self.assertEqual(len(completed), 1)
        self.assertIs(completed[0], result)
        self.assertTrue(completed[0].cancelled)
        self.assertEqual(result.statistics.comparisons, 1)
        self.assertEqual(result.statistics.exchanges, 0)
        self.assertEqual(vis.store.snapshot(), before)
        self.assertFalse(vis.is_running)


class TestSearchRuns(unittest.TestCase):

    def test_search_on_sorted_input(self):
        vis = Visualizer([2, 4, 6, 8, 10, 12], engine_config=EngineConfig.instant())
        result = vis.run("binary_search", 10)
        self.assertEqual(result.search, SearchResult(True, 4))
        self.assertEqual(result.statistics, Statistics(2, 0, None))
        self.assertIsNone(result.presort)

    def test_unsorted_input_is_sorted_first(self):
        steps = []
        vis = Visualizer([12, 4, 10, 2, 8, 6], on_step=steps.append, engine_config=EngineConfig.instant())
        result = vis.run("jump_search", 8)
        self.assertIsNotNone(result.presort)
        self.assertEqual(result.presort.algorithm, "bubble_sort")
        self.assertEqual(result.search, SearchResult(True, 3))
        self.assertEqual(vis.store.snapshot(), [2, 4, 6, 8, 10, 12])
        # presort exchanges never leak into the search's own counters
        self.assertEqual(result.statistics.exchanges, 0)
        self.assertGreater(result.presort.statistics.exchanges, 0)
        self.assertEqual(len(steps), result.steps + result.presort.steps)

    def test_linear_search_skips_presort(self):
        vis = Visualizer([9, 3, 7], engine_config=EngineConfig.instant())
        result = vis.run("linear_search", 3)
        self.assertIsNone(result.presort)
        self.assertEqual(result.search, SearchResult(True, 1))
        self.assertEqual(vis.store.snapshot(), [9, 3, 7])

    def test_not_found(self):
        vis = Visualizer([1, 3, 5], engine_config=EngineConfig.instant())
        result = vis.run("exponential_search", 4)
        self.assertEqual(result.search, SearchResult(False, -1))
        self.assertFalse(result.cancelled)

    def test_search_needs_numeric_target(self):
        vis = Visualizer([1, 2, 3], engine_config=EngineConfig.instant())
        for bad in (None, "3", True, float("nan")):
            with self.assertRaises(ValidationError):
                vis.run("binary_search", bad)

    def test_search_size_limit(self):
        vis = Visualizer(list(range(1, 61)), engine_config=EngineConfig.instant())
        with self.assertRaises(ValidationError):
            vis.run("linear_search", 5)

    def test_cancel_during_presort_skips_search(self):
        vis = Visualizer([5, 4, 3, 2, 1], engine_config=EngineConfig.instant())
        vis.on_step = lambda step: vis.cancel()
        result = vis.run("binary_search", 3)
        self.assertTrue(result.cancelled)
        self.assertIsNone(result.search)
        self.assertTrue(result.presort.cancelled)
        self.assertEqual(result.steps, 0)


class TestInput(unittest.TestCase):

    def setUp(self):
        self.vis = Visualizer(engine_config=EngineConfig.instant())

    def test_load_validates(self):
        for bad in ([], [1, 0], [1, "x"], list(range(1, 102))):
            with self.assertRaises(ValidationError):
                self.vis.load(bad)
        self.vis.load([4, 2])
        self.assertEqual(self.vis.store.snapshot(), [4, 2])

    def test_generate(self):
        self.vis.generate(25, seed=11)
        self.assertEqual(len(self.vis.store), 25)
        self.vis.generate(30, seed=11, ascending=True)
        self.assertTrue(self.vis.store.is_sorted())
        with self.assertRaises(ValidationError):
            self.vis.generate(51, ascending=True)
        with self.assertRaises(ValidationError):
            self.vis.generate(4)

    def test_shuffle_becomes_the_reset_point(self):
        self.vis.load([1, 2, 3, 4, 5, 6, 7, 8])
        self.vis.shuffle(seed=5)
        shuffled = self.vis.store.snapshot()
        self.assertEqual(sorted(shuffled), [1, 2, 3, 4, 5, 6, 7, 8])
        self.vis.run("merge_sort")
        self.vis.reset()
        self.assertEqual(self.vis.store.snapshot(), shuffled)


class TestThreadedRun(unittest.TestCase):

    def test_run_in_thread_and_already_running(self):
        done = threading.Event()
        release = threading.Event()
        results = []

        def on_step(step):
            release.wait(5)

        def on_complete(result):
            results.append(result)
            done.set()

        vis = Visualizer([3, 2, 1], on_step=on_step, on_complete=on_complete,
                         engine_config=EngineConfig.instant())
        thread = vis.run_in_thread("selection_sort")
        self.assertTrue(vis.is_running)
        with self.assertRaises(AlreadyRunning):
            vis.run("bubble_sort")
        with self.assertRaises(AlreadyRunning):
            vis.load([1, 2])

        release.set()
        self.assertTrue(done.wait(5))
        thread.join(5)
        self.assertFalse(vis.is_running)
        self.assertEqual(results[0].values, [1, 2, 3])

    def test_cancel_right_after_start_is_never_lost(self):
        cfg = EngineConfig.instant()
        cfg.sort_speed_levels = {level: 0.5 for level in range(1, 6)}
        for _ in range(20):
            vis = Visualizer(list(range(30, 0, -1)), engine_config=cfg)
            thread = vis.run_in_thread("bubble_sort")
            vis.cancel()
            thread.join(5)
            self.assertFalse(thread.is_alive())
            self.assertTrue(vis.last_result.cancelled)
            self.assertLessEqual(vis.last_result.steps, 1)

    def test_cancel_while_idle_does_not_leak_into_next_run(self):
        vis = Visualizer([3, 1, 2], engine_config=EngineConfig.instant())
        vis.cancel()
        result = vis.run("selection_sort")
        self.assertFalse(result.cancelled)
        self.assertEqual(result.values, [1, 2, 3])

    def test_pause_and_resume_from_another_thread(self):
        vis = Visualizer(list(range(12, 0, -1)), engine_config=EngineConfig.instant())
        first = threading.Event()
        vis.on_step = lambda step: first.set()

        vis.pause()  # idle: ignored
        thread = vis.run_in_thread("quick_sort")
        self.assertTrue(first.wait(5))
        vis.pause()
        vis.resume()
        thread.join(5)
        self.assertFalse(thread.is_alive())
        self.assertEqual(vis.last_result.values, list(range(1, 13)))
        self.assertFalse(vis.last_result.cancelled)


if __name__ == "__main__":
    unittest.main()
