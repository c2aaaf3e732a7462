import unittest

import numpy as np

from src.adaptopt.infrastructure.functions._test_functions import (
    SumOfSquaresFunction,
)
from src.adaptopt.infrastructure.optimizers._history import OptimizationHistory
from src.adaptopt.infrastructure.optimizers._sgd import SGD


class TestOptimizationHistory(unittest.TestCase):
    def test_empty(self):
        h = OptimizationHistory()
        self.assertEqual(len(h), 0)
        self.assertIsNone(h.last())
        self.assertFalse(h.converged)
        self.assertIsNone(h.final_objective)

    def test_append_pass_coerces_to_float(self):
        h = OptimizationHistory()
        h.append_pass(0, np.float32(2.5))
        h.append_pass(1, 1)
        self.assertEqual(h.passes, [0, 1])
        self.assertEqual(h.objectives, [2.5, 1.0])
        self.assertIsInstance(h.objectives[1], float)
        self.assertEqual(h.last(), 1.0)
        self.assertEqual(len(h), 2)


class TestHistoryFromDriver(unittest.TestCase):
    def test_driver_records_one_entry_per_pass(self):
        f = SumOfSquaresFunction([-1.0, 0.0, 1.0])
        x = np.array([[4.0]])
        opt = SGD(f, step_size=0.01, max_iterations=14, tolerance=0.0, shuffle=False)
        value = opt.optimize(x)

        h = opt.history
        # 14 steps over 3 terms: 4 complete passes plus a partial one
        self.assertEqual(h.passes, [0, 1, 2, 3, 4])
        self.assertEqual(h.iterations, 14)
        self.assertEqual(h.objectives[0], 25.0 + 16.0 + 9.0)
        self.assertEqual(h.final_objective, value)
        self.assertTrue(all(b < a for a, b in zip(h.objectives, h.objectives[1:])))

    def test_history_is_replaced_by_each_run(self):
        f = SumOfSquaresFunction([0.0])
        opt = SGD(f, max_iterations=2, tolerance=0.0)
        opt.optimize(np.array([1.0]))
        first = opt.history
        opt.optimize(np.array([1.0]))
        self.assertIsNot(opt.history, first)
        self.assertEqual(opt.history.iterations, 2)


if __name__ == "__main__":
    unittest.main()
