import unittest

import numpy as np

from src.adaptopt.domain._function import IDecomposableFunction
from src.adaptopt.domain._optimizers import IOptimizer
from src.adaptopt.domain._update_policy import IUpdatePolicy
from src.adaptopt.infrastructure.functions._test_functions import (
    SGDTestFunction,
    SumOfSquaresFunction,
)
from src.adaptopt.infrastructure.optimizers._adam import AdaMax, Adam
from src.adaptopt.infrastructure.optimizers._adam_update import AdamUpdate
from src.adaptopt.infrastructure.optimizers._adamax_update import AdaMaxUpdate
from src.adaptopt.infrastructure.optimizers._sgd import SGD
from src.adaptopt.infrastructure.optimizers._vanilla_update import VanillaUpdate


class TestOptimizerProtocol(unittest.TestCase):
    def setUp(self):
        self.f = SumOfSquaresFunction([0.0, 1.0])

    def test_sgd_conforms_to_ioptimizer(self):
        self.assertIsInstance(SGD(self.f), IOptimizer)

    def test_adam_conforms_to_ioptimizer(self):
        self.assertIsInstance(Adam(self.f), IOptimizer)

    def test_adamax_conforms_to_ioptimizer(self):
        self.assertIsInstance(AdaMax(self.f), IOptimizer)


class TestUpdatePolicyProtocol(unittest.TestCase):
    def test_policies_conform_to_iupdatepolicy(self):
        for policy in (VanillaUpdate(), AdamUpdate(), AdaMaxUpdate()):
            with self.subTest(policy=type(policy).__name__):
                self.assertIsInstance(policy, IUpdatePolicy)


class TestDecomposableFunctionProtocol(unittest.TestCase):
    def test_test_functions_conform(self):
        self.assertIsInstance(SumOfSquaresFunction([1.0]), IDecomposableFunction)
        self.assertIsInstance(SGDTestFunction(), IDecomposableFunction)

    def test_plain_array_does_not_conform(self):
        self.assertNotIsInstance(np.zeros(3), IDecomposableFunction)


if __name__ == "__main__":
    unittest.main()
