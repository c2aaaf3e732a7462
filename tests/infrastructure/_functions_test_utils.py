from typing import List

import numpy as np

from src.adaptopt.infrastructure.functions._test_functions import (
    SumOfSquaresFunction,
)


class RecordingFunction(SumOfSquaresFunction):
    """Sum of squares that records the term index of every gradient call."""

    def __init__(self, centers) -> None:
        super().__init__(centers)
        self.visited: List[int] = []

    def gradient(self, coordinates, i, gradient) -> None:
        self.visited.append(int(i))
        super().gradient(coordinates, i, gradient)


class SingleSquare:
    """One term, f(x) = sum(x^2), gradient 2x."""

    def num_functions(self) -> int:
        return 1

    def evaluate(self, coordinates, i) -> float:
        return float(np.sum(coordinates * coordinates))

    def gradient(self, coordinates, i, gradient) -> None:
        gradient[...] = 2.0 * coordinates


class EmptyFunction:
    def num_functions(self) -> int:
        return 0

    def evaluate(self, coordinates, i) -> float:
        raise AssertionError("must not be evaluated")

    def gradient(self, coordinates, i, gradient) -> None:
        raise AssertionError("must not be differentiated")


class StopOptimization(Exception):
    pass


class UnboundedLinearFunction:
    """
    f(x) = -sum_i x over ``n`` terms: decreases without bound.

    Raises `StopOptimization` once ``limit`` gradients have been computed,
    acting as an external termination oracle.
    """

    def __init__(self, n: int, limit: int) -> None:
        self.n = n
        self.limit = limit
        self.calls = 0

    def num_functions(self) -> int:
        return self.n

    def evaluate(self, coordinates, i) -> float:
        return float(-np.sum(coordinates))

    def gradient(self, coordinates, i, gradient) -> None:
        self.calls += 1
        if self.calls > self.limit:
            raise StopOptimization()
        gradient[...] = -1.0


class NaNFunction(SumOfSquaresFunction):
    def gradient(self, coordinates, i, gradient) -> None:
        gradient[...] = np.nan
