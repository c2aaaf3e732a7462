"""
Decomposable test objectives.

This module provides small objectives with known minimizers. They satisfy
the `IDecomposableFunction` contract and are used to exercise and
benchmark the optimizers.

Notes
-----
- Gradients are written into the caller-supplied buffer in place; every
  entry of the buffer is overwritten.
- Objectives are sums over terms, so the full objective is
  ``sum(evaluate(x, i) for i in range(num_functions()))``.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


class SumOfSquaresFunction:
    """
    Convex quadratic ``f(x) = sum_i ||x - c_i||^2``.

    Each center ``c_i`` defines one term. The unique minimizer is the mean
    of the centers.

    Parameters
    ----------
    centers : Iterable
        Term centers. Every center must have the shape of the iterate; a
        sequence of scalars is accepted for scalar (or 1x1) iterates.
    """

    def __init__(self, centers: Iterable) -> None:
        self.centers = [np.asarray(c, dtype=np.float64) for c in centers]

    def num_functions(self) -> int:
        return len(self.centers)

    def evaluate(self, coordinates: np.ndarray, i: int) -> float:
        diff = coordinates - self.centers[i]
        return float(np.sum(diff * diff))

    def gradient(self, coordinates: np.ndarray, i: int, gradient: np.ndarray) -> None:
        gradient[...] = 2.0 * (coordinates - self.centers[i])

    def minimizer(self) -> np.ndarray:
        """
        Return the point minimizing the full objective.
        """
        return np.mean(np.stack(self.centers), axis=0)


class SGDTestFunction:
    """
    Three-term objective over a 3-vector with a non-smooth first term.

        f_0(x) = -exp(-|x_0|)
        f_1(x) = x_1^2
        f_2(x) = x_2^4 + 3 x_2^2

    The minimum value ``-1`` is attained at the origin.
    """

    def num_functions(self) -> int:
        return 3

    def evaluate(self, coordinates: np.ndarray, i: int) -> float:
        x = np.asarray(coordinates).reshape(-1)
        if i == 0:
            return float(-np.exp(-np.abs(x[0])))
        if i == 1:
            return float(x[1] ** 2)
        if i == 2:
            return float(x[2] ** 4 + 3.0 * x[2] ** 2)
        raise IndexError(f"term index out of range: {i}")

    def gradient(self, coordinates: np.ndarray, i: int, gradient: np.ndarray) -> None:
        x = np.asarray(coordinates).reshape(-1)
        g = np.zeros(3, dtype=np.float64)
        if i == 0:
            g[0] = np.sign(x[0]) * np.exp(-np.abs(x[0]))
        elif i == 1:
            g[1] = 2.0 * x[1]
        elif i == 2:
            g[2] = 4.0 * x[2] ** 3 + 6.0 * x[2]
        else:
            raise IndexError(f"term index out of range: {i}")
        gradient[...] = g.reshape(gradient.shape)

    @staticmethod
    def initial_point() -> np.ndarray:
        """
        Return the customary starting point as a ``(3, 1)`` column.
        """
        return np.array([[6.0], [-45.6], [6.2]])
