"""
Stochastic Gradient Descent (SGD) driver.

This module provides the generic stochastic-descent loop shared by all
optimizers in adaptopt. The driver owns a reference to a decomposable
function, visits its terms one at a time, asks the function for the
gradient of the visited term, and delegates the actual step to an update
policy (`VanillaUpdate`, `AdamUpdate`, `AdaMaxUpdate`, ...).

Design notes
------------
- One iteration is one term visited (one gradient evaluation), not one
  pass over all terms. Size ``max_iterations`` accordingly, e.g.
  ``epochs * function.num_functions()``.
- Terms are visited pass by pass. With ``shuffle=True`` a new permutation
  is drawn from the driver's own `numpy.random.Generator` at the start of
  every pass, so every term is still visited exactly once per pass and a
  seeded driver is reproducible.
- Convergence is checked at pass boundaries only: the sum of the term
  objectives gathered during a pass is compared with the previous pass
  (the full objective at the starting point for the first pass).
- ``max_iterations=0`` means no limit: the run then ends only when the
  tolerance criterion fires, or when the function raises.
- NaN/Inf values are not detected. They propagate into the iterate and
  the returned objective.
"""

from __future__ import annotations

import logging
import operator
from typing import Optional, Union

import numpy as np

from ...domain._errors import EmptyFunctionError
from ...domain._function import IDecomposableFunction
from ...domain._update_policy import IUpdatePolicy
from ._history import OptimizationHistory
from ._vanilla_update import VanillaUpdate

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.Generator]


def _check_max_iterations(value: int) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"max_iterations must be an integer, got {value!r}"
        ) from None
    if value < 0:
        raise ValueError(f"max_iterations must be >= 0, got {value}")
    return value


def _check_tolerance(value: float) -> float:
    value = float(value)
    if not value >= 0.0:
        raise ValueError(f"tolerance must be >= 0, got {value}")
    return value


def _check_iterate(iterate: np.ndarray) -> None:
    if not isinstance(iterate, np.ndarray):
        raise TypeError(
            f"iterate must be a numpy.ndarray, got {type(iterate).__name__}"
        )
    if not np.issubdtype(iterate.dtype, np.floating):
        raise TypeError(f"iterate must have a floating dtype, got {iterate.dtype}")
    if not iterate.flags.writeable:
        raise ValueError("iterate must be writeable; it is updated in place")


class SGD:
    """
    Generic stochastic gradient descent driver.

    Parameters
    ----------
    function : IDecomposableFunction
        Function to be minimized. Only a reference is kept; the function
        must outlive the driver.
    step_size : float, optional
        Step size handed to the update policy at every step. Defaults to
        0.01.
    max_iterations : int, optional
        Maximum number of term visits (0 means no limit). Defaults to
        100000.
    tolerance : float, optional
        Absolute change in the per-pass objective below which the run is
        considered converged. Defaults to 1e-5.
    shuffle : bool, optional
        If True, the term order is re-permuted at the start of every pass;
        otherwise terms are visited in linear order. Defaults to True.
    update_policy : IUpdatePolicy, optional
        Rule used to turn a gradient into a step. Defaults to
        `VanillaUpdate()`.
    seed : None | int | numpy.random.Generator, optional
        Seed or generator for the per-pass permutations.

    Raises
    ------
    TypeError
        If ``max_iterations`` is not an integer.
    ValueError
        If ``max_iterations < 0`` or ``tolerance < 0``.
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        step_size: float = 0.01,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        update_policy: Optional[IUpdatePolicy] = None,
        *,
        seed: SeedLike = None,
    ) -> None:
        self._function = function
        self._step_size = float(step_size)
        self._max_iterations = _check_max_iterations(max_iterations)
        self._tolerance = _check_tolerance(tolerance)
        self._shuffle = bool(shuffle)
        self._update_policy = (
            update_policy if update_policy is not None else VanillaUpdate()
        )
        self._rng = np.random.default_rng(seed)
        self._history = OptimizationHistory()

    @property
    def function(self) -> IDecomposableFunction:
        return self._function

    @function.setter
    def function(self, value: IDecomposableFunction) -> None:
        self._function = value

    @property
    def step_size(self) -> float:
        return self._step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        self._step_size = float(value)

    @property
    def max_iterations(self) -> int:
        """Maximum number of term visits (0 indicates no limit)."""
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self._max_iterations = _check_max_iterations(value)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._tolerance = _check_tolerance(value)

    @property
    def shuffle(self) -> bool:
        return self._shuffle

    @shuffle.setter
    def shuffle(self, value: bool) -> None:
        self._shuffle = bool(value)

    @property
    def update_policy(self) -> IUpdatePolicy:
        return self._update_policy

    @property
    def history(self) -> OptimizationHistory:
        """History of the most recent `optimize` call."""
        return self._history

    def _full_objective(self, iterate: np.ndarray, n: int) -> float:
        return float(sum(self._function.evaluate(iterate, i) for i in range(n)))

    def optimize(self, iterate: np.ndarray) -> float:
        """
        Minimize the function starting from ``iterate``.

        Parameters
        ----------
        iterate : np.ndarray
            Starting point, a writeable floating-point array. It is modified
            in place to hold the final point.

        Returns
        -------
        float
            Objective value (sum over all terms) at the final point.

        Raises
        ------
        TypeError
            If ``iterate`` is not a floating-point NumPy array.
        EmptyFunctionError
            If the function reports zero terms.

        Notes
        -----
        Exceptions raised by the function propagate unchanged and leave
        ``iterate`` at the point reached so far.
        """
        _check_iterate(iterate)
        n = int(self._function.num_functions())
        if n <= 0:
            raise EmptyFunctionError(n)

        self._update_policy.initialize(iterate.shape)
        gradient = np.zeros_like(iterate)
        history = OptimizationHistory()
        self._history = history

        visitation_order = np.arange(n)
        last_objective = self._full_objective(iterate, n)
        history.append_pass(0, last_objective)

        pass_idx = 0
        pass_objective = 0.0
        current = 0
        it = 0

        while self._max_iterations == 0 or it < self._max_iterations:
            if current == 0:
                if self._shuffle:
                    self._rng.shuffle(visitation_order)
                pass_objective = 0.0
                pass_idx += 1

            i = int(visitation_order[current])
            self._function.gradient(iterate, i, gradient)
            self._update_policy.update(iterate, self._step_size, gradient)
            pass_objective += float(self._function.evaluate(iterate, i))

            it += 1
            current += 1
            if current == n:
                current = 0
                history.append_pass(pass_idx, pass_objective)
                logger.debug(
                    "SGD: pass %d objective %.10g (iteration %d)",
                    pass_idx,
                    pass_objective,
                    it,
                )
                if abs(last_objective - pass_objective) < self._tolerance:
                    history.converged = True
                    logger.info(
                        "SGD: minimized within tolerance %g; terminating "
                        "optimization after %d iterations.",
                        self._tolerance,
                        it,
                    )
                    break
                last_objective = pass_objective

        history.iterations = it
        if not history.converged:
            logger.warning(
                "SGD: maximum iterations (%d) reached; terminating optimization.",
                self._max_iterations,
            )

        final_objective = self._full_objective(iterate, n)
        history.final_objective = final_objective
        return final_objective
