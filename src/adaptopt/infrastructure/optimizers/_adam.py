"""
Adam and AdaMax optimizers.

Adam computes individual adaptive step sizes for every coordinate from
estimates of the first and second moments of the gradients. AdaMax is the
variant of Adam based on the infinity norm (Kingma & Ba, 2014, section 7).

This module only wires an update policy into the generic `SGD` driver and
exposes the hyperparameters of both as properties. The numerics live in
`AdamUpdate` / `AdaMaxUpdate`, the loop lives in `SGD`.
"""

from __future__ import annotations

from typing import Type

import numpy as np

from ...domain._function import IDecomposableFunction
from ._adam_update import AdamUpdate
from ._adamax_update import AdaMaxUpdate
from ._history import OptimizationHistory
from ._sgd import SGD, SeedLike


class AdamType:
    """
    Stochastic optimizer driven by an Adam-family update rule.

    The defaults are not necessarily good for a given problem; tailor them
    to the task at hand. ``max_iterations`` counts processed terms (one
    iteration is one term, not one pass over all terms).

    Parameters
    ----------
    function : IDecomposableFunction
        Function to be minimized.
    step_size : float, optional
        Step size for each iteration. Defaults to 0.001.
    beta1 : float, optional
        Exponential decay rate for the first moment estimates. Defaults to
        0.9.
    beta2 : float, optional
        Exponential decay rate for the second moment (Adam) or weighted
        infinity norm (AdaMax) estimates. Defaults to 0.999.
    eps : float, optional
        Value added to the denominator of every step. Defaults to 1e-8.
    max_iterations : int, optional
        Maximum number of iterations allowed (0 means no limit). Defaults
        to 100000.
    tolerance : float, optional
        Maximum absolute tolerance to terminate the algorithm. Defaults to
        1e-5.
    shuffle : bool, optional
        If True, the term order is shuffled every pass; otherwise each term
        is visited in linear order. Defaults to True.
    update_rule : type, optional
        Update policy class, `AdamUpdate` or `AdaMaxUpdate`. Defaults to
        `AdamUpdate`.
    seed : None | int | numpy.random.Generator, optional
        Seed or generator used for shuffling.

    Raises
    ------
    ValueError
        If any hyperparameter is outside its valid range.
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        step_size: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        update_rule: Type[AdamUpdate] = AdamUpdate,
        *,
        seed: SeedLike = None,
    ) -> None:
        self._optimizer = SGD(
            function,
            step_size,
            max_iterations,
            tolerance,
            shuffle,
            update_rule(eps, beta1, beta2),
            seed=seed,
        )

    def optimize(self, iterate: np.ndarray) -> float:
        """
        Optimize the function. ``iterate`` is modified in place to hold the
        final point, and the final objective value is returned.
        """
        return self._optimizer.optimize(iterate)

    @property
    def function(self) -> IDecomposableFunction:
        return self._optimizer.function

    @function.setter
    def function(self, value: IDecomposableFunction) -> None:
        self._optimizer.function = value

    @property
    def step_size(self) -> float:
        return self._optimizer.step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        self._optimizer.step_size = value

    @property
    def beta1(self) -> float:
        """Exponential decay rate for the first moment estimates."""
        return self.update_policy.beta1

    @beta1.setter
    def beta1(self, value: float) -> None:
        self.update_policy.beta1 = value

    @property
    def beta2(self) -> float:
        """Exponential decay rate for the second moment estimates."""
        return self.update_policy.beta2

    @beta2.setter
    def beta2(self, value: float) -> None:
        self.update_policy.beta2 = value

    @property
    def epsilon(self) -> float:
        return self.update_policy.epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        self.update_policy.epsilon = value

    @property
    def max_iterations(self) -> int:
        """Maximum number of iterations (0 indicates no limit)."""
        return self._optimizer.max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self._optimizer.max_iterations = value

    @property
    def tolerance(self) -> float:
        return self._optimizer.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._optimizer.tolerance = value

    @property
    def shuffle(self) -> bool:
        """Whether the terms are visited in a freshly shuffled order per pass."""
        return self._optimizer.shuffle

    @shuffle.setter
    def shuffle(self, value: bool) -> None:
        self._optimizer.shuffle = value

    @property
    def update_policy(self) -> AdamUpdate:
        return self._optimizer.update_policy  # type: ignore[return-value]

    @property
    def history(self) -> OptimizationHistory:
        return self._optimizer.history


class Adam(AdamType):
    """
    Adam optimizer (`AdamType` with the `AdamUpdate` rule).
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        step_size: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        *,
        seed: SeedLike = None,
    ) -> None:
        super().__init__(
            function,
            step_size,
            beta1,
            beta2,
            eps,
            max_iterations,
            tolerance,
            shuffle,
            AdamUpdate,
            seed=seed,
        )


class AdaMax(AdamType):
    """
    AdaMax optimizer (`AdamType` with the `AdaMaxUpdate` rule).
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        step_size: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        *,
        seed: SeedLike = None,
    ) -> None:
        super().__init__(
            function,
            step_size,
            beta1,
            beta2,
            eps,
            max_iterations,
            tolerance,
            shuffle,
            AdaMaxUpdate,
            seed=seed,
        )
