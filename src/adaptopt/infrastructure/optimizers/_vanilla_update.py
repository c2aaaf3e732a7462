"""
Vanilla stochastic gradient descent update rule.

This module provides the simplest update policy: a plain gradient step
with a fixed step size. It is the default policy of the `SGD` driver.

Design notes
------------
- The policy is stateless; `initialize()` exists only to satisfy the
  `IUpdatePolicy` contract.
- Updates are applied in place on the caller's iterate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass
class VanillaUpdate:
    """
    Plain gradient step.

    Update rule
    -----------
    For an iterate ``x`` with gradient ``g``:

        x <- x - step_size * g
    """

    def initialize(self, shape: Tuple[int, ...]) -> None:
        """
        No state to allocate.
        """
        return None

    def update(
        self, iterate: np.ndarray, step_size: float, gradient: np.ndarray
    ) -> None:
        """
        Apply one vanilla SGD step in place.

        Parameters
        ----------
        iterate : np.ndarray
            Current point, modified in place.
        step_size : float
            Step size for this update.
        gradient : np.ndarray
            Gradient of the visited term at ``iterate``.
        """
        iterate -= step_size * gradient
