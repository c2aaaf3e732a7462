"""
Decomposable objective function contract.

This module defines the `IDecomposableFunction` protocol consumed by the
stochastic-descent driver. A decomposable function is an objective that
can be written as a sum of independently evaluable terms, e.g. one term
per training sample.

Notes
-----
- The driver never evaluates or differentiates the objective itself; the
  three methods below are the entire surface it depends on.
- Implementations typically hold their dataset internally and interpret
  ``i`` as the index of a sample.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDecomposableFunction(Protocol):
    """
    Objective function contract for stochastic optimizers.

    Required methods
    ----------------
    - `num_functions()` returns the number of terms ``n``.
    - `evaluate(coordinates, i)` returns the value of term ``i``.
    - `gradient(coordinates, i, gradient)` writes the gradient of term ``i``
      into ``gradient`` in place.
    """

    def num_functions(self) -> int:
        """
        Return the number of terms in the objective.
        """
        ...

    def evaluate(self, coordinates: Any, i: int) -> float:
        """
        Evaluate term ``i`` at ``coordinates``.
        """
        ...

    def gradient(self, coordinates: Any, i: int, gradient: Any) -> None:
        """
        Compute the gradient of term ``i`` at ``coordinates``.

        The result must be written into ``gradient``, which has the same
        shape and dtype as ``coordinates``. The driver reuses one buffer for
        the whole run, so every entry has to be overwritten.
        """
        ...
