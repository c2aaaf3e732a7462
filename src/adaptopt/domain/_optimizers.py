"""
Domain-level optimizer contracts for adaptopt.

This module defines the `IOptimizer` protocol, which specifies the minimal
interface required for optimizer implementations (e.g., SGD, Adam, AdaMax).

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Optimizers own a reference to a decomposable function and mutate the
  caller's iterate in place. How gradients are obtained is up to the
  function; no autodiff is involved.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOptimizer(Protocol):
    """
    Optimizer interface contract.

    Required methods
    ----------------
    - `optimize(iterate)` moves ``iterate`` (in place) towards a local
      minimum and returns the objective value at the final point.
    """

    def optimize(self, iterate: Any) -> float:
        """
        Optimize the held function starting from ``iterate``.

        Parameters
        ----------
        iterate : Any
            Starting point. Modified in place to hold the final point.

        Returns
        -------
        float
            Objective value of the final point.
        """
        ...

    @property
    def function(self) -> Any:
        """
        Return the function being optimized.
        """
        ...
