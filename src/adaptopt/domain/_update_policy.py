"""
Update policy contract.

An update policy turns one stochastic gradient into an in-place step on
the iterate. It may keep per-coordinate state (moment estimates, step
counters) but knows nothing about the objective function or iteration
control, which belong to the driver.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class IUpdatePolicy(Protocol):
    """
    Update policy interface contract.

    Required methods
    ----------------
    - `initialize(shape)` (re)allocates any per-coordinate state for an
      iterate of the given shape.
    - `update(iterate, step_size, gradient)` applies one step to ``iterate``
      in place.
    """

    def initialize(self, shape: Tuple[int, ...]) -> None:
        """
        Reset policy state for an iterate of shape ``shape``.
        """
        ...

    def update(self, iterate: Any, step_size: float, gradient: Any) -> None:
        """
        Apply one update step to ``iterate`` in place.
        """
        ...
