"""
Optimization history utilities.

This module defines a lightweight record of the aggregate objective seen
by the stochastic-descent driver at every pass boundary, in a manner
similar to Keras' `History` object.

Design goals
------------
- Minimal surface area: no dependency on NumPy arrays or update policies
- Deterministic ordering and explicit pass indexing
- Human-readable and debugger-friendly representation
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OptimizationHistory:
    """
    Per-pass objective record of one `SGD.optimize` run.

    Attributes
    ----------
    passes : List[int]
        Pass indices. Pass ``0`` holds the full objective at the starting
        point; pass ``k >= 1`` holds the sum of the term objectives gathered
        while visiting the terms during the ``k``-th pass.
    objectives : List[float]
        Aggregate objective for each entry in `passes`.
    iterations : int
        Number of steps (term visits) performed.
    converged : bool
        True if the run stopped because the tolerance criterion fired.
    final_objective : Optional[float]
        Objective over the full term set at the stopping point.

    Notes
    -----
    The object is passive: the driver appends values, nothing is computed
    here.
    """

    passes: List[int] = field(default_factory=list)
    objectives: List[float] = field(default_factory=list)
    iterations: int = 0
    converged: bool = False
    final_objective: Optional[float] = None

    def append_pass(self, pass_idx: int, objective: float) -> None:
        """
        Record the aggregate objective of a completed pass.

        Parameters
        ----------
        pass_idx : int
            Index of the pass (``0`` for the starting point).
        objective : float
            Aggregate objective for that pass, coerced to `float`.
        """
        self.passes.append(int(pass_idx))
        self.objectives.append(float(objective))

    def last(self) -> Optional[float]:
        """
        Return the most recently recorded pass objective, if any.
        """
        if not self.objectives:
            return None
        return self.objectives[-1]

    def __len__(self) -> int:
        return len(self.passes)
