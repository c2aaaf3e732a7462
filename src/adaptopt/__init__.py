"""
adaptopt: adaptive-moment stochastic optimization for decomposable
objectives.
"""

from .domain import (
    EmptyFunctionError,
    IDecomposableFunction,
    IOptimizer,
    IUpdatePolicy,
    ShapeMismatchError,
)
from .infrastructure import (
    SGD,
    AdaMax,
    AdaMaxUpdate,
    Adam,
    AdamType,
    AdamUpdate,
    OptimizationHistory,
    SGDTestFunction,
    SumOfSquaresFunction,
    VanillaUpdate,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyFunctionError",
    "IDecomposableFunction",
    "IOptimizer",
    "IUpdatePolicy",
    "ShapeMismatchError",
    "SGD",
    "AdaMax",
    "AdaMaxUpdate",
    "Adam",
    "AdamType",
    "AdamUpdate",
    "OptimizationHistory",
    "SGDTestFunction",
    "SumOfSquaresFunction",
    "VanillaUpdate",
]
