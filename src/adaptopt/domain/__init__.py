from ._errors import EmptyFunctionError, ShapeMismatchError
from ._function import IDecomposableFunction
from ._optimizers import IOptimizer
from ._update_policy import IUpdatePolicy

__all__ = [
    EmptyFunctionError.__name__,
    ShapeMismatchError.__name__,
    IDecomposableFunction.__name__,
    IOptimizer.__name__,
    IUpdatePolicy.__name__,
]
