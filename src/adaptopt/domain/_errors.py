"""
Configuration errors raised by adaptopt optimizers.

This module defines the exceptions used to signal invalid input detected
before (or at the very start of) an optimization run. They allow the
optimizers to fail fast and clearly instead of looping on an empty
objective or silently broadcasting a gradient of the wrong shape.

Numerical degradation (NaN/Inf values produced mid-run) is deliberately
not represented here: it is never detected by the optimizers and shows up
only in the returned objective value and the final iterate.
"""


class EmptyFunctionError(ValueError):
    """
    Raised when a decomposable function reports zero terms.

    An objective with no terms has no well-defined pass, so the driver
    refuses to start instead of looping forever.

    Attributes
    ----------
    num_functions : int
        The number of terms reported by the function.
    """

    def __init__(self, num_functions: int) -> None:
        """
        Initialize the EmptyFunctionError.

        Parameters
        ----------
        num_functions : int
            The (non-positive) value returned by ``num_functions()``.
        """
        super().__init__(
            f"decomposable function must have at least one term, "
            f"got num_functions()={num_functions}"
        )
        self.num_functions = num_functions


class ShapeMismatchError(ValueError):
    """
    Raised when a gradient does not match the shape of the optimizer state.

    Update policies keep per-coordinate state with the iterate's shape. A
    gradient of any other shape would either fail deep inside NumPy or,
    worse, broadcast silently.
    """

    def __init__(self, expected: tuple, actual: tuple) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        expected : tuple
            Shape the policy state was initialized with.
        actual : tuple
            Shape of the offending gradient (or iterate).
        """
        super().__init__(f"Shape mismatch: expected {expected}, got {actual}.")
        self.expected = expected
        self.actual = actual
