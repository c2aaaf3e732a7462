from ._test_functions import SGDTestFunction, SumOfSquaresFunction

__all__ = [
    SGDTestFunction.__name__,
    SumOfSquaresFunction.__name__,
]
