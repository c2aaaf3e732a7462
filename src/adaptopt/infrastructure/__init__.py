from .functions import SGDTestFunction, SumOfSquaresFunction
from .optimizers import (
    SGD,
    AdaMax,
    AdaMaxUpdate,
    Adam,
    AdamType,
    AdamUpdate,
    OptimizationHistory,
    VanillaUpdate,
)

__all__ = [
    SGDTestFunction.__name__,
    SumOfSquaresFunction.__name__,
    SGD.__name__,
    AdaMax.__name__,
    AdaMaxUpdate.__name__,
    Adam.__name__,
    AdamType.__name__,
    AdamUpdate.__name__,
    OptimizationHistory.__name__,
    VanillaUpdate.__name__,
]
