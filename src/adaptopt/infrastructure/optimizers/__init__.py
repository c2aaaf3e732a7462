from ._adam import AdaMax, Adam, AdamType
from ._adam_update import AdamUpdate
from ._adamax_update import AdaMaxUpdate
from ._history import OptimizationHistory
from ._sgd import SGD
from ._vanilla_update import VanillaUpdate

__all__ = [
    AdaMax.__name__,
    Adam.__name__,
    AdamType.__name__,
    AdamUpdate.__name__,
    AdaMaxUpdate.__name__,
    OptimizationHistory.__name__,
    SGD.__name__,
    VanillaUpdate.__name__,
]
