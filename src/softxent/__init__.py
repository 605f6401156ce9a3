from softxent.function import Function
from softxent.function.loss import LossFunction, BinaryCrossEntropyLoss
from softxent.Checkpoint import Checkpoint

__version__ = "0.1.0"
