import math
from enum import Enum

class ActivationFunction(str, Enum):
    """Activation functions a layer can be configured with."""
    NONE = "none"
    STEP = "step"
    SIGMOID = "sigmoid"


def is_recognized(activation) -> bool:
    """Returns True if the identifier names a known activation function."""
    try:
        ActivationFunction(activation)
    except ValueError:
        return False
    return True


def apply(activation, x: float) -> float:
    """
    Apply an activation function to a scalar.
    Unknown identifiers leave x unchanged.
    """
    try:
        func = ActivationFunction(activation)
    except ValueError:
        return x

    if func is ActivationFunction.STEP:
        return step(x)
    if func is ActivationFunction.SIGMOID:
        return sigmoid(x)
    return x


def step(x: float) -> float:
    return 1.0 if x > 0 else 0.0


def sigmoid(x: float) -> float:
    try:
        return 1 / (1 + math.exp(-x))
    except OverflowError:
        # e^-x is past float range, the limit is 0
        return 0.0
