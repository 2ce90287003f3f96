# picograd/ops/activations.py
import numpy as np
from scipy.special import expit

from .arithmetic import _unary


def tanh(x):
    return _unary(x, np.tanh, lambda a, out: 1.0 - out * out, "tanh")


def relu(x):
    """
    max(0, x). The local gradient is 1 for x > 0 and 0 otherwise, so the
    sub-gradient at exactly x == 0 is 0.
    """
    return _unary(x, lambda a: np.maximum(a, 0.0), lambda a, out: 1.0 if a > 0 else 0.0, "relu")


def sigmoid(x):
    """Logistic function 1/(1+e^-x); ``expit`` does not overflow for large |x|."""
    return _unary(x, expit, lambda a, out: out * (1.0 - out), "sigmoid")
