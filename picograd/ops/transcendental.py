# picograd/ops/transcendental.py
import numpy as np

from .arithmetic import _unary


def exp(x):
    # d/dx e^x is the forward result itself
    return _unary(x, np.exp, lambda a, out: out, "exp")


def log(x):
    """
    Natural logarithm, d/dx ln(x) = 1/x.

    Non-positive input gives -inf / nan (numpy emits a RuntimeWarning) rather
    than raising; callers offset probabilities by a small epsilon first.
    """
    return _unary(x, np.log, lambda a, out: 1.0 / a, "log")
