# aad/ops/transcendental.py
import numpy as np
from .arithmetic import _unary


def exp(x):
    # d/dx e^x = e^x, read back from the output
    return _unary(x, np.exp, lambda a, y: y, "exp")


def tanh(x):
    """
    Hyperbolic tangent, (e^(2x) - 1) / (e^(2x) + 1).

    Derivative: 1 - tanh(x)^2, computed from the output value.
    """
    return _unary(x, np.tanh, lambda a, y: 1.0 - y * y, "tanh")
