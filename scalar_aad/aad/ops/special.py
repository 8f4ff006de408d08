# aad/ops/special.py
import numpy as np
from .arithmetic import _unary


def relu(x):
    """
    Rectifier: returns x if x > 0 else 0.
    Gradient passes through only where the output is positive.
    """
    return _unary(
        x,
        lambda a: a if a > 0 else np.float64(0.0),
        lambda a, y: 1.0 if y > 0 else 0.0,
        "relu",
    )
