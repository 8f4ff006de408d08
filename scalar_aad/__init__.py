"""
scalar_aad: scalar reverse-mode automatic differentiation and the small
neural networks built on it.

Usage:
    from scalar_aad import Value

    a = Value(-2.0); b = Value(3.0)
    f = (a * b) * (a + b)
    f.backward()          # a.grad == -3.0, b.grad == -8.0
"""

from .aad import (
    Value,
    InvalidArgument,
    Tape,
    use_tape,
    topological_order,
    backward,
    zero_grad,
)
from .nn import NetworkConfig, make_rng, Neuron, Layer, MLP, mean_squared_error

__version__ = "0.1.0"

__all__ = [
    'Value', 'InvalidArgument', 'Tape', 'use_tape',
    'topological_order', 'backward', 'zero_grad',
    'NetworkConfig', 'make_rng', 'Neuron', 'Layer', 'MLP', 'mean_squared_error',
]
