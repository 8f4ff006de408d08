"""
Small feed-forward networks on top of the scalar AD engine.

- NetworkConfig: shape / activation / initialization settings
- Neuron, Layer, MLP: forward pass, parameter collection, in-place growth
- mean_squared_error: sum of squared differences loss
"""

from .config import NetworkConfig, make_rng
from .modules import Neuron, Layer
from .mlp import MLP
from .losses import mean_squared_error

__all__ = ['NetworkConfig', 'make_rng',
           'Neuron', 'Layer', 'MLP',
           'mean_squared_error']
