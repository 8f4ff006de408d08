# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.errors import InvalidArgument
from .core.var import Value
from .core.tape import Tape, use_tape
from .core.engine import (
    topological_order,
    backward,
    zero_grad,
    reverse,
    zero_adjoints,
)
from .core.seeds import grad, grads, grads_list, bump_grads

# Registers the op modules Value's operators import lazily
from . import ops
from .ops import add, sub, mul, div, neg, pow, exp, tanh, relu

__all__ = [
    # Core
    'Value',
    'InvalidArgument',
    'Tape',
    'use_tape',
    # Engine
    'topological_order',
    'backward',
    'zero_grad',
    'reverse',
    'zero_adjoints',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'bump_grads',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp', 'tanh', 'relu',
]
