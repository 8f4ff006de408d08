# aad/core/__init__.py

"""
Core public API of the scalar AD engine.

Exports:
    Value              : Scalar node of the computation graph.
    InvalidArgument    : Raised for arguments the engine cannot differentiate through.
    Tape, use_tape     : Optional recorder of every op created inside a block.
    topological_order  : Dependency-respecting order of the graph under a root.
    backward           : Reverse pass from a root, accumulating `.grad`.
    zero_grad          : Reset `.grad` on every node under a root.
    reverse            : Reverse sweep over the active tape.
    zero_adjoints      : Reset `.grad` on everything the active tape saw.
    grad, grads, grads_list : Convenience gradients of plain functions.
    bump_grads         : Finite-difference gradients for cross-checking.
    value              : Extract the primal value from a Value.
"""

from .errors import InvalidArgument
from .var import Value
from .tape import Tape, use_tape
from .engine import topological_order, backward, zero_grad, reverse, zero_adjoints
from .seeds import grad, grads, grads_list, bump_grads, value

__all__ = [
    "Value", "InvalidArgument",
    "Tape", "use_tape",
    "topological_order", "backward", "zero_grad",
    "reverse", "zero_adjoints",
    "grad", "grads", "grads_list", "bump_grads", "value",
]
