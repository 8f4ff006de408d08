# aad/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Callable, Optional, Tuple


def _noop():
    pass


class Value:
    """
    Scalar node of the computation graph for reverse-mode AD.

    Attributes
    ----------
    data : np.float64
        Forward (primal) value. Read-only once the node exists.
    grad : float
        Gradient accumulator, d(root)/d(self) after a backward pass.
        Starts at 0.0 and is never reset automatically between passes.
    predecessors : tuple[Value, ...]
        The 0-2 operands this node was computed from, in recorded order.
    op : str
        Tag of the primitive that produced the node ("" for leaves).
        Only used for diagnostics.
    label : Optional[str]
        Optional debug/display name.
    """

    __slots__ = ('_data', 'grad', '_prev', '_op', '_backward', 'label')

    def __init__(self, data, _children: Tuple['Value', ...] = (), _op: str = '',
                 *, label: Optional[str] = None):
        # Only real scalars; numpy float64 keeps inf/nan semantics for x/0, exp overflow
        if isinstance(data, bool) or not isinstance(data, numbers.Real):
            raise TypeError(
                f"Value only accepts real numeric scalars (int, float, numpy scalar), "
                f"but got {type(data)}"
            )
        self._data = np.float64(data)
        self.grad = 0.0
        self._prev: Tuple[Value, ...] = tuple(_children)
        self._op = _op
        self._backward: Callable[[], None] = _noop
        self.label = label

    @property
    def data(self) -> np.float64:
        return self._data

    @property
    def predecessors(self) -> Tuple['Value', ...]:
        return self._prev

    @property
    def op(self) -> str:
        return self._op

    def is_leaf(self) -> bool:
        return not self._prev

    def __repr__(self):
        name = f", label={self.label!r}" if self.label else ""
        return f"Value(data={float(self._data)!r}, grad={float(self.grad)!r}{name})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        # exponent would be a node: always rejected by pow
        from ..ops.arithmetic import pow
        return pow(other, self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def relu(self):
        from ..ops.special import relu
        return relu(self)

    def backward(self):
        """Run a reverse pass rooted at this node (see engine.backward)."""
        from .engine import backward
        backward(self)
