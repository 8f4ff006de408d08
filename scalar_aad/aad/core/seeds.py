# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Sequence
import numpy as np

from .var import Value
from .engine import backward, zero_grad


def value(x: Any) -> Any:
    """Return the numeric value of a Value; pass through plain numbers unchanged."""
    return x.data if isinstance(x, Value) else x


def _ensure_value(v: Any, *, label: str) -> Value:
    """Wrap a plain number as a leaf Value if needed; otherwise return it."""
    return v if isinstance(v, Value) else Value(v, label=label)


def _as_output(y: Any) -> Value:
    # constant results (f ignores its inputs) still get a node to seed
    return y if isinstance(y, Value) else Value(y, label="y")


def _fresh_backward(y: Any, inputs: Iterable[Value]) -> None:
    """
    Clear stale gradients on the graph under `y` and on the inputs (which
    `f` may have ignored), then run one reverse pass.
    """
    y = _as_output(y)
    zero_grad(y)
    for x in inputs:
        x.grad = 0.0
    backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph and runs one reverse pass; gradients left on
    `x0` by earlier passes are cleared first.
    """
    x = _ensure_value(x0, label="x")
    _fresh_backward(f(x), [x])
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    ONE reverse pass yields every ∂y/∂var.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a scalar Value
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # same key order as `inputs`
    """
    vars_ad: Dict[str, Value] = {k: _ensure_value(v, label=k) for k, v in inputs.items()}
    _fresh_backward(f(vars_ad), vars_ad.values())
    return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are a list and so is the result.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_ensure_value(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    _fresh_backward(f(xs), xs)
    return [x.grad for x in xs]


# ----------------------------- bumping ----------------------------- #
def bump_grads(f: Callable[[List[Value]], Any],
               x0_list: Sequence[float],
               eps: float = 1e-6) -> np.ndarray:
    """
    Central finite differences of y=f(xs), one input bumped at a time:
        (f(x + eps*e_i) - f(x - eps*e_i)) / (2*eps)

    `f` gets a fresh list of leaf Values for each evaluation, so the same
    function can be fed to grads_list() to cross-check the reverse pass.
    """
    x0 = np.asarray(x0_list, dtype=np.float64)
    out = np.zeros_like(x0)
    for i in range(x0.size):
        up = x0.copy(); up[i] += eps
        dn = x0.copy(); dn[i] -= eps
        y_up = value(f([Value(v) for v in up]))
        y_dn = value(f([Value(v) for v in dn]))
        out[i] = (y_up - y_dn) / (2.0 * eps)
    return out
