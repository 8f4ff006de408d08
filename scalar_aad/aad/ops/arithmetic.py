# aad/ops/arithmetic.py
import numbers
from ..core.var import Value
from ..core.errors import InvalidArgument
from ..core import tape as tape_mod  # module access so use_tape() swaps are seen


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Value) else Value(x)


def _unary(x, f, dfdx, tag):
    """
    Generic unary primitive:
      - computes out.data = f(x.data)
      - installs out._backward: x.grad += dfdx(x.data, out.data) * out.grad
      - records the node on the active tape
    """
    x = _as_value(x)
    out = Value(f(x.data), (x,), tag)

    def _backward():
        x.grad += dfdx(x.data, out.data) * out.grad

    out._backward = _backward
    tape_mod.record(out)
    return out


def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data)
      - installs out._backward accumulating (∂out/∂x, ∂out/∂y) * out.grad
      - records the node on the active tape
    """
    x = _as_value(x)
    y = _as_value(y)
    out = Value(f(x.data, y.data), (x, y), tag)

    def _backward():
        # x and y may be the same node (x*x): both contributions land on it
        x.grad += dfdx(x.data, y.data) * out.grad
        y.grad += dfdy(x.data, y.data) * out.grad

    out._backward = _backward
    tape_mod.record(out)
    return out


def add(x, y): return _binary(x, y, lambda a,b:a+b, lambda a,b:1.0, lambda a,b:1.0, "add")
def mul(x, y): return _binary(x, y, lambda a,b:a*b, lambda a,b:b,   lambda a,b:a,   "mul")


def pow(x, k):
    """
    Power with a constant exponent:
      out.data = x.data ** k
      ∂out/∂x  = k * x^(k-1)

    The exponent must be a plain real number; node-valued exponents are
    not differentiated through and raise InvalidArgument.
    """
    if isinstance(k, Value) or isinstance(k, bool) or not isinstance(k, numbers.Real):
        raise InvalidArgument(
            f"pow() exponent must be a plain real number, got {type(k).__name__}"
        )
    return _unary(x, lambda a: a ** k, lambda a, y: k * a ** (k - 1), f"pow:{k}")


# Composites: no backward rule of their own
def neg(x): return mul(x, -1)
def sub(x, y): return add(x, neg(y))
def div(x, y): return mul(x, pow(y, -1))
