import math

import numpy as np
import pytest

from scalar_aad.aad import Value, InvalidArgument, backward
from scalar_aad.aad import ops


def test_leaf_construction():
    a = Value(2, label="a")
    assert a.data == 2.0
    assert isinstance(a.data, np.float64)
    assert a.grad == 0.0
    assert a.predecessors == ()
    assert a.op == ""
    assert a.is_leaf()
    assert "label='a'" in repr(a)


@pytest.mark.parametrize("bad", ["3", None, [1.0], True])
def test_leaf_rejects_non_numeric(bad):
    with pytest.raises(TypeError):
        Value(bad)


def test_data_is_read_only():
    a = Value(1.0)
    with pytest.raises(AttributeError):
        a.data = 5.0


def test_add_rule():
    a, b = Value(2.0), Value(3.0)
    out = ops.add(a, b)
    assert out.data == 5.0
    assert out.op == "add"
    assert out.predecessors == (a, b)
    backward(out)
    assert (a.grad, b.grad, out.grad) == (1.0, 1.0, 1.0)


def test_mul_rule():
    a, b = Value(2.0), Value(3.0)
    out = ops.mul(a, b)
    backward(out)
    assert out.data == 6.0
    assert a.grad == 3.0
    assert b.grad == 2.0
    assert out.grad == 1.0


def test_pow_rule():
    a = Value(3.0)
    out = ops.pow(a, 2)
    assert out.data == 9.0
    assert out.op == "pow:2"
    assert out.predecessors == (a,)
    backward(out)
    assert a.grad == pytest.approx(6.0)


def test_pow_fractional_and_negative_exponents():
    a = Value(4.0)
    root = ops.pow(a, 0.5)
    backward(root)
    assert root.data == pytest.approx(2.0)
    assert a.grad == pytest.approx(0.25)

    b = Value(2.0)
    inv = ops.pow(b, -1)
    backward(inv)
    assert inv.op == "pow:-1"
    assert b.grad == pytest.approx(-0.25)


@pytest.mark.parametrize("exponent", [Value(2.0), "2", None, True])
def test_pow_rejects_non_real_exponent(exponent):
    with pytest.raises(InvalidArgument):
        ops.pow(Value(3.0), exponent)


def test_node_valued_exponent_via_operators():
    a, k = Value(3.0), Value(2.0)
    with pytest.raises(InvalidArgument):
        a ** k
    with pytest.raises(InvalidArgument):
        2 ** a


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        ops.pow(Value(1.0), Value(1.0))


def test_exp_rule():
    a = Value(1.0)
    out = ops.exp(a)
    backward(out)
    assert out.op == "exp"
    assert out.data == pytest.approx(math.e)
    assert a.grad == pytest.approx(math.e)


def test_tanh_rule_matches_exponential_formula():
    x = 0.5
    a = Value(x)
    out = ops.tanh(a)
    backward(out)
    t = (math.exp(2 * x) - 1) / (math.exp(2 * x) + 1)
    assert out.op == "tanh"
    assert out.data == pytest.approx(t)
    assert a.grad == pytest.approx(1 - t ** 2)


@pytest.mark.parametrize("x, data, grad", [(2.5, 2.5, 1.0), (-1.5, 0.0, 0.0), (0.0, 0.0, 0.0)])
def test_relu_rule(x, data, grad):
    a = Value(x)
    out = ops.relu(a)
    backward(out)
    assert out.op == "relu"
    assert out.data == data
    assert a.grad == grad


def test_value_methods_delegate_to_ops():
    a = Value(0.3)
    assert a.exp().op == "exp"
    assert a.tanh().op == "tanh"
    assert a.relu().op == "relu"


def test_neg_is_mul_by_minus_one():
    a = Value(4.0)
    out = -a
    assert out.op == "mul"
    assert out.predecessors[0] is a
    assert out.predecessors[1].data == -1.0
    assert out.predecessors[1].is_leaf()
    backward(out)
    assert out.data == -4.0
    assert a.grad == -1.0


def test_sub_is_add_of_negation():
    a, b = Value(5.0), Value(3.0)
    out = a - b
    assert out.op == "add"
    assert out.predecessors[0] is a
    assert out.predecessors[1].op == "mul"
    backward(out)
    assert out.data == 2.0
    assert a.grad == 1.0
    assert b.grad == -1.0


def test_div_is_mul_by_reciprocal():
    a, b = Value(6.0), Value(3.0)
    out = a / b
    assert out.op == "mul"
    assert out.predecessors[0] is a
    assert out.predecessors[1].op == "pow:-1"
    backward(out)
    assert out.data == pytest.approx(2.0)
    assert a.grad == pytest.approx(1.0 / 3.0)
    assert b.grad == pytest.approx(-6.0 / 9.0)


def test_numbers_are_coerced_into_constant_leaves():
    a = Value(2.0)
    out = a + 1
    const = out.predecessors[1]
    assert isinstance(const, Value)
    assert const.is_leaf()
    assert const.data == 1.0
    backward(out)
    assert const.grad == 1.0


def test_reflected_operators():
    a = Value(4.0)
    assert (1 + a).data == 5.0
    assert (3 * a).data == 12.0

    r = 10 - a
    backward(r)
    assert r.data == 6.0
    assert a.grad == -1.0

    b = Value(4.0)
    q = 1 / b
    backward(q)
    assert q.data == pytest.approx(0.25)
    assert b.grad == pytest.approx(-1.0 / 16.0)


def test_operands_are_not_mutated():
    a, b = Value(2.0), Value(3.0)
    a * b + a
    assert a.data == 2.0 and b.data == 3.0
    assert a.grad == 0.0 and b.grad == 0.0
    assert a.predecessors == () and b.predecessors == ()


def test_same_operation_twice_gives_distinct_nodes():
    a, b = Value(2.0), Value(3.0)
    c1 = ops.mul(a, b)
    c2 = ops.mul(a, b)
    assert c1.data == c2.data
    assert c1 is not c2
    assert c1 != c2
    assert c1.predecessors[0] is c2.predecessors[0] is a
    assert len({c1, c2}) == 2


def test_division_by_zero_yields_inf():
    with np.errstate(divide="ignore"):
        out = Value(1.0) / Value(0.0)
    assert np.isinf(out.data)


def test_exp_overflow_yields_inf():
    with np.errstate(over="ignore"):
        out = ops.exp(Value(1000.0))
    assert np.isinf(out.data)
