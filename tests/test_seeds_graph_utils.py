import numpy as np
import pytest

from scalar_aad.aad import Value, grad, grads, grads_list, bump_grads
from scalar_aad.aad.core.seeds import value
from scalar_aad.aad.core.graph_utils import get_graph_stats, analyze_graph_complexity


def test_grad_single_input():
    assert grad(lambda x: x ** 3, 2.0) == pytest.approx(12.0)


def test_grad_of_constant_function_is_zero():
    assert grad(lambda x: 5.0, 1.0) == 0.0


def test_repeated_grad_on_the_same_leaf_does_not_accumulate():
    x = Value(2.0)
    assert grad(lambda v: v * v, x) == pytest.approx(4.0)
    assert grad(lambda v: v * v, x) == pytest.approx(4.0)


def test_grads_clear_stale_gradients_on_inputs():
    x, y = Value(2.0), Value(5.0)
    x.grad, y.grad = 10.0, 10.0
    g = grads(lambda v: v["x"] * 3, {"x": x, "y": y})
    assert g == {"x": pytest.approx(3.0), "y": 0.0}

    xs = [Value(1.0), Value(2.0)]
    first = grads_list(lambda v: v[0] * v[1], xs)
    second = grads_list(lambda v: v[0] * v[1], xs)
    assert first == second == [pytest.approx(2.0), pytest.approx(1.0)]


def test_grads_dict_form():
    g = grads(lambda v: v["x"] * v["y"] + v["y"].exp(), {"x": 2.0, "y": 0.0})
    assert list(g) == ["x", "y"]
    assert g["x"] == pytest.approx(0.0)
    assert g["y"] == pytest.approx(3.0)


def test_grads_list_form():
    out = grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0])
    assert out == [pytest.approx(4.0), pytest.approx(3.0)]


def test_bump_grads_polynomial():
    g = bump_grads(lambda xs: xs[0] ** 2 * xs[1], [3.0, 2.0])
    np.testing.assert_allclose(g, [12.0, 9.0], rtol=1e-6)


def test_value_helper():
    assert value(Value(2.5)) == 2.5
    assert value(7) == 7


def test_graph_stats_for_micrograd_example():
    a, b = Value(-2.0), Value(3.0)
    f = (a * b) * (a + b)
    stats = get_graph_stats(f)
    assert stats["nodes"] == 5
    assert stats["edges"] == 6
    assert stats["max_fan_in"] == 2
    assert stats["max_fan_out"] == 2
    assert stats["avg_fan_out"] == pytest.approx(6 / 5)
    assert stats["operations"] == {"leaf": 2, "mul": 2, "add": 1}


def test_graph_stats_group_pow_exponents():
    x = Value(2.0)
    y = x ** 2 + x ** -1
    assert get_graph_stats(y)["operations"]["pow"] == 2


def test_single_leaf_stats():
    stats = get_graph_stats(Value(1.0))
    assert stats["nodes"] == 1
    assert stats["edges"] == 0
    assert stats["operations"] == {"leaf": 1}


def test_complexity_report():
    a, b = Value(-2.0), Value(3.0)
    report = analyze_graph_complexity((a * b) * (a + b))
    assert "Total nodes: 5" in report
    assert "Complexity level: Low" in report
    assert "- mul: 40.0%" in report
