"""
Backward pass and gradient reset on small hand-checked graphs.
"""

import math
import pytest

from compgraph import (
    make_leaf, add, multiply, power, exponential, rectify,
    backward, zero_gradients, iter_reachable, value, gradient,
)


def _demo_graph():
    a = make_leaf(2.0, name="a")
    b = make_leaf(3.0, name="b")
    c = make_leaf(-2.0, name="c")
    e = make_leaf(2.0, name="e")
    f = rectify(add(multiply(a, b), power(c, e)))
    return f, a, b, c, e


def test_forward_value():
    f, *_ = _demo_graph()
    # 2*3 + (-2)^2 = 10, positive so relu leaves it alone
    assert value(f) == pytest.approx(10.0)


def test_gradients_of_demo_expression():
    f, a, b, c, e = _demo_graph()
    backward(f)
    assert gradient(f) == 1.0
    assert gradient(a) == pytest.approx(3.0)
    assert gradient(b) == pytest.approx(2.0)
    assert gradient(c) == pytest.approx(-4.0)
    # exponent is a frozen constant
    assert gradient(e) == 0.0


def test_shared_operand_accumulates():
    x = make_leaf(5.0)
    y = add(x, x)
    backward(y)
    assert y.value == 10.0
    assert x.gradient == pytest.approx(2.0)


def test_shared_subexpression_across_consumers():
    # z = (x*y) + exp(x*y); dz/dx = y*(1 + e^(xy)), dz/dy = x*(1 + e^(xy))
    x = make_leaf(0.5)
    y = make_leaf(2.0)
    xy = multiply(x, y)
    z = add(xy, exponential(xy))
    backward(z)
    assert xy.gradient == pytest.approx(1.0 + math.e)
    assert x.gradient == pytest.approx(2.0 * (1.0 + math.e))
    assert y.gradient == pytest.approx(0.5 * (1.0 + math.e))


def test_diamond_fan_in():
    # d = (a*a) * (a+a) = 2a^3 -> dd/da = 6a^2
    a = make_leaf(1.5)
    d = multiply(multiply(a, a), add(a, a))
    backward(d)
    assert d.value == pytest.approx(2.0 * 1.5 ** 3)
    assert a.gradient == pytest.approx(6.0 * 1.5 ** 2)


def test_rectify_negative_input_blocks_gradient():
    x = make_leaf(-3.0)
    y = rectify(x)
    assert y.value == 0.0
    backward(y)
    assert x.gradient == 0.0


def test_rectify_at_zero_uses_zero_subgradient():
    x = make_leaf(0.0)
    y = rectify(x)
    backward(y)
    assert x.gradient == 0.0


def test_exponential_uses_forward_value():
    x = make_leaf(1.0)
    y = exponential(x)
    backward(y)
    assert y.value == pytest.approx(math.e)
    assert x.gradient == pytest.approx(math.e)


def test_power_gradient_only_reaches_base():
    base = make_leaf(3.0)
    exponent = make_leaf(4.0)
    y = power(base, exponent)
    backward(y)
    assert y.value == pytest.approx(81.0)
    assert base.gradient == pytest.approx(4.0 * 27.0)
    assert exponent.gradient == 0.0


def test_leaf_only_backward():
    x = make_leaf(7.0)
    backward(x)
    assert x.gradient == 1.0


def test_backward_overwrites_root_seed():
    x = make_leaf(2.0)
    y = multiply(x, x)
    y.gradient = 123.0
    backward(y)
    assert y.gradient == 1.0
    assert x.gradient == pytest.approx(4.0)


def test_custom_seed_scales_gradients():
    x = make_leaf(2.0)
    y = multiply(x, make_leaf(3.0))
    backward(y, seed=0.5)
    assert x.gradient == pytest.approx(1.5)


def test_second_pass_without_reset_accumulates():
    x = make_leaf(2.0)
    y = multiply(x, make_leaf(3.0))
    backward(y)
    backward(y)
    assert x.gradient == pytest.approx(6.0)


def test_zero_gradients_is_idempotent():
    f, a, b, c, e = _demo_graph()
    backward(f)
    zero_gradients(f)
    zero_gradients(f)
    assert all(node.gradient == 0.0 for node in iter_reachable(f))


def test_reset_then_backward_matches_first_pass():
    f, a, b, c, e = _demo_graph()
    backward(f)
    first = [a.gradient, b.gradient, c.gradient]
    zero_gradients(f)
    backward(f)
    assert [a.gradient, b.gradient, c.gradient] == pytest.approx(first)


def test_zero_gradients_on_subgraph_leaves_consumers():
    x = make_leaf(2.0)
    inner = multiply(x, x)
    outer = add(inner, make_leaf(1.0))
    backward(outer)
    zero_gradients(inner)
    assert x.gradient == 0.0
    assert inner.gradient == 0.0
    assert outer.gradient == 1.0


def test_deep_chain_does_not_recurse():
    x = make_leaf(1.0)
    y = x
    for _ in range(20000):
        y = add(y, make_leaf(0.0))
    backward(y)
    assert x.gradient == 1.0
    zero_gradients(y)
    assert x.gradient == 0.0
