import math

import pytest

from runst.activations import (
    get_activation,
    leaky_relu,
    none,
    relu,
    sigmoid,
    silu,
    softmax,
    softplus,
    softplus_log10,
)

VALUES = [-3.0, -0.5, 0.0, 0.25, 2.0, 7.5]


def test_relu_clamps_negatives():
    assert relu([-2.0, 0.0, 3.5]) == [0.0, 0.0, 3.5]


def test_leaky_relu_scales_negatives_by_source_factor():
    result = leaky_relu([-2.0, 4.0])
    assert result[1] == 4.0
    assert result[0] / -2.0 == pytest.approx(0.01)


def test_sigmoid_at_zero():
    assert sigmoid([0.0]) == [pytest.approx(0.5)]


def test_sigmoid_symmetry():
    forward = sigmoid(VALUES)
    backward = sigmoid([-v for v in VALUES])
    for a, b in zip(forward, backward):
        assert a + b == pytest.approx(1.0)


def test_sigmoid_saturates_without_error():
    assert sigmoid([-1000.0, 1000.0]) == [0.0, 1.0]


def test_silu_is_input_times_sigmoid():
    for value, out, sig in zip(VALUES, silu(VALUES), sigmoid(VALUES)):
        assert out == pytest.approx(value * sig)


def test_softplus_difference_identity():
    pos = softplus(VALUES)
    neg = softplus([-v for v in VALUES])
    for value, a, b in zip(VALUES, pos, neg):
        assert a - b == pytest.approx(value)
        assert a > 0.0


def test_softplus_overflow_gives_infinity():
    assert softplus([1000.0]) == [math.inf]


def test_softplus_log10_matches_natural_softplus():
    for base10, natural in zip(softplus_log10(VALUES), softplus(VALUES)):
        assert base10 * math.log(10) == pytest.approx(natural)


def test_none_copies_input():
    data = [1.0, -2.0]
    result = none(data)
    assert result == data
    result.append(3.0)
    assert data == [1.0, -2.0]


def test_softmax_is_a_distribution():
    result = softmax(VALUES)
    assert sum(result) == pytest.approx(1.0)
    assert all(p > 0.0 for p in result)
    assert result == sorted(result)


def test_softmax_equal_inputs_uniform():
    result = softmax([2.0, 2.0, 2.0, 2.0])
    assert result == [pytest.approx(1 / 4)] * 4


def test_softmax_shift_invariant():
    shifted = softmax([v + 5.0 for v in VALUES])
    for a, b in zip(softmax(VALUES), shifted):
        assert a == pytest.approx(b)


@pytest.mark.parametrize("func", [relu, leaky_relu, silu, softplus, sigmoid, none, softmax])
def test_empty_input(func):
    assert func([]) == []


@pytest.mark.parametrize(
    "name, func",
    [
        ("none", none),
        ("relu", relu),
        ("leaky_relu", leaky_relu),
        ("silu", silu),
        ("softplus", softplus),
        ("softplus_log10", softplus_log10),
        ("sigmoid", sigmoid),
        ("softmax", softmax),
    ],
)
def test_get_activation_by_name(name, func):
    assert get_activation(name) is func


def test_get_activation_unknown():
    with pytest.raises(ValueError):
        get_activation("tanh")