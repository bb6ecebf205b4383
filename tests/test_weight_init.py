import math
import random

import pytest

from runst.weight_init import (
    get_distribution,
    he_normal_dis,
    he_uniform_dis,
    needs_next_layer,
    normal_dis,
    random_matrix,
    uniform_dis,
    xav_gro_normal_dis,
    xav_gro_uniform_dis,
)


def within(values, low, high):
    return all(low <= v <= high for v in values)


def test_random_matrix_length_and_bounds():
    values = random_matrix(3, 4, -2.0, 5.0, random.Random(1))
    assert len(values) == 12
    assert within(values, -2.0, 5.0)


def test_random_matrix_is_reproducible():
    first = random_matrix(2, 5, 0.0, 1.0, random.Random(42))
    second = random_matrix(2, 5, 0.0, 1.0, random.Random(42))
    assert first == second


def test_random_matrix_degenerate_range():
    assert random_matrix(2, 2, 0.5, 0.5, random.Random(0)) == [0.5] * 4


def test_random_matrix_rejects_inverted_range():
    with pytest.raises(ValueError):
        random_matrix(2, 2, 1.0, 0.0)


def test_random_matrix_rejects_infinite_bound():
    with pytest.raises(ValueError):
        random_matrix(2, 2, 0.0, math.inf)


def test_random_matrix_without_rng():
    values = random_matrix(1, 3, 0.0, 1.0)
    assert len(values) == 3
    assert within(values, 0.0, 1.0)


def test_normal_dis_bounds():
    values = normal_dis(4, 3, random.Random(3))
    assert len(values) == 12
    assert within(values, 0.0, 1.0)


def test_uniform_dis_symmetric_bounds():
    values = uniform_dis(4, 8, random.Random(5))
    bound = 1 / math.sqrt(4)
    assert len(values) == 32
    assert within(values, -bound, bound)


def test_he_normal_dis_bounds():
    values = he_normal_dis(8, 2, random.Random(7))
    bound = math.sqrt(2 / 8)
    assert len(values) == 16
    assert min(values) >= 0.0
    assert max(values) <= bound


def test_he_uniform_dis_bounds():
    values = he_uniform_dis(6, 6, random.Random(9))
    bound = math.sqrt(6 / 6)
    assert within(values, -bound, bound)
    assert any(v < 0 for v in values)


def test_xav_gro_normal_dis_bounds():
    values = xav_gro_normal_dis(2, 3, 2, random.Random(11))
    assert len(values) == 6
    assert within(values, 0.0, math.sqrt(2 / (2 + 2)))


def test_xav_gro_uniform_dis_bounds():
    values = xav_gro_uniform_dis(3, 4, 3, random.Random(13))
    bound = math.sqrt(6 / (3 + 3))
    assert len(values) == 12
    assert within(values, -bound, bound)


@pytest.mark.parametrize("func", [uniform_dis, he_normal_dis, he_uniform_dis])
def test_zero_fan_in_rejected(func):
    with pytest.raises(ValueError):
        func(0, 3)


def test_xav_gro_zero_sum_rejected():
    with pytest.raises(ValueError):
        xav_gro_normal_dis(0, 2, 0)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("uniform_dis", False),
        ("normal_dis", False),
        ("he_normal_dis", False),
        ("he_uniform_dis", False),
        ("xav_gro_normal_dis", True),
        ("xav_gro_uniform_dis", True),
    ],
)
def test_needs_next_layer(name, expected):
    assert needs_next_layer(name) is expected


def test_get_distribution_by_name():
    assert get_distribution("he_normal_dis") is he_normal_dis
    assert get_distribution("xav_gro_uniform_dis") is xav_gro_uniform_dis


def test_unknown_distribution():
    with pytest.raises(ValueError):
        get_distribution("gaussian")
    with pytest.raises(ValueError):
        needs_next_layer("gaussian")