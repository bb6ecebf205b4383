"""Weight initialisation schemes producing flat, row-major weight matrices."""

from __future__ import annotations

import math
import random
from collections.abc import Callable


def _generator(rng: random.Random | None):
    return random if rng is None else rng


def _sqrt_ratio(numerator: float, denominator: int) -> float:
    if denominator <= 0:
        raise ValueError("layer sizes must give a positive fan-in")
    return math.sqrt(numerator / denominator)


def random_matrix(
    fan_in: int,
    fan_out: int,
    low: float,
    high: float,
    rng: random.Random | None = None,
) -> list[float]:
    """Return ``fan_in * fan_out`` values drawn uniformly from ``[low, high]``."""
    if fan_in < 0 or fan_out < 0:
        raise ValueError("layer sizes must not be negative")
    if not (math.isfinite(low) and math.isfinite(high)):
        raise ValueError("range bounds must be finite")
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    generator = _generator(rng)
    return [generator.uniform(low, high) for _ in range(fan_in * fan_out)]


def normal_dis(fan_in: int, fan_out: int, rng: random.Random | None = None) -> list[float]:
    """Weights in [0, 1]."""
    return random_matrix(fan_in, fan_out, 0.0, 1.0, rng)


def uniform_dis(fan_in: int, fan_out: int, rng: random.Random | None = None) -> list[float]:
    """Weights in [-1/sqrt(fan_in), 1/sqrt(fan_in)]."""
    bound = _sqrt_ratio(1.0, fan_in)
    return random_matrix(fan_in, fan_out, -bound, bound, rng)


def he_normal_dis(fan_in: int, fan_out: int, rng: random.Random | None = None) -> list[float]:
    """Weights in [0, sqrt(2/fan_in)]."""
    bound = _sqrt_ratio(2.0, fan_in)
    return random_matrix(fan_in, fan_out, 0.0, bound, rng)


def he_uniform_dis(fan_in: int, fan_out: int, rng: random.Random | None = None) -> list[float]:
    """Weights in [-sqrt(6/fan_in), sqrt(6/fan_in)]."""
    bound = _sqrt_ratio(6.0, fan_in)
    return random_matrix(fan_in, fan_out, -bound, bound, rng)


def xav_gro_normal_dis(
    fan_in: int, fan_out: int, next_fan_out: int, rng: random.Random | None = None
) -> list[float]:
    """Weights in [0, sqrt(2/(fan_in + next_fan_out))]."""
    bound = _sqrt_ratio(2.0, fan_in + next_fan_out)
    return random_matrix(fan_in, fan_out, 0.0, bound, rng)


def xav_gro_uniform_dis(
    fan_in: int, fan_out: int, next_fan_out: int, rng: random.Random | None = None
) -> list[float]:
    """Weights in [-sqrt(6/(fan_in + next_fan_out)), sqrt(6/(fan_in + next_fan_out))]."""
    bound = _sqrt_ratio(6.0, fan_in + next_fan_out)
    return random_matrix(fan_in, fan_out, -bound, bound, rng)


_DISTRIBUTIONS: dict[str, Callable[..., list[float]]] = {
    "uniform_dis": uniform_dis,
    "normal_dis": normal_dis,
    "he_normal_dis": he_normal_dis,
    "he_uniform_dis": he_uniform_dis,
    "xav_gro_normal_dis": xav_gro_normal_dis,
    "xav_gro_uniform_dis": xav_gro_uniform_dis,
}

_NEEDS_NEXT_LAYER = frozenset({"xav_gro_normal_dis", "xav_gro_uniform_dis"})


def needs_next_layer(name: str) -> bool:
    """Whether the named distribution also takes the size of the layer after next."""
    get_distribution(name)
    return name in _NEEDS_NEXT_LAYER


def get_distribution(name: str) -> Callable[..., list[float]]:
    """Return the initialisation function registered under ``name``."""
    try:
        return _DISTRIBUTIONS[name]
    except KeyError:
        known = ", ".join(sorted(_DISTRIBUTIONS))
        raise ValueError(f"unknown distribution {name!r}; expected one of {known}") from None