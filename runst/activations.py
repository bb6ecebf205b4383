"""Activation functions applied element-wise (or over a whole layer) to neuron sums."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

Activation = Callable[[Sequence[float]], list[float]]


def _exp(value: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _sigmoid(value: float) -> float:
    return 1.0 / (1.0 + _exp(-value))


def relu(vector: Sequence[float]) -> list[float]:
    """Keep positive values, replace the rest with zero."""
    return [value if value > 0.0 else 0.0 for value in vector]


def leaky_relu(vector: Sequence[float]) -> list[float]:
    """Keep positive values, scale the rest by 0.01."""
    return [value if value > 0.0 else 0.01 * value for value in vector]


def silu(vector: Sequence[float]) -> list[float]:
    """Sigmoid-weighted linear unit: x * sigmoid(x)."""
    return [value * _sigmoid(value) for value in vector]


def softplus(vector: Sequence[float]) -> list[float]:
    """Natural-log softplus: ln(1 + e^x)."""
    return [math.log1p(_exp(value)) for value in vector]


def softplus_log10(vector: Sequence[float]) -> list[float]:
    """Base-10 softplus: log10(1 + e^x)."""
    return [math.log10(1.0 + _exp(value)) for value in vector]


def sigmoid(vector: Sequence[float]) -> list[float]:
    """Logistic function 1 / (1 + e^-x)."""
    return [_sigmoid(value) for value in vector]


def none(vector: Sequence[float]) -> list[float]:
    """Identity activation; returns a new list."""
    return list(vector)


def softmax(vector: Sequence[float]) -> list[float]:
    """Turn a layer's outputs into probabilities that sum to one."""
    exponentials = [_exp(value) for value in vector]
    total = sum(exponentials)
    return [value / total for value in exponentials]


_ACTIVATIONS: dict[str, Activation] = {
    "none": none,
    "relu": relu,
    "leaky_relu": leaky_relu,
    "silu": silu,
    "softplus": softplus,
    "softplus_log10": softplus_log10,
    "sigmoid": sigmoid,
    "softmax": softmax,
}


def get_activation(name: str) -> Activation:
    """Return the activation function registered under ``name``."""
    try:
        return _ACTIVATIONS[name]
    except KeyError:
        known = ", ".join(sorted(_ACTIVATIONS))
        raise ValueError(f"unknown activation function {name!r}; expected one of {known}") from None