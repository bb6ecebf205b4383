"""Fitting a prediction line to data by gradient descent on the squared residuals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

OBSERVED_HEIGHT: tuple[float, ...] = (1.4, 1.9, 3.2)
WEIGHT: tuple[float, ...] = (0.5, 2.3, 2.9)


@dataclass(frozen=True)
class LineFit:
    """Result of fitting ``height = intercept + slope * weight``."""

    slope: float
    intercept: float
    slope_found: bool
    intercept_found: bool

    @property
    def converged(self) -> bool:
        """Whether both the slope and the intercept reached the precision asked for."""
        return self.slope_found and self.intercept_found


def _pairs(observed: Sequence[float], weights: Sequence[float]) -> list[tuple[float, float]]:
    if len(observed) != len(weights):
        raise ValueError("observed values and weights must have the same length")
    if not observed:
        raise ValueError("at least one observation is needed")
    return list(zip(observed, weights))


def _check_settings(learning_rate: float, precision: float, tries: int) -> None:
    if learning_rate <= 0.0:
        raise ValueError("learning rate must be positive")
    if precision <= 0.0:
        raise ValueError("precision must be positive")
    if tries < 0:
        raise ValueError("number of tries must not be negative")


def _intercept_derivative(pairs, intercept: float, slope: float) -> float:
    return sum(-2.0 * (height - (intercept + slope * weight)) for height, weight in pairs)


def _slope_derivative(pairs, intercept: float, slope: float) -> float:
    return sum(
        -2.0 * weight * (height - (intercept + slope * weight)) for height, weight in pairs
    )


def sum_squared_residual(
    observed: Sequence[float],
    weights: Sequence[float],
    intercept: float,
    slope: float = 0.6,
) -> float:
    """Sum of the squared differences between observed and predicted values."""
    return sum(
        (height - (intercept + slope * weight)) ** 2
        for height, weight in _pairs(observed, weights)
    )


def _descend(pairs, derivative, start, learning_rate, precision, tries):
    steps: list[tuple[float, float]] = []
    value = start
    for _ in range(tries + 1):
        gradient = derivative(value)
        steps.append((value, gradient))
        # Stops once the derivative rounds down to zero at the given precision.
        if gradient // precision == 0.0:
            break
        value -= gradient * learning_rate
    return steps


def descend_intercept(
    observed: Sequence[float],
    weights: Sequence[float],
    slope: float = 0.64,
    start: float = 100.0,
    learning_rate: float = 0.1,
    precision: float = 0.01,
    tries: int = 50,
) -> list[tuple[float, float]]:
    """Move the intercept down the gradient with the slope held fixed.

    Returns each ``(intercept, derivative)`` visited. Descent stops when the
    derivative lies in ``[0, precision)`` or after ``tries + 1`` steps.
    """
    _check_settings(learning_rate, precision, tries)
    pairs = _pairs(observed, weights)
    return _descend(
        pairs,
        lambda value: _intercept_derivative(pairs, value, slope),
        start,
        learning_rate,
        precision,
        tries,
    )


def descend_slope(
    observed: Sequence[float],
    weights: Sequence[float],
    intercept: float = 1.0,
    start: float = 100.0,
    learning_rate: float = 0.01,
    precision: float = 0.01,
    tries: int = 50,
) -> list[tuple[float, float]]:
    """Move the slope down the gradient with the intercept held fixed.

    Returns each ``(slope, derivative)`` visited. Descent stops when the
    derivative lies in ``[0, precision)`` or after ``tries + 1`` steps.
    """
    _check_settings(learning_rate, precision, tries)
    pairs = _pairs(observed, weights)
    return _descend(
        pairs,
        lambda value: _slope_derivative(pairs, intercept, value),
        start,
        learning_rate,
        precision,
        tries,
    )


def fit_line(
    observed: Sequence[float],
    weights: Sequence[float],
    learning_rates: tuple[float, float] = (0.01, 0.1),
    precision: float = 0.001,
    tries: int = 1000,
) -> LineFit:
    """Fit slope and intercept together, starting both from zero.

    ``learning_rates`` holds the slope's rate then the intercept's. Each
    parameter stops moving once its derivative is within ``precision`` of zero.
    """
    slope_rate, intercept_rate = learning_rates
    _check_settings(slope_rate, precision, tries)
    _check_settings(intercept_rate, precision, tries)
    pairs = _pairs(observed, weights)

    slope = intercept = 0.0
    slope_found = intercept_found = False
    for _ in range(tries):
        if slope_found and intercept_found:
            break
        if not slope_found:
            gradient = _slope_derivative(pairs, intercept, slope)
            slope -= gradient * slope_rate
            slope_found = abs(gradient) <= precision
        if not intercept_found:
            gradient = _intercept_derivative(pairs, intercept, slope)
            intercept -= gradient * intercept_rate
            intercept_found = abs(gradient) <= precision
    return LineFit(slope, intercept, slope_found, intercept_found)