"""Small vector and matrix helpers used by propagation."""

from __future__ import annotations

from collections.abc import Sequence


def _flatten(matrix) -> list[float]:
    if matrix and isinstance(matrix[0], Sequence):
        return [value for row in matrix for value in row]
    return list(matrix)


def mat_vec(matrix, vector: Sequence[float]) -> list[float]:
    """Multiply a row-major matrix by a vector.

    ``matrix`` is either a flat row-major sequence whose length is a multiple
    of ``len(vector)``, or a sequence of rows each as long as ``vector``.
    """
    width = len(vector)
    if width == 0:
        raise ValueError("vector must not be empty")
    if matrix and isinstance(matrix[0], Sequence):
        if any(len(row) != width for row in matrix):
            raise ValueError(
                "Dimensions of matrix and vector are not compatible for multiplication"
            )
    flat = _flatten(matrix)
    if len(flat) % width:
        raise ValueError("Dimensions of matrix and vector are not compatible for multiplication")
    return [
        sum(weight * value for weight, value in zip(flat[start : start + width], vector))
        for start in range(0, len(flat), width)
    ]


def vec_add(vector: Sequence[float], bias: Sequence[float]) -> list[float]:
    """Add ``bias`` element-wise to ``vector``; extra bias entries are ignored."""
    if len(bias) < len(vector):
        raise ValueError("bias is shorter than the vector it is added to")
    return [value + offset for value, offset in zip(vector, bias)]