"""Activation functions, weight initialisers, forward propagation and line fitting by gradient descent."""

__version__ = "0.1.0"
__all__ = ["activations", "weight_init", "linalg", "network", "regression", "cli"]