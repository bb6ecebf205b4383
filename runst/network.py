"""Network settings, weight/bias initialisation and forward propagation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from runst.activations import get_activation
from runst.linalg import mat_vec, vec_add
from runst.weight_init import get_distribution, needs_next_layer


@dataclass
class Network:
    """Settings of a fully connected neural network.

    ``network_struct`` lists the number of neurons in each layer, input first.
    """

    network_struct: list[int]
    distrib: str = "he_normal_dis"
    hidden_activ_fun: str = "none"
    out_activ_fun: str = "none"

    def __post_init__(self) -> None:
        if len(self.network_struct) < 2:
            raise ValueError("a network needs at least an input and an output layer")
        if any(size <= 0 for size in self.network_struct):
            raise ValueError("every layer must hold at least one neuron")

    @property
    def neuron_count(self) -> int:
        """Number of neurons outside the input layer."""
        return sum(self.network_struct[1:])


@dataclass
class DataSet:
    """Inputs given to the network and the values it is expected to give."""

    inputs: list[list[float]] = field(default_factory=list)
    observed_values: list[list[float]] = field(default_factory=list)


def net_init(
    net: Network, rng: random.Random | None = None
) -> tuple[list[list[float]], list[list[float]]]:
    """Create the weight matrices and zero biases between consecutive layers.

    Each weight matrix is flat and row-major, ``fan_in * fan_out`` long.
    Distributions that need the size of the layer after next get 0 for the
    last layer of weights.
    """
    distribution = get_distribution(net.distrib)
    with_next = needs_next_layer(net.distrib)
    sizes = net.network_struct

    weights: list[list[float]] = []
    biases: list[list[float]] = []
    for index, (fan_in, fan_out) in enumerate(zip(sizes, sizes[1:])):
        if with_next:
            next_fan_out = sizes[index + 2] if index + 2 < len(sizes) else 0
            weights.append(distribution(fan_in, fan_out, next_fan_out, rng))
        else:
            weights.append(distribution(fan_in, fan_out, rng))
        biases.append([0.0] * fan_out)
    return weights, biases


def propagation(
    net: Network,
    inputs: Sequence[Sequence[float]],
    weights: Sequence[Sequence[float]],
    bias: Sequence[Sequence[float]],
) -> list[float]:
    """Propagate every input through the network.

    Returns one flat list holding, for each input in turn, the outputs of every
    neuron layer by layer (input layer excluded).
    """
    hidden = get_activation(net.hidden_activ_fun)
    output = get_activation(net.out_activ_fun)
    if len(weights) != len(bias):
        raise ValueError("there must be one bias vector per weight matrix")
    if not weights:
        raise ValueError("the network has no layer of weights")

    last = len(weights) - 1
    predictions: list[float] = []
    for sample in inputs:
        neurons = list(sample)
        for layer, (matrix, offsets) in enumerate(zip(weights, bias)):
            summed = vec_add(mat_vec(matrix, neurons), offsets)
            activation = output if layer == last else hidden
            neurons = activation(summed)
            predictions.extend(neurons)
    return predictions


def outputs_by_neuron(
    net: Network,
    observed_values: Sequence[Sequence[float]],
    predictions: Sequence[float],
    weights: Sequence[Sequence[float]],
) -> dict[int, list[list[float]]]:
    """Regroup flat predictions by layer and neuron, walking backward.

    The result maps each layer index (output layer first, down to layer 1) to
    the list of its neurons' outputs in neuron order. Each neuron's outputs run
    from the last propagation to the first, matching observed values given
    backward. The number of propagations read is ``len(observed_values[0])``.
    """
    if not observed_values:
        raise ValueError("observed values must not be empty")
    if len(weights) != len(net.network_struct) - 1:
        raise ValueError("weights do not match the network structure")

    number_neurons = sum(net.network_struct[1 : len(weights) + 1])
    propagations = len(observed_values[0])
    if propagations * number_neurons > len(predictions):
        raise ValueError("more observed values than propagated predictions")

    end = len(predictions) - 1
    reversed_neurons = [
        [predictions[end - neuron - step * number_neurons] for step in range(propagations)]
        for neuron in range(number_neurons)
    ]

    layers: dict[int, list[list[float]]] = {}
    consumed = 0
    for layer in range(len(net.network_struct) - 1, 0, -1):
        size = net.network_struct[layer]
        block = reversed_neurons[consumed : consumed + size]
        layers[layer] = block[::-1]
        consumed += size
    return layers