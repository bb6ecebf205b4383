# runst

A small feed-forward neural-network toolkit in pure Python, with no
third-party dependencies.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `runst.activations`

Functions that take a sequence of floats and return a new list:

- `relu`, `leaky_relu` (negative values scaled by 0.01), `silu` (x · sigmoid(x)),
- `softplus` (ln(1 + eˣ)), `softplus_log10` (log₁₀(1 + eˣ)),
- `sigmoid`, `none` (identity), `softmax` (outputs sum to one).

`get_activation(name)` returns one of these by name and raises `ValueError`
for an unknown name.

### `runst.weight_init`

Each initialiser returns a flat, row-major list of `fan_in * fan_out` values
drawn uniformly from a range, using the optional `rng` (a `random.Random`) or
the `random` module:

| function | range |
| --- | --- |
| `normal_dis(fan_in, fan_out, rng)` | [0, 1] |
| `uniform_dis(fan_in, fan_out, rng)` | ±1/√fan_in |
| `he_normal_dis(fan_in, fan_out, rng)` | [0, √(2/fan_in)] |
| `he_uniform_dis(fan_in, fan_out, rng)` | ±√(6/fan_in) |
| `xav_gro_normal_dis(fan_in, fan_out, next_fan_out, rng)` | [0, √(2/(fan_in + next_fan_out))] |
| `xav_gro_uniform_dis(fan_in, fan_out, next_fan_out, rng)` | ±√(6/(fan_in + next_fan_out)) |

`random_matrix(fan_in, fan_out, low, high, rng)` is the underlying sampler.
`get_distribution(name)` looks an initialiser up by name and
`needs_next_layer(name)` tells whether it takes `next_fan_out`; both raise
`ValueError` for an unknown name.

### `runst.linalg`

- `mat_vec(matrix, vector)` multiplies a matrix (flat row-major, or a list of
  rows) by a vector, raising `ValueError` when the sizes do not fit.
- `vec_add(vector, bias)` adds a bias element-wise.

### `runst.network`

- `Network(network_struct, distrib="he_normal_dis", hidden_activ_fun="none",
  out_activ_fun="none")` describes the layer sizes (input first), the weight
  initialiser and the activations. `neuron_count` is the number of neurons
  outside the input layer.
- `DataSet(inputs, observed_values)` holds a data set.
- `net_init(net, rng)` returns `(weights, biases)`: one flat weight matrix and
  one zero bias vector per layer transition.
- `propagation(net, inputs, weights, bias)` runs each input forward and returns
  one flat list of every neuron's output, layer by layer, input after input.
- `outputs_by_neuron(net, observed_values, predictions, weights)` regroups that
  flat list into a dict mapping each layer (output layer first) to its neurons'
  outputs, each running from the last propagation to the first.

```python
import random

from runst.network import Network, net_init, propagation

net = Network([1, 2, 1], "he_normal_dis", "none", "none")
weights, bias = net_init(net, random.Random(0))
predictions = propagation(net, [[0.5], [2.3], [2.9]], weights, bias)
```

### `runst.regression`

Fitting `height = intercept + slope * weight` by gradient descent:

- `sum_squared_residual(observed, weights, intercept, slope=0.6)`.
- `descend_intercept(...)` and `descend_slope(...)` move one parameter with the
  other held fixed and return every `(value, derivative)` visited.
- `fit_line(observed, weights, learning_rates=(0.01, 0.1), precision=0.001,
  tries=1000)` fits both from zero and returns a `LineFit` with `slope`,
  `intercept`, `slope_found`, `intercept_found` and `converged`.

```python
from runst.regression import fit_line, sum_squared_residual

fit = fit_line([1.4, 1.9, 3.2], [0.5, 2.3, 2.9])
print(fit.slope, fit.intercept, fit.converged)
print(sum_squared_residual([1.5, 2.0, 3.5], [0.5, 2.5, 3.0], 0.0, 0.6))
```

## Command line

```
runst [--structure 1,2,1] [--distrib he_normal_dis] [--hidden none] [--out none] [--seed N]
```

Initialises a network, propagates the inputs 0.5, 2.3 and 2.9 through it, and
prints the weights, the biases and each neuron's outputs, output layer first.
Bad settings end with a usage error.

## What it does not do

The network is never trained: there is no backpropagation that updates
`net_init`'s weights and biases. Gradient descent is available only for the
straight-line fit in `runst.regression`. Nothing is saved to disk, and there is
no plotting.

## Running the tests

```
pytest
```