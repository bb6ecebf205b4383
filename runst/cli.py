"""Command that builds a small network, propagates a data set and shows the outputs."""

from __future__ import annotations

import argparse
import random

from runst.network import Network, net_init, outputs_by_neuron, propagation

INPUTS: tuple[float, ...] = (0.5, 2.3, 2.9)
OBSERVED: tuple[float, ...] = (1.4, 1.9, 3.2)


def _structure(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid layer sizes {text!r}") from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runst", description="Initialise a network and propagate a sample data set."
    )
    parser.add_argument("--structure", type=_structure, default=[1, 2, 1],
                        help="neurons per layer, comma separated (default: 1,2,1)")
    parser.add_argument("--distrib", default="he_normal_dis",
                        help="weight initialisation scheme")
    parser.add_argument("--hidden", default="none", help="hidden layer activation")
    parser.add_argument("--out", default="none", help="output layer activation")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        net = Network(args.structure, args.distrib, args.hidden, args.out)
        weights, biases = net_init(net, rng)
        inputs = [[value] * net.network_struct[0] for value in INPUTS]
        observed = [list(reversed(OBSERVED))]
        predictions = propagation(net, inputs, weights, biases)
        layers = outputs_by_neuron(net, observed, predictions, weights)
    except ValueError as error:
        parser.error(str(error))

    print(f"Weights:\n {weights}\nBiases:\n {biases}")
    for layer, neurons in layers.items():
        print(f"\nAt the layer {layer}:")
        for number, outputs in enumerate(neurons, 1):
            print(f"The neuron number {number} give these outputs: {outputs}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())