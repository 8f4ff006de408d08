"""
Neuron and layer building blocks.

Each neuron owns its weight and bias leaves; a forward call builds fresh
graph nodes on top of them, so the same parameters are shared by every
graph the network produces.
"""

import numpy as np
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..aad.core.var import Value
from ..aad.core.errors import InvalidArgument
from ..aad.ops import tanh, relu

ACTIVATION_FNS: Dict[str, Callable[[Value], Value]] = {
    "tanh": tanh,
    "relu": relu,
    "linear": lambda act: act,
}


def _uniform(rng: np.random.Generator, init_range: Tuple[float, float]) -> float:
    low, high = init_range
    return float(rng.uniform(low, high))


class Neuron:
    """
    act(w · x + b) for a fixed number of inputs.

    Attributes:
        w (List[Value]): One weight leaf per input, labelled w0, w1, ...
        b (Value): Bias leaf
        out (Optional[Value]): Output of the most recent forward call
    """

    def __init__(self, nin: int, rng: np.random.Generator, *,
                 activation: str = "tanh",
                 init_range: Tuple[float, float] = (-1.0, 1.0),
                 layer_index: Optional[int] = None,
                 neuron_index: Optional[int] = None):
        if activation not in ACTIVATION_FNS:
            raise ValueError(f"Unknown activation {activation!r}")
        self.activation = activation
        self.init_range = init_range
        self.w = [Value(_uniform(rng, init_range), label=f"w{i}") for i in range(nin)]
        self.b = Value(_uniform(rng, init_range), label="b")
        self.out: Optional[Value] = None
        self.layer_index = layer_index
        self.neuron_index = neuron_index

    @property
    def nin(self) -> int:
        return len(self.w)

    def __call__(self, x: Sequence[Union[Value, float]]) -> Value:
        if len(x) != len(self.w):
            raise InvalidArgument(
                f"forward() expected {len(self.w)} inputs, {len(x)} given"
            )
        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)
        self.out = ACTIVATION_FNS[self.activation](act)
        return self.out

    def parameters(self) -> List[Value]:
        return self.w + [self.b]

    def __repr__(self):
        tag = f"l{self.layer_index}n{self.neuron_index}" if self.layer_index is not None else "Neuron"
        return f"{tag}({self.activation}, nin={self.nin})"


class Layer:
    """A row of independent neurons fed the same inputs."""

    def __init__(self, nin: int, nout: int, rng: np.random.Generator, *,
                 activation: str = "tanh",
                 init_range: Tuple[float, float] = (-1.0, 1.0),
                 layer_index: Optional[int] = None):
        self.nin = nin
        self.layer_index = layer_index
        self.neurons = [
            Neuron(nin, rng, activation=activation, init_range=init_range,
                   layer_index=layer_index, neuron_index=i)
            for i in range(nout)
        ]

    @property
    def nout(self) -> int:
        return len(self.neurons)

    def __call__(self, x):
        outs = [n(x) for n in self.neurons]
        return outs[0] if len(outs) == 1 else outs

    def parameters(self) -> List[Value]:
        return [p for neuron in self.neurons for p in neuron.parameters()]

    def __repr__(self):
        return f"Layer(nin={self.nin}, nout={self.nout})"
