"""
Multi-layer perceptron over scalar Values, with in-place growth
(add a neuron to a layer, insert a whole layer).
"""

import logging
import numpy as np
from typing import List, Optional, Sequence, Tuple

from ..aad.core.var import Value
from ..aad.core.errors import InvalidArgument
from .config import NetworkConfig, make_rng
from .modules import Layer, Neuron, _uniform

logger = logging.getLogger(__name__)


class MLP:
    """
    Fully connected feed-forward network.

    Usage:
        >>> net = MLP(3, [4, 4, 1], rng=make_rng(0))
        >>> y = net([2.0, 3.0, -1.0])
        >>> y.backward()
        >>> [p.grad for p in net.parameters()]
    """

    def __init__(self, nin: int, nouts: Sequence[int],
                 rng: Optional[np.random.Generator] = None, *,
                 activation: str = "tanh",
                 init_range: Tuple[float, float] = (-1.0, 1.0)):
        self.rng = rng if rng is not None else make_rng()
        self.activation = activation
        self.init_range = init_range
        self.sizes: List[int] = [nin] + list(nouts)  # inputs first
        self.layers = [
            Layer(self.sizes[i], self.sizes[i + 1], self.rng,
                  activation=activation, init_range=init_range, layer_index=i)
            for i in range(len(nouts))
        ]

    @classmethod
    def from_config(cls, config: NetworkConfig,
                    rng: Optional[np.random.Generator] = None) -> "MLP":
        return cls(config.nin, config.nouts,
                   rng if rng is not None else config.make_rng(),
                   activation=config.activation,
                   init_range=(config.init_low, config.init_high))

    def __call__(self, x):
        for layer in self.layers:
            x = layer([x] if isinstance(x, Value) else x)
        return x

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def zero_grad(self) -> None:
        for p in self.parameters():
            p.grad = 0.0

    # ---------------- structural mutation ---------------- #
    def add_node(self, layer: int, neuron: Optional[Neuron] = None,
                 rng: Optional[np.random.Generator] = None) -> Neuron:
        """
        Grow layer `layer` by one neuron and give every neuron of the
        following layer one extra fresh input weight.

        Args:
            layer: index into `self.layers`
            neuron: neuron to append (a fresh one is drawn if None); its
                    fan-in must match the layer's
            rng: number source for new weights (defaults to the network's)
        """
        if not 0 <= layer < len(self.layers):
            raise IndexError(f"layer index {layer} out of range for {len(self.layers)} layers")
        rng = rng if rng is not None else self.rng
        target = self.layers[layer]

        if neuron is None:
            neuron = Neuron(target.nin, rng, activation=self.activation,
                            init_range=self.init_range)
        elif neuron.nin != target.nin:
            raise InvalidArgument(
                f"neuron takes {neuron.nin} inputs, layer {layer} provides {target.nin}"
            )
        target.neurons.append(neuron)

        if layer + 1 < len(self.layers):
            next_layer = self.layers[layer + 1]
            for n in next_layer.neurons:
                n.w.append(Value(_uniform(rng, self.init_range), label=f"w{len(n.w)}"))
            next_layer.nin += 1

        self.sizes[layer + 1] += 1
        self._reindex()
        logger.info("add_node: layer %d now has %d neurons (sizes=%s)",
                    layer, target.nout, self.sizes)
        return neuron

    def add_layer(self, idx: int, nout: int,
                  rng: Optional[np.random.Generator] = None) -> Layer:
        """
        Insert a layer of `nout` neurons so that it ends up at `self.sizes[idx]`
        (i.e. just before the current `self.layers[idx - 1]`).

        The layer that used to follow is rewired to `nout` inputs; its old
        input weights are discarded along with any gradient they held.
        """
        if not 1 <= idx <= len(self.layers) + 1:
            raise IndexError(f"layer position {idx} out of range 1..{len(self.layers) + 1}")
        if nout < 1:
            raise ValueError(f"nout must be >= 1, got {nout}")
        rng = rng if rng is not None else self.rng

        new_layer = Layer(self.sizes[idx - 1], nout, rng,
                          activation=self.activation, init_range=self.init_range)
        self.layers.insert(idx - 1, new_layer)
        self.sizes.insert(idx, nout)

        if idx < len(self.layers):
            next_layer = self.layers[idx]
            for n in next_layer.neurons:
                n.w = [Value(_uniform(rng, self.init_range), label=f"w{j}") for j in range(nout)]
            next_layer.nin = nout

        self._reindex()
        logger.info("add_layer: inserted %d neurons at position %d (sizes=%s)",
                    nout, idx, self.sizes)
        return new_layer

    def _reindex(self):
        for li, layer in enumerate(self.layers):
            layer.layer_index = li
            for ni, n in enumerate(layer.neurons):
                n.layer_index, n.neuron_index = li, ni

    def __repr__(self):
        return f"MLP(sizes={self.sizes}, activation={self.activation!r})"
