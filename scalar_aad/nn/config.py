"""
Network Configuration

Shape, activation and weight-initialization settings for the small
feed-forward networks in `scalar_aad.nn`, plus the seeded number source
that initialization draws from.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional

ACTIVATIONS = ("tanh", "relu", "linear")


@dataclass
class NetworkConfig:
    """Configuration for an MLP."""
    # Shape
    nin: int
    nouts: List[int] = field(default_factory=lambda: [1])

    # Nonlinearity applied by every neuron
    activation: str = "tanh"  # 'tanh', 'relu', 'linear'

    # Uniform weight/bias initialization range [init_low, init_high)
    init_low: float = -1.0
    init_high: float = 1.0

    # Seed for the default generator (None: fresh entropy)
    seed: Optional[int] = None

    def __post_init__(self):
        if self.nin < 1:
            raise ValueError(f"nin must be >= 1, got {self.nin}")
        if not self.nouts:
            raise ValueError("nouts must list at least one layer size")
        if any(n < 1 for n in self.nouts):
            raise ValueError(f"Layer sizes must be >= 1, got {self.nouts}")
        if self.activation not in ACTIVATIONS:
            raise ValueError(
                f"Unknown activation {self.activation!r}. "
                f"Available: {', '.join(ACTIVATIONS)}"
            )
        if not self.init_low < self.init_high:
            raise ValueError(
                f"init_low must be < init_high, got [{self.init_low}, {self.init_high})"
            )

    @property
    def sizes(self) -> List[int]:
        return [self.nin] + list(self.nouts)

    def make_rng(self) -> np.random.Generator:
        return make_rng(self.seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seedable number source injected into network constructors."""
    return np.random.default_rng(seed)
