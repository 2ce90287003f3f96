"""
Seeded random sources for weight initialisation.

Both distributions draw from a numpy ``Generator`` seeded once at
construction, so the same seed always yields the same parameter values.
"""

from abc import ABC, abstractmethod

import numpy as np

from ..config import DEFAULT_SEED
from ..errors import ConfigurationError


class RandomDistribution(ABC):
    """
    Abstract random source.

    Attributes:
        seed (int): Seed the generator was created with
        generator (np.random.Generator): Underlying bit generator
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    @abstractmethod
    def get(self) -> float:
        """Draw one sample."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed})"


class RandomUniformDistribution(RandomDistribution):
    """Uniform samples in [-1, 1)."""

    def get(self) -> float:
        return float(self.generator.uniform(-1.0, 1.0))


class RandomNormalDistribution(RandomDistribution):
    """Standard normal samples (mean 0, std 1)."""

    def get(self) -> float:
        return float(self.generator.standard_normal())


_DISTRIBUTIONS = {
    "uniform": RandomUniformDistribution,
    "normal": RandomNormalDistribution,
}


def make_distribution(kind: str = "uniform", seed: int = DEFAULT_SEED) -> RandomDistribution:
    """Build a distribution by name ("uniform" or "normal")."""
    try:
        cls = _DISTRIBUTIONS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported distribution {kind!r}; expected one of {sorted(_DISTRIBUTIONS)}"
        ) from None
    return cls(seed)
