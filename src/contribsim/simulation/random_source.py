"""Seeded random source and the annual return distribution."""

import math

import numpy as np

from contribsim.errors import ConfigurationError
from contribsim.models.parameters import MAX_SEED


def initialize(seed: int) -> np.random.Generator:
    """Create a generator whose stream depends only on ``seed``.

    Args:
        seed: Unsigned 64-bit seed

    Returns:
        PCG64-backed generator, independent of numpy's global state

    Raises:
        ConfigurationError: If the seed is outside the unsigned 64-bit range
    """
    if not 0 <= seed <= MAX_SEED:
        raise ConfigurationError(f"seed must be in [0, 2**64), got {seed}")
    return np.random.Generator(np.random.PCG64(seed))


class NormalReturns:
    """Normally distributed annual returns."""

    def __init__(self, mean: float, std_dev: float):
        """Initialize the distribution.

        Args:
            mean: Mean annual return
            std_dev: Standard deviation of the annual return, must be > 0

        Raises:
            ConfigurationError: If a parameter is not finite or std_dev <= 0
        """
        if not (math.isfinite(mean) and math.isfinite(std_dev)):
            raise ConfigurationError(
                f"return distribution parameters must be finite (mean={mean}, std_dev={std_dev})"
            )
        if std_dev <= 0:
            raise ConfigurationError(f"std_dev must be positive, got {std_dev}")
        self.mean = float(mean)
        self.std_dev = float(std_dev)

    def sample(self, rng: np.random.Generator) -> float:
        """Draw one annual return."""
        return float(rng.normal(self.mean, self.std_dev))

    def sample_block(self, rng: np.random.Generator, shape: tuple[int, ...]) -> np.ndarray:
        """Draw a block of annual returns.

        Values are filled in row-major order and equal the same number of
        successive ``sample`` calls on the same stream.
        """
        return rng.normal(self.mean, self.std_dev, size=shape)

    def __repr__(self) -> str:
        return f"NormalReturns(mean={self.mean!r}, std_dev={self.std_dev!r})"
