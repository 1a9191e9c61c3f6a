"""Portfolio path simulation."""

from typing import Protocol

import numpy as np

from contribsim.models import SimulationParameters
from contribsim.simulation.random_source import NormalReturns


class ReturnSource(Protocol):
    """Anything that can draw annual returns from a generator."""

    def sample(self, rng: np.random.Generator) -> float: ...

    def sample_block(self, rng: np.random.Generator, shape: tuple[int, ...]) -> np.ndarray: ...


class PathSimulator:
    """Simulates final portfolio values for a recurring annual contribution."""

    def __init__(self, params: SimulationParameters, returns: ReturnSource | None = None):
        """Initialize the path simulator.

        Args:
            params: Simulation parameters
            returns: Annual return source (normal distribution from params if None)
        """
        self.params = params
        self.returns = (
            returns
            if returns is not None
            else NormalReturns(params.mean_return, params.std_dev_return)
        )

    def simulate_path(self, rng: np.random.Generator) -> float:
        """Simulate one path and return its final value.

        Each year the existing balance grows by that year's return, then the
        contribution is added, so a contribution never earns a return in the
        year it is made.
        """
        portfolio_value = 0.0
        for _ in range(self.params.years):
            annual_return = self.returns.sample(rng)
            portfolio_value *= 1.0 + annual_return
            portfolio_value += self.params.annual_contribution
        return portfolio_value

    def simulate_all(self, rng: np.random.Generator) -> np.ndarray:
        """Simulate every path.

        All returns are drawn up front from the single stream, path by path,
        which consumes draws in the same order as calling ``simulate_path``
        once per path. The yearly update is then applied to all paths at once
        with the same floating-point operations, so the result matches the
        sequential loop exactly.

        Args:
            rng: Generator shared by all paths

        Returns:
            Final value of each path, indexed by simulation number
        """
        num_paths = self.params.num_simulations
        years = self.params.years
        annual_returns = self.returns.sample_block(rng, (num_paths, years))

        portfolio_values = np.zeros(num_paths, dtype=np.float64)
        for year in range(years):
            portfolio_values *= 1.0 + annual_returns[:, year]
            portfolio_values += self.params.annual_contribution

        return portfolio_values


def simulate_all(
    params: SimulationParameters,
    rng: np.random.Generator,
    returns: ReturnSource | None = None,
) -> np.ndarray:
    """Simulate all paths for ``params`` using ``rng``."""
    return PathSimulator(params, returns=returns).simulate_all(rng)
