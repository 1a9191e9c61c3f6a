"""Monte Carlo simulation of a portfolio with recurring annual contributions."""

from .analysis import MonteCarloRunner, SimulationResults, run_simulation, summarize
from .errors import (
    ConfigurationError,
    ContribSimError,
    EmptySampleError,
    NonFiniteSampleError,
)
from .models import SimulationParameters, StatisticsSummary
from .simulation import NormalReturns, PathSimulator, initialize, simulate_all

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ContribSimError",
    "EmptySampleError",
    "MonteCarloRunner",
    "NonFiniteSampleError",
    "NormalReturns",
    "PathSimulator",
    "SimulationParameters",
    "SimulationResults",
    "StatisticsSummary",
    "initialize",
    "run_simulation",
    "simulate_all",
    "summarize",
]
