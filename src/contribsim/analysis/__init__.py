"""Monte Carlo analysis and statistics."""

from .montecarlo import MonteCarloRunner, SimulationResults, run_simulation
from .statistics import summarize

__all__ = ["MonteCarloRunner", "SimulationResults", "run_simulation", "summarize"]
