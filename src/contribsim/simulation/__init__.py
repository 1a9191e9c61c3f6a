"""Simulation engine components."""

from .path import PathSimulator, ReturnSource, simulate_all
from .random_source import NormalReturns, initialize

__all__ = [
    "NormalReturns",
    "PathSimulator",
    "ReturnSource",
    "initialize",
    "simulate_all",
]
