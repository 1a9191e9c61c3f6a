"""Data models for portfolio simulation."""

from .parameters import SimulationParameters
from .summary import StatisticsSummary

__all__ = [
    "SimulationParameters",
    "StatisticsSummary",
]
