"""Console output formatting."""

import sys
from collections.abc import Callable
from typing import TextIO

from contribsim.analysis.montecarlo import SimulationResults
from contribsim.models import SimulationParameters

PERCENTILE_LABELS = {
    5: " (worst case scenario)",
    95: " (best case scenario)",
}


def format_currency(value: float) -> str:
    """Format an amount as dollars with two decimals (negative as $-1.00)."""
    return f"${value:.2f}"


def format_percent(fraction: float) -> str:
    """Format a fraction as a percentage with one decimal."""
    return f"{fraction * 100:.1f}%"


def format_duration(seconds: float) -> str:
    """Format a duration with the largest unit that keeps it >= 1."""
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def wait_for_keypress(stream: TextIO | None = None) -> None:
    """Block until a character (or EOF) is read from ``stream``."""
    stream = stream if stream is not None else sys.stdin
    print("\nPress any key to exit...")
    stream.read(1)


class ConsoleOutput:
    """Formats simulation parameters and results for console display."""

    @staticmethod
    def print_parameters(params: SimulationParameters) -> None:
        """Print the simulation parameters.

        Args:
            params: Parameters of the run
        """
        print("Running Monte Carlo simulation for portfolio")
        print("Parameters:")
        print(f"  Annual Contribution: {format_currency(params.annual_contribution)}")
        print(f"  Mean Annual Return: {format_percent(params.mean_return)}")
        print(f"  Standard Deviation: {format_percent(params.std_dev_return)}")
        print(f"  Investment Horizon: {params.years} years")
        print(f"  Number of Simulations: {params.num_simulations}")
        print(f"  Random Seed: {params.seed}")

    @staticmethod
    def print_summary(results: SimulationResults) -> None:
        """Print the statistics summary.

        Args:
            results: Results of the run
        """
        summary = results.summary

        print(f"\nResults after {results.parameters.years} years:")
        print(f"  Mean portfolio value: {format_currency(summary.mean)}")
        print(f"  Median portfolio value: {format_currency(summary.median)}")
        print(f"  Standard deviation: {format_currency(summary.std_dev)}")

        print("\nPercentiles:")
        for rank, value in summary.percentiles().items():
            label = f"{rank}th"
            print(f"  {label:<4} percentile: {format_currency(value)}{PERCENTILE_LABELS.get(rank, '')}")

    @staticmethod
    def print_duration(elapsed_seconds: float) -> None:
        """Print the elapsed time of the simulation."""
        print(f"\nSimulation completed in {format_duration(elapsed_seconds)}")

    @staticmethod
    def print_results(
        results: SimulationResults,
        post_report: Callable[[], None] | None = None,
    ) -> None:
        """Print summary and duration, then run ``post_report``.

        Args:
            results: Results of the run
            post_report: Optional hook called after everything is printed
        """
        ConsoleOutput.print_summary(results)
        ConsoleOutput.print_duration(results.elapsed_seconds)
        if post_report is not None:
            post_report()

    @staticmethod
    def report(
        results: SimulationResults,
        post_report: Callable[[], None] | None = None,
    ) -> None:
        """Print parameters, summary and duration, then run ``post_report``."""
        ConsoleOutput.print_parameters(results.parameters)
        ConsoleOutput.print_results(results, post_report=post_report)
