#!/usr/bin/env python3
"""Quick simulation example using the baseline scenario.

Runs the default scenario twice to show that a fixed seed reproduces
the same summary, then compares a shorter and a longer horizon.

Usage:
    python examples/quick_simulation.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from contribsim.analysis import MonteCarloRunner
from contribsim.models import SimulationParameters
from contribsim.output import ConsoleOutput


def main():
    params = SimulationParameters()

    results = MonteCarloRunner(params).run()
    ConsoleOutput.report(results)

    rerun = MonteCarloRunner(params).run()
    print("\nReproducible:", rerun.summary == results.summary)

    print("\n" + "=" * 50)
    print("Horizon comparison (median / 5th percentile)")
    print("=" * 50)
    for years in (10, 20, 30, 40):
        summary = MonteCarloRunner(params.with_overrides(years=years)).run().summary
        print(f"{years:>3} years: ${summary.median:>14,.2f}  ${summary.p05:>14,.2f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
