"""Command line interface.

Usage:
    contribsim [--config FILE] [--contribution AMOUNT] [--mean-return R]
               [--std-dev S] [--years N] [--simulations N] [--seed SEED]
               [--pause] [-v]

Examples:
    contribsim
    contribsim --years 40 --simulations 50000 --seed 7
    python -m contribsim --config scenario.json --pause
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from contribsim.analysis import MonteCarloRunner
from contribsim.errors import ConfigurationError, NonFiniteSampleError
from contribsim.models import SimulationParameters
from contribsim.output import ConsoleOutput, wait_for_keypress

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="contribsim",
        description="Monte Carlo simulation of a portfolio with recurring annual contributions",
    )
    parser.add_argument(
        "--config",
        help="JSON file with simulation parameters (flags override it)",
    )
    parser.add_argument(
        "--contribution",
        dest="annual_contribution",
        type=float,
        help="Amount contributed at the end of each year (default: 10000)",
    )
    parser.add_argument(
        "--mean-return",
        dest="mean_return",
        type=float,
        help="Mean annual return as a fraction (default: 0.08)",
    )
    parser.add_argument(
        "--std-dev",
        dest="std_dev_return",
        type=float,
        help="Standard deviation of the annual return (default: 0.16)",
    )
    parser.add_argument(
        "--years",
        type=int,
        help="Investment horizon in years (default: 30)",
    )
    parser.add_argument(
        "--simulations",
        "-n",
        dest="num_simulations",
        type=int,
        help="Number of simulations (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (default: 12345)",
    )
    parser.add_argument(
        "--pause",
        action="store_true",
        help="Wait for a key press after printing the report",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by ``verbosity``."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_parameters(args: argparse.Namespace) -> SimulationParameters:
    """Layer command line flags over the config file over the defaults."""
    base = (
        SimulationParameters.from_json_file(args.config)
        if args.config
        else SimulationParameters()
    )
    return base.with_overrides(
        annual_contribution=args.annual_contribution,
        mean_return=args.mean_return,
        std_dev_return=args.std_dev_return,
        years=args.years,
        num_simulations=args.num_simulations,
        seed=args.seed,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        params = load_parameters(args)
        runner = MonteCarloRunner(params)
    except OSError as e:
        LOGGER.error("Could not read config file: %s", e)
        return 2
    except (ValidationError, ConfigurationError, UnicodeDecodeError) as e:
        LOGGER.error("Invalid configuration: %s", e)
        return 2

    ConsoleOutput.print_parameters(params)

    try:
        results = runner.run()
    except NonFiniteSampleError as e:
        LOGGER.error("Simulation failed: %s", e)
        return 1

    ConsoleOutput.print_results(
        results,
        post_report=wait_for_keypress if args.pause else None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
