import json
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from contribsim.models import SimulationParameters


class SimulationParametersTests(unittest.TestCase):
    def test_defaults_are_baseline_scenario(self) -> None:
        params = SimulationParameters()
        self.assertEqual(params.annual_contribution, 10000.0)
        self.assertEqual(params.mean_return, 0.08)
        self.assertEqual(params.std_dev_return, 0.16)
        self.assertEqual(params.years, 30)
        self.assertEqual(params.num_simulations, 10000)
        self.assertEqual(params.seed, 12345)

    def test_parameters_are_immutable(self) -> None:
        params = SimulationParameters()
        with self.assertRaises(ValidationError):
            params.years = 10

    def test_non_positive_std_dev_rejected(self) -> None:
        for value in (0.0, -0.16):
            with self.assertRaises(ValidationError):
                SimulationParameters(std_dev_return=value)

    def test_non_positive_horizon_and_count_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            SimulationParameters(years=0)
        with self.assertRaises(ValidationError):
            SimulationParameters(num_simulations=0)
        with self.assertRaises(ValidationError):
            SimulationParameters(annual_contribution=-100.0)

    def test_seed_must_fit_unsigned_64_bits(self) -> None:
        self.assertEqual(SimulationParameters(seed=2**64 - 1).seed, 2**64 - 1)
        with self.assertRaises(ValidationError):
            SimulationParameters(seed=-1)
        with self.assertRaises(ValidationError):
            SimulationParameters(seed=2**64)

    def test_non_finite_values_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            SimulationParameters(mean_return=float("nan"))
        with self.assertRaises(ValidationError):
            SimulationParameters(annual_contribution=float("inf"))

    def test_unknown_fields_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            SimulationParameters(inflation=0.02)

    def test_with_overrides_ignores_none(self) -> None:
        params = SimulationParameters().with_overrides(years=40, seed=None)
        self.assertEqual(params.years, 40)
        self.assertEqual(params.seed, 12345)

    def test_with_overrides_validates(self) -> None:
        with self.assertRaises(ValidationError):
            SimulationParameters().with_overrides(num_simulations=-5)

    def test_from_json_file_fills_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scenario.json"
            path.write_text(json.dumps({"years": 20, "mean_return": 0.05}))
            params = SimulationParameters.from_json_file(path)
        self.assertEqual(params.years, 20)
        self.assertEqual(params.mean_return, 0.05)
        self.assertEqual(params.num_simulations, 10000)


if __name__ == "__main__":
    unittest.main()
