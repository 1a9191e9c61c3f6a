import unittest

import numpy as np

from contribsim.errors import ConfigurationError
from contribsim.simulation import NormalReturns, initialize


class InitializeTests(unittest.TestCase):
    def test_same_seed_same_stream(self) -> None:
        first = initialize(12345).normal(size=50)
        second = initialize(12345).normal(size=50)
        np.testing.assert_array_equal(first, second)

    def test_different_seeds_differ(self) -> None:
        first = initialize(1).normal(size=10)
        second = initialize(2).normal(size=10)
        self.assertFalse(np.array_equal(first, second))

    def test_independent_of_global_numpy_state(self) -> None:
        np.random.seed(0)
        first = initialize(99).normal(size=10)
        np.random.seed(1)
        np.random.standard_normal(1000)
        second = initialize(99).normal(size=10)
        np.testing.assert_array_equal(first, second)

    def test_seed_out_of_range(self) -> None:
        with self.assertRaises(ConfigurationError):
            initialize(-1)
        with self.assertRaises(ConfigurationError):
            initialize(2**64)


class NormalReturnsTests(unittest.TestCase):
    def test_invalid_std_dev_fails_fast(self) -> None:
        for std_dev in (0.0, -0.1):
            with self.assertRaises(ConfigurationError):
                NormalReturns(0.08, std_dev)

    def test_non_finite_parameters_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            NormalReturns(float("nan"), 0.16)
        with self.assertRaises(ConfigurationError):
            NormalReturns(0.08, float("inf"))

    def test_configuration_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            NormalReturns(0.08, 0.0)

    def test_replay_reproduces_samples(self) -> None:
        returns = NormalReturns(0.08, 0.16)
        rng_a = initialize(7)
        rng_b = initialize(7)
        first = [returns.sample(rng_a) for _ in range(20)]
        second = [returns.sample(rng_b) for _ in range(20)]
        self.assertEqual(first, second)

    def test_block_matches_successive_samples(self) -> None:
        returns = NormalReturns(0.08, 0.16)
        block = returns.sample_block(initialize(31), (3, 4))
        rng = initialize(31)
        successive = [returns.sample(rng) for _ in range(12)]
        self.assertEqual(block.shape, (3, 4))
        self.assertEqual(block.ravel().tolist(), successive)

    def test_distribution_moments(self) -> None:
        draws = NormalReturns(0.08, 0.16).sample_block(initialize(2024), (200_000,))
        self.assertAlmostEqual(float(draws.mean()), 0.08, delta=0.002)
        self.assertAlmostEqual(float(draws.std()), 0.16, delta=0.002)


if __name__ == "__main__":
    unittest.main()
