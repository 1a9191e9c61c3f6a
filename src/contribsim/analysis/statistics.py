"""Descriptive statistics over simulated final values."""

from collections.abc import Sequence

import numpy as np

from contribsim.errors import EmptySampleError, NonFiniteSampleError
from contribsim.models import StatisticsSummary

# Percentile fractions reported in the summary
PERCENTILE_FRACTIONS = (0.05, 0.25, 0.75, 0.95)


def median_of_sorted(values: np.ndarray) -> float:
    """Median of an ascending array, averaging the two middle values when even."""
    n = len(values)
    if n % 2 == 0:
        # Halving first cannot overflow and rounds like (a + b) / 2
        return float(values[n // 2 - 1] / 2.0 + values[n // 2] / 2.0)
    return float(values[n // 2])


def mean_and_std(values: np.ndarray) -> tuple[float, float]:
    """Arithmetic mean and population standard deviation of an ascending array.

    Values are scaled by a power of two before summing, which keeps the
    arithmetic exact relative to a plain mean while preventing overflow
    for finite samples spanning the whole float range.
    """
    lowest, highest = values[0], values[-1]
    if lowest == highest:
        return float(lowest), 0.0

    _, exponent = np.frexp(max(abs(lowest), abs(highest)))
    # Scaled magnitudes fall in [0, 2); 2**1024 itself is not representable
    scale = np.ldexp(1.0, int(exponent) - 1)
    scaled = values / scale
    scaled_mean = np.mean(scaled)
    deviations = scaled - scaled_mean
    scaled_std = np.sqrt(np.mean(deviations * deviations))
    return float(scaled_mean * scale), float(scaled_std * scale)


def nearest_rank(values: np.ndarray, fraction: float) -> float:
    """Percentile of an ascending array by nearest rank.

    Selects the element at index ``floor(n * fraction)`` without
    interpolating between neighbours. For small samples several fractions may
    select the same element.
    """
    return float(values[int(len(values) * fraction)])


def summarize(sample_vector: np.ndarray | Sequence[float]) -> StatisticsSummary:
    """Reduce simulated final values to a statistics summary.

    A float64 ndarray is sorted in place, so the caller must not rely on
    the original simulation order afterwards.

    Args:
        sample_vector: Final portfolio value of each path

    Returns:
        Summary with mean, median, population std dev and percentiles

    Raises:
        EmptySampleError: If the sample is empty
        NonFiniteSampleError: If any value is NaN or infinite
    """
    values = np.asarray(sample_vector, dtype=np.float64)
    n = len(values)
    if n == 0:
        raise EmptySampleError("cannot summarize an empty sample")

    finite = np.isfinite(values)
    if not finite.all():
        raise NonFiniteSampleError(int(n - finite.sum()), n)

    values.sort()
    mean, std_dev = mean_and_std(values)

    p05, p25, p75, p95 = (nearest_rank(values, fraction) for fraction in PERCENTILE_FRACTIONS)

    return StatisticsSummary(
        count=n,
        mean=mean,
        median=median_of_sorted(values),
        std_dev=std_dev,
        p05=p05,
        p25=p25,
        p75=p75,
        p95=p95,
    )
