"""Error types raised by the simulation pipeline."""


class ContribSimError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(ContribSimError, ValueError):
    """Invalid simulation configuration, detected before any sampling."""


class NonFiniteSampleError(ContribSimError, ArithmeticError):
    """A simulated final value is NaN or infinite."""

    def __init__(self, count: int, total: int):
        self.count = count
        self.total = total
        super().__init__(f"{count} of {total} simulated values are not finite")


class EmptySampleError(ContribSimError, ValueError):
    """Statistics were requested for an empty sample."""
