"""Simulation parameters."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MAX_SEED = 2**64 - 1


class SimulationParameters(BaseModel):
    """Immutable configuration for one Monte Carlo run.

    Defaults reproduce the baseline scenario: $10,000 contributed at the end
    of every year for 30 years, returns ~ Normal(8%, 16%), 10,000 paths.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    annual_contribution: float = Field(
        default=10000.0,
        gt=0.0,
        allow_inf_nan=False,
        description="Amount added at the end of each year",
    )
    mean_return: float = Field(
        default=0.08,
        allow_inf_nan=False,
        description="Mean annual return (0.08 = 8%)",
    )
    std_dev_return: float = Field(
        default=0.16,
        gt=0.0,
        allow_inf_nan=False,
        description="Standard deviation of the annual return",
    )
    years: int = Field(default=30, ge=1, description="Investment horizon in years")
    num_simulations: int = Field(default=10000, ge=1, description="Number of simulated paths")
    seed: int = Field(
        default=12345,
        ge=0,
        le=MAX_SEED,
        description="Seed fixing the whole run's randomness",
    )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "SimulationParameters":
        """Load parameters from a JSON file.

        Args:
            path: JSON document with any subset of the parameter fields

        Returns:
            Validated parameters, missing fields taking their defaults
        """
        return cls.model_validate_json(Path(path).read_bytes())

    def with_overrides(self, **changes: Any) -> "SimulationParameters":
        """Return a validated copy with the non-None fields in ``changes`` replaced."""
        data = self.model_dump()
        data.update({key: value for key, value in changes.items() if value is not None})
        return type(self).model_validate(data)
