"""Descriptive statistics of a simulated sample."""

from pydantic import BaseModel, ConfigDict, Field


class StatisticsSummary(BaseModel):
    """Summary of final portfolio values across all simulated paths."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1, description="Number of values summarized")
    mean: float = Field(..., description="Arithmetic mean")
    median: float = Field(..., description="Median (mean of the two middle values when count is even)")
    std_dev: float = Field(..., ge=0.0, description="Population standard deviation")
    p05: float = Field(..., description="5th percentile (nearest rank)")
    p25: float = Field(..., description="25th percentile (nearest rank)")
    p75: float = Field(..., description="75th percentile (nearest rank)")
    p95: float = Field(..., description="95th percentile (nearest rank)")

    def percentiles(self) -> dict[int, float]:
        """Percentile values keyed by percentile rank, in ascending order."""
        return {5: self.p05, 25: self.p25, 75: self.p75, 95: self.p95}
