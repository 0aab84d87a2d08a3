"""Pydantic models for the EV dashboard.

Boundary and value types: filter criteria coming in from the UI and the
summary bundle going back out. All models are frozen so a published
bundle can never be partially updated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

ALL = "All"

DEFAULT_YEAR_MIN = 2000
DEFAULT_YEAR_MAX = 2025

GroupedCounts = dict[str, int]
GroupedAverage = dict[str, float]


class YearRange(BaseModel):
    """Inclusive model year bounds."""

    model_config = ConfigDict(frozen=True)

    min: int = DEFAULT_YEAR_MIN
    max: int = DEFAULT_YEAR_MAX

    @model_validator(mode="after")
    def _check_order(self) -> YearRange:
        if self.min > self.max:
            raise ValueError(f"year.min ({self.min}) must be <= year.max ({self.max})")
        return self

    def contains(self, year: int) -> bool:
        return self.min <= year <= self.max


class FilterCriteria(BaseModel):
    """Active user-selected constraints.

    "All" on a categorical field means no constraint on that field.
    The year range is always applied.
    """

    model_config = ConfigDict(frozen=True)

    country: str = ALL
    model: str = ALL
    city: str = ALL
    year: YearRange = Field(default_factory=YearRange)


class CrossMetricMaxima(BaseModel):
    """Maxima across the range, MSRP and make-count summaries."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_avg_range: float = Field(default=0, alias="maxAvgRange")
    max_avg_msrp: float = Field(default=0, alias="maxAvgMsrp")
    max_make_count: int = Field(default=0, alias="maxMakeCount")


class SummaryBundle(BaseModel):
    """Complete set of summaries for one recomputation.

    Replaced as a whole on every recompute; consumers never see a mix of
    summaries from different filter states.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    count_by_make: GroupedCounts = Field(default_factory=dict, alias="countByMake")
    type_distribution: GroupedCounts = Field(default_factory=dict, alias="typeDistribution")
    avg_range_by_year: GroupedAverage = Field(default_factory=dict, alias="avgRangeByYear")
    avg_msrp_by_make: GroupedAverage = Field(default_factory=dict, alias="avgMsrpByMake")
    type_distribution_repeat: GroupedCounts = Field(
        default_factory=dict, alias="typeDistributionRepeat"
    )
    cross_metric_maxima: CrossMetricMaxima = Field(
        default_factory=CrossMetricMaxima, alias="crossMetricMaxima"
    )

    @classmethod
    def empty(cls) -> SummaryBundle:
        """Bundle returned when there is nothing to summarize."""
        return cls()


class FilterOptions(BaseModel):
    """Distinct values available to each categorical filter selector."""

    model_config = ConfigDict(frozen=True)

    countries: list[str]
    models: list[str]
    cities: list[str]
    year: YearRange = Field(default_factory=YearRange)
