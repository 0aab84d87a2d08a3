"""Electric vehicle population dashboard summaries."""

from evdash.aggregation.bundle import recompute
from evdash.models.types import FilterCriteria, SummaryBundle, YearRange

__all__ = ["FilterCriteria", "SummaryBundle", "YearRange", "recompute"]
