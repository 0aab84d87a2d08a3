"""Aggregation module for dashboard summaries.

- grouping: generic group-by used by every aggregator
- summary: the individual aggregators (counts, means, maxima)
- bundle: recompute() assembling a SummaryBundle
"""

from evdash.aggregation.bundle import recompute
from evdash.aggregation.grouping import group_by

__all__ = ["group_by", "recompute"]
