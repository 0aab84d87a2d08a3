"""SummaryBundle assembly from filter + aggregators.

This module is the thin orchestrator that:
1. Filters the raw records once
2. Runs every aggregator against that single filtered set
3. Derives the cross-metric maxima from the aggregator outputs
4. Returns a complete, frozen SummaryBundle
"""

from __future__ import annotations

import logging
from typing import Sequence

from evdash.aggregation.summary import (
    count_by_make,
    cross_metric_maxima,
    mean_msrp_by_make,
    mean_range_by_year,
    type_distribution,
)
from evdash.core.filter import filter_records
from evdash.models.domain import Record
from evdash.models.types import FilterCriteria, SummaryBundle

logger = logging.getLogger(__name__)


def recompute(
    records: Sequence[Record] | None,
    criteria: FilterCriteria,
) -> SummaryBundle:
    """Compute the complete SummaryBundle for a record set and criteria.

    Identical inputs always produce an equal bundle. An absent or empty
    record set, or one that filters down to nothing, yields the zeroed
    bundle.

    Args:
        records: Raw records from the dataset adapter (may be None).
        criteria: Active filter criteria.

    Returns:
        Complete SummaryBundle.
    """
    # Step 1: Filter once; aggregators never re-filter
    filtered = filter_records(records, criteria)
    logger.debug(
        f"Recompute: {len(records) if records else 0} records, "
        f"{len(filtered)} after filter"
    )

    if not filtered:
        return SummaryBundle.empty()

    # Step 2: Aggregate
    make_counts = count_by_make(filtered)
    types = type_distribution(filtered)
    avg_range = mean_range_by_year(filtered)
    avg_msrp = mean_msrp_by_make(filtered)

    # Step 3: Maxima from the aggregator outputs
    maxima = cross_metric_maxima(avg_range, avg_msrp, make_counts)

    # Step 4: Assemble. The repeat slot shares the type distribution
    # computation but gets its own dict so consumers cannot alias them.
    return SummaryBundle(
        count_by_make=make_counts,
        type_distribution=types,
        avg_range_by_year=avg_range,
        avg_msrp_by_make=avg_msrp,
        type_distribution_repeat=dict(types),
        cross_metric_maxima=maxima,
    )
