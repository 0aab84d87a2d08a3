"""Summary aggregators over a filtered record set.

Each aggregator is a pure function: it reads the records it is given and
returns a freshly allocated structure. None of them re-filter.
"""

from __future__ import annotations

from typing import Iterable

from evdash.aggregation.grouping import group_by
from evdash.core.coerce import parse_float, parse_int
from evdash.models.domain import (
    BASE_MSRP,
    ELECTRIC_RANGE,
    EV_TYPE,
    MAKE,
    MODEL_YEAR,
    Record,
    field_text,
)
from evdash.models.types import CrossMetricMaxima, GroupedAverage, GroupedCounts


def _count(records: Iterable[Record], field: str) -> GroupedCounts:
    groups = group_by(records, lambda r: field_text(r, field), lambda r: 1)
    return {key: sum(ones) for key, ones in groups.items()}


def _mean(groups: dict[str, list[float]]) -> GroupedAverage:
    # Groups without a single valid observation are dropped, never zeroed.
    # sum() runs in input order so results are reproducible.
    return {key: sum(values) / len(values) for key, values in groups.items() if values}


def count_by_make(records: Iterable[Record]) -> GroupedCounts:
    """Number of vehicles per make."""
    return _count(records, MAKE)


def type_distribution(records: Iterable[Record]) -> GroupedCounts:
    """Number of vehicles per electric vehicle type."""
    return _count(records, EV_TYPE)


def mean_range_by_year(records: Iterable[Record]) -> GroupedAverage:
    """Average electric range per model year label.

    Keys are the model year exactly as it appears in the record. Range
    values are read with integer parsing, so "215.5" contributes 215.
    """
    groups = group_by(
        records,
        lambda r: field_text(r, MODEL_YEAR),
        lambda r: parse_int(field_text(r, ELECTRIC_RANGE)),
    )
    return _mean(groups)


def mean_msrp_by_make(records: Iterable[Record]) -> GroupedAverage:
    """Average base MSRP per make.

    Makes where no record carries a parsable MSRP are left out.
    """
    groups = group_by(
        records,
        lambda r: field_text(r, MAKE),
        lambda r: parse_float(field_text(r, BASE_MSRP)),
    )
    return _mean(groups)


def cross_metric_maxima(
    avg_range_by_year: GroupedAverage,
    avg_msrp_by_make: GroupedAverage,
    make_counts: GroupedCounts,
) -> CrossMetricMaxima:
    """Compute the maximum of each summary, 0 for an empty summary.

    Args:
        avg_range_by_year: Output of mean_range_by_year.
        avg_msrp_by_make: Output of mean_msrp_by_make.
        make_counts: Output of count_by_make.

    Returns:
        CrossMetricMaxima with the three maxima.
    """
    return CrossMetricMaxima(
        max_avg_range=max(avg_range_by_year.values(), default=0),
        max_avg_msrp=max(avg_msrp_by_make.values(), default=0),
        max_make_count=max(make_counts.values(), default=0),
    )
