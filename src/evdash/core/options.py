"""Filter option discovery for the categorical selectors."""

from __future__ import annotations

from typing import Iterable

from evdash.models.domain import CITY, COUNTY, MODEL, Record, field_text
from evdash.models.types import FilterOptions


def distinct_values(records: Iterable[Record], field: str) -> list[str]:
    """Distinct non-blank values of a field, in first-seen order."""
    seen: dict[str, None] = {}
    for record in records:
        value = field_text(record, field)
        if value is not None:
            seen.setdefault(value, None)
    return list(seen)


def collect_filter_options(records: Iterable[Record] | None) -> FilterOptions:
    """Build the choices offered by the county, model and city selectors.

    Options come from the unfiltered dataset so that choosing one filter
    never hides the alternatives of another.
    """
    records = list(records or [])
    return FilterOptions(
        countries=distinct_values(records, COUNTY),
        models=distinct_values(records, MODEL),
        cities=distinct_values(records, CITY),
    )
