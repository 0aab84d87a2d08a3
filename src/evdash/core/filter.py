"""Record filter: applies FilterCriteria to the raw record set."""

from __future__ import annotations

from typing import Iterable

from evdash.core.coerce import parse_int
from evdash.models.domain import CITY, COUNTY, MODEL, MODEL_YEAR, Record
from evdash.models.types import ALL, FilterCriteria


def _matches_category(selected: str, actual: str | None) -> bool:
    return selected == ALL or actual == selected


def record_matches(record: Record, criteria: FilterCriteria) -> bool:
    """Check a single record against every predicate.

    The year predicate is mandatory: a record whose model year is absent
    or unparsable never matches.
    """
    if not _matches_category(criteria.country, record.get(COUNTY)):
        return False
    if not _matches_category(criteria.model, record.get(MODEL)):
        return False
    if not _matches_category(criteria.city, record.get(CITY)):
        return False

    year = parse_int(record.get(MODEL_YEAR))
    if year is None:
        return False
    return criteria.year.contains(year)


def filter_records(
    records: Iterable[Record] | None,
    criteria: FilterCriteria,
) -> list[Record]:
    """Return the records matching all criteria, in input order.

    Args:
        records: Raw records; None is treated as an empty dataset.
        criteria: Active filter criteria.

    Returns:
        New list holding the matching records (records are not copied).
    """
    if not records:
        return []
    return [record for record in records if record_matches(record, criteria)]
