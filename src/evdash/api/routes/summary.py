"""Summary API endpoints.

GET /api/summary - Summaries for the given filter criteria
GET /api/filters - Options for the categorical filter selectors
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from evdash.api.app import get_publisher
from evdash.core.options import collect_filter_options
from evdash.models.types import (
    ALL,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    FilterCriteria,
    FilterOptions,
    SummaryBundle,
    YearRange,
)
from evdash.worker.publisher import SummaryPublisher

router = APIRouter()


@router.get("/summary", response_model=SummaryBundle)
def get_summary(
    country: str = ALL,
    model: str = ALL,
    city: str = ALL,
    year_min: int = DEFAULT_YEAR_MIN,
    year_max: int = DEFAULT_YEAR_MAX,
    publisher: SummaryPublisher = Depends(get_publisher),
) -> SummaryBundle:
    """Recompute and return summaries for the requested filters.

    Args:
        country: County to match, or "All".
        model: Model to match, or "All".
        city: City to match, or "All".
        year_min: Inclusive lower model year bound.
        year_max: Inclusive upper model year bound.
        publisher: Summary publisher (injected).

    Returns:
        SummaryBundle serialized with camelCase keys.

    Raises:
        HTTPException: 422 if year_min > year_max.
    """
    try:
        year = YearRange(min=year_min, max=year_max)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    criteria = FilterCriteria(country=country, model=model, city=city, year=year)
    return publisher.update(criteria)


@router.get("/filters", response_model=FilterOptions)
def get_filter_options(
    publisher: SummaryPublisher = Depends(get_publisher),
) -> FilterOptions:
    """Return the distinct county, model and city values in the dataset."""
    return collect_filter_options(publisher.records)
