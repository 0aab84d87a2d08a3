"""Dataset API endpoint.

POST /api/dataset/reload - Re-read the dataset and recompute summaries
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from evdash.adapter.dataset import load_records_or_empty
from evdash.api.app import get_publisher
from evdash.worker.publisher import SummaryPublisher

router = APIRouter()


class ReloadResponse(BaseModel):
    """Response for dataset reload."""

    record_count: int


@router.post("/dataset/reload", response_model=ReloadResponse)
def reload_dataset(
    request: Request,
    publisher: SummaryPublisher = Depends(get_publisher),
) -> ReloadResponse:
    """Reload the configured dataset and recompute with the current criteria."""
    records = load_records_or_empty(request.app.state.data_path)
    publisher.replace_records(records)
    return ReloadResponse(record_count=len(records))
