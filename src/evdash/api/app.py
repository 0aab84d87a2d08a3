"""FastAPI application factory.

API layer:
- Loads the dataset once at startup, validates filter input
- Returns summary payloads for the UI
- Forbidden: rendering concerns (colors, chart types), summary persistence
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from evdash.adapter.dataset import load_records_or_empty
from evdash.worker.publisher import SummaryPublisher

logger = logging.getLogger(__name__)

# Default dataset location, overridable via EVDASH_DATA_PATH
DEFAULT_DATA_PATH = Path("data/Electric_Vehicle_Population_Data.csv")


def resolve_data_path(data_path: Path | None = None) -> Path:
    """Resolve the dataset path: explicit argument, then environment, then default."""
    if data_path is not None:
        return Path(data_path)
    return Path(os.environ.get("EVDASH_DATA_PATH", str(DEFAULT_DATA_PATH)))


def get_publisher(request: Request) -> SummaryPublisher:
    """Dependency returning the app-wide summary publisher."""
    return request.app.state.publisher


def create_app(data_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        data_path: Optional path to the dataset CSV.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="EV Dashboard API",
        description="Electric vehicle population summaries",
        version="0.1.0",
    )

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # React dev server
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Acquire dataset; failures degrade to an empty dataset
    resolved = resolve_data_path(data_path)
    app.state.data_path = resolved
    app.state.publisher = SummaryPublisher()
    app.state.publisher.replace_records(load_records_or_empty(resolved))

    # Include routes
    from evdash.api.routes import dataset, summary

    app.include_router(summary.router, prefix="/api")
    app.include_router(dataset.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
