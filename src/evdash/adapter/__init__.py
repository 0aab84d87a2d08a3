"""Adapter module for IO boundaries.

Adapters wrap data acquisition behind domain-focused interfaces.
The aggregation pipeline only ever sees records, never files.
"""

from evdash.adapter.dataset import DatasetLoadError, load_records, load_records_or_empty

__all__ = [
    "DatasetLoadError",
    "load_records",
    "load_records_or_empty",
]
