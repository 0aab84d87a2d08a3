"""CSV dataset adapter.

Reads the vehicle population CSV into records. The header row maps 1:1
to field names; every cell is kept as text and blank cells become None.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from evdash.models.domain import Record

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Raised when the dataset cannot be read or parsed."""

    pass


def load_records(csv_path: Path) -> list[Record]:
    """Load records from a CSV file.

    Args:
        csv_path: Path to CSV file with a header row.

    Returns:
        List of records in file order. An empty file yields [].

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DatasetLoadError: If the file can't be read, decoded or parsed.
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Dataset not found: {csv_path}")

    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Failed to parse dataset {csv_path}: {e}") from e
    except FileNotFoundError:
        raise
    except OSError as e:
        raise DatasetLoadError(f"Failed to read dataset {csv_path}: {e}") from e

    records: list[Record] = [
        {column: (value if value != "" else None) for column, value in row.items()}
        for row in df.to_dict(orient="records")
    ]
    logger.info(f"Loaded {len(records)} records from {csv_path}")
    return records


def load_records_or_empty(csv_path: Path) -> list[Record]:
    """Load records, degrading to an empty dataset on any acquisition failure."""
    try:
        return load_records(csv_path)
    except FileNotFoundError as e:
        logger.warning(f"Dataset unavailable: {e}")
    except DatasetLoadError as e:
        logger.error(f"Error parsing CSV: {e}")
    return []
