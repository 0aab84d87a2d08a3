"""Record field names and the record type.

Records come straight from the CSV header row, so field names are the
dataset's column titles and must match exactly.
"""

from __future__ import annotations

from typing import Mapping

Record = Mapping[str, str | None]

# ============================================================================
# Categorical fields
# ============================================================================

COUNTY = "County"
MODEL = "Model"
CITY = "City"
MAKE = "Make"
EV_TYPE = "Electric Vehicle Type"

# ============================================================================
# Numeric fields (stored as strings, coerced on read)
# ============================================================================

MODEL_YEAR = "Model Year"
ELECTRIC_RANGE = "Electric Range"
BASE_MSRP = "Base MSRP"

CORE_FIELDS = (
    COUNTY,
    MODEL,
    CITY,
    MAKE,
    MODEL_YEAR,
    EV_TYPE,
    ELECTRIC_RANGE,
    BASE_MSRP,
)


def field_text(record: Record, field: str) -> str | None:
    """Return a field's string value, or None when absent or blank."""
    value = record.get(field)
    if value is None or value == "":
        return None
    return value
