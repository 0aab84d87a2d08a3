"""Pure record-level helpers: coercion, filtering, filter options."""
