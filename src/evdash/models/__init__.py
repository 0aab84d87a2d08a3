"""Domain models: record fields and pydantic value types."""
