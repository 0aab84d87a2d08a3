"""API module for the EV dashboard.

API layer:
- Validates filter input, reads the loaded dataset
- Returns summary payloads for UI
- Forbidden: rendering metadata, summary persistence
"""
