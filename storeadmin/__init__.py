"""Store Admin API."""
