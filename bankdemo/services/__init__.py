"""Banking operations."""
