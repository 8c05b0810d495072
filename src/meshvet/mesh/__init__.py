"""Service mesh specific logic."""
