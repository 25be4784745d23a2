"""Infrastructure layer for hostfs."""
