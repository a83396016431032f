"""Building generation."""
