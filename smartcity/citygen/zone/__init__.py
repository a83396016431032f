"""Zone grid generation."""
