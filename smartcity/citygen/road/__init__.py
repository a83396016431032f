"""Road network generation."""
