"""Summary statistics over a generated city."""
