"""Utility package: logging, seeded randomness, coherent noise and spatial indexing."""
