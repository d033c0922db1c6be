"""Adaptive hyper-heuristic search for the sightseeing route problem."""

__version__ = "1.0.0"
