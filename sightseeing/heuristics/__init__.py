"""Low-level heuristics for the sightseeing route."""

from sightseeing.heuristics.types import HeuristicDescriptor, HeuristicType
from sightseeing.heuristics.common import iterations_for_depth, iterations_for_intensity
from sightseeing.heuristics.registry import default_heuristics

__all__ = [
    "HeuristicDescriptor",
    "HeuristicType",
    "iterations_for_depth",
    "iterations_for_intensity",
    "default_heuristics",
]
