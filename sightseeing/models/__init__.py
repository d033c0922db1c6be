"""Problem models package."""

from .location import Location
from .instance import Instance
from .solution import Solution, SolutionRepresentation

__all__ = [
    "Location",
    "Instance",
    "Solution",
    "SolutionRepresentation",
]
