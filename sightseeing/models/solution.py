"""Solution types for the route-ordering problem.

Contains the permutation representation and the solution wrapper that
caches its objective value.
"""

from typing import Iterable, List


class SolutionRepresentation:
    """An ordered permutation of point-of-interest indices.

    The hotel and the airport are implicit: they are always the first and
    last stops, so only the points of interest are stored.
    """

    # Hotel and airport are not part of the stored route
    FIXED_STOPS = 2

    def __init__(self, route: Iterable[int]):
        self._route: List[int] = list(route)

    @property
    def route(self) -> List[int]:
        """The owned route list. Operators mutate it in place."""
        return self._route

    def set_route(self, route: Iterable[int]) -> None:
        """Replace the whole route with a copy of ``route``."""
        self._route = list(route)

    @property
    def number_of_stops(self) -> int:
        """Total number of stops, hotel and airport included."""
        return len(self._route) + self.FIXED_STOPS

    def copy(self) -> "SolutionRepresentation":
        """Create a deep copy that shares no storage with this one."""
        return SolutionRepresentation(self._route)

    def __len__(self) -> int:
        return len(self._route)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SolutionRepresentation):
            return NotImplemented
        return self._route == other._route

    def __repr__(self) -> str:
        return f"SolutionRepresentation({self._route})"


class Solution:
    """A representation together with its cached objective value.

    Attributes:
        representation: The owned permutation
        objective_value: Cost of hotel -> route -> airport (lower is better)
    """

    def __init__(self, representation: SolutionRepresentation, objective_value: int):
        self.representation = representation
        self.objective_value = objective_value

    @property
    def route(self) -> List[int]:
        return self.representation.route

    @property
    def number_of_stops(self) -> int:
        return self.representation.number_of_stops

    def copy(self) -> "Solution":
        """Create a deep copy of this solution."""
        return Solution(self.representation.copy(), self.objective_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return self.representation == other.representation

    def __repr__(self) -> str:
        return f"Solution(route={self.route}, cost={self.objective_value})"
