"""Objective function for the sightseeing route.

The cost of a route is the sum of rounded-up Euclidean distances along
hotel -> points of interest (in route order) -> airport. All pairwise
distances are precomputed once per instance; the hotel and the airport take
the two rows after the points of interest.
"""

import logging
from typing import List, Sequence, Union

from sightseeing.exceptions import InvalidPermutation
from sightseeing.models.instance import Instance
from sightseeing.models.solution import SolutionRepresentation

logger = logging.getLogger(__name__)


class ObjectiveFunction:
    """Evaluates route cost for one instance."""

    def __init__(self, instance: Instance):
        self.instance = instance
        self.number_of_locations = instance.number_of_locations
        self.hotel_index = self.number_of_locations
        self.airport_index = self.number_of_locations + 1

        stops = list(instance.locations) + [instance.hotel, instance.airport]
        self._matrix: List[List[int]] = [
            [a.distance_to(b) for b in stops] for a in stops
        ]
        logger.debug(f"Precomputed {len(stops)}x{len(stops)} distance matrix for '{instance.name}'")

    def cost(self, location_a: int, location_b: int) -> int:
        """Distance between two points of interest."""
        return self._matrix[location_a][location_b]

    def cost_from_hotel(self, location: int) -> int:
        return self._matrix[self.hotel_index][location]

    def cost_to_airport(self, location: int) -> int:
        return self._matrix[location][self.airport_index]

    def evaluate(self, representation: Union[SolutionRepresentation, Sequence[int]]) -> int:
        """Total cost of hotel -> route -> airport.

        Raises:
            InvalidPermutation: If the route length does not match the instance
        """
        route = representation.route if isinstance(representation, SolutionRepresentation) else representation
        if len(route) != self.number_of_locations:
            raise InvalidPermutation(
                f"Route has {len(route)} locations, instance has {self.number_of_locations}",
                {"expected": self.number_of_locations, "actual": len(route)},
            )

        matrix = self._matrix
        total = matrix[self.hotel_index][route[0]]
        for i in range(len(route) - 1):
            total += matrix[route[i]][route[i + 1]]
        total += matrix[route[-1]][self.airport_index]
        return total

    def _previous_stop(self, route: Sequence[int], position: int) -> int:
        return route[position - 1] if position > 0 else self.hotel_index

    def _next_stop(self, route: Sequence[int], position: int) -> int:
        return route[position + 1] if position < len(route) - 1 else self.airport_index

    def adjacent_swap_delta(self, route: Sequence[int], position: int) -> int:
        """Cost change of swapping ``route[position]`` and ``route[position + 1]``.

        Distances are symmetric, so the edge between the two swapped stops
        does not change.
        """
        matrix = self._matrix
        before = self._previous_stop(route, position)
        after = self._next_stop(route, position + 1)
        a = route[position]
        b = route[position + 1]
        return (matrix[before][b] + matrix[a][after]) - (matrix[before][a] + matrix[b][after])

    def reversal_delta(self, route: Sequence[int], start: int, end: int) -> int:
        """Cost change of reversing ``route[start..end]`` (inclusive)."""
        matrix = self._matrix
        before = self._previous_stop(route, start)
        after = self._next_stop(route, end)
        first = route[start]
        last = route[end]
        return (matrix[before][last] + matrix[first][after]) - (matrix[before][first] + matrix[last][after])
