"""Sightseeing problem instance model."""

from typing import List, Sequence

from pydantic import BaseModel, Field

from sightseeing.exceptions import InvalidIndex
from sightseeing.models.location import Location


class Instance(BaseModel):
    """A hotel, an airport and the points of interest visited in between.

    Points of interest are addressed by their position in ``locations``;
    a route is a permutation of those positions.
    """

    name: str = ""
    comment: str = ""
    hotel: Location
    airport: Location
    locations: List[Location] = Field(min_length=1)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "name": "square",
                "comment": "four corners",
                "hotel": {"x": 0, "y": 0},
                "airport": {"x": 10, "y": 0},
                "locations": [{"x": 0, "y": 10}, {"x": 10, "y": 10}],
            }
        },
    }

    @property
    def number_of_locations(self) -> int:
        """Number of points of interest (hotel and airport excluded)."""
        return len(self.locations)

    def get_location(self, index: int) -> Location:
        """Return the point of interest at ``index``."""
        if index < 0 or index >= len(self.locations):
            raise InvalidIndex(
                f"Invalid location index: {index}",
                {"index": index, "number_of_locations": len(self.locations)},
            )
        return self.locations[index]

    def route_as_locations(self, route: Sequence[int]) -> List[Location]:
        """Expand a route into hotel, visited locations and airport, in order."""
        return [self.hotel] + [self.get_location(i) for i in route] + [self.airport]
