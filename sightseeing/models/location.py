"""Location model."""

import math

from pydantic import BaseModel


class Location(BaseModel):
    """An immutable pair of integer map coordinates."""

    x: int
    y: int

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {"x": 12, "y": 40},
        },
    }

    def distance_to(self, other: "Location") -> int:
        """Ceiling of the Euclidean distance to another location."""
        return math.ceil(math.hypot(self.x - other.x, self.y - other.y))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
