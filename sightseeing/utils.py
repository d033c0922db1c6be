"""Utility functions for presenting routes and run statistics."""

from typing import Iterable

from sightseeing.models.location import Location


def format_route(locations: Iterable[Location]) -> str:
    """
    Format an ordered list of stops for display.

    Args:
        locations: Stops in visiting order, hotel first and airport last

    Returns:
        String like "(0,0) - (1,1) - (4,4)"

    Examples:
        >>> format_route([Location(x=0, y=0), Location(x=1, y=1)])
        '(0,0) - (1,1)'
    """
    return " - ".join(str(location) for location in locations)


def format_cost(cost: float) -> str:
    """
    Format a cost with thousand separators.

    Examples:
        >>> format_cost(12345)
        '12,345'
        >>> format_cost(1234.5)
        '1,234.50'
    """
    if float(cost).is_integer():
        return f"{int(cost):,}"
    return f"{cost:,.2f}"
