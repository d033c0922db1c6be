"""Tests for utility functions."""

from sightseeing.models import Location
from sightseeing.utils import format_cost, format_route


def test_format_route():
    """Test stops are joined with dashes."""
    stops = [Location(x=0, y=0), Location(x=1, y=1), Location(x=4, y=4)]
    assert format_route(stops) == "(0,0) - (1,1) - (4,4)"


def test_format_cost():
    """Test costs get thousand separators and two decimals when fractional."""
    assert format_cost(12345) == "12,345"
    assert format_cost(1234.5) == "1,234.50"
    assert format_cost(10.0) == "10"
