"""Tests for data loader module."""

import logging

import pytest

from sightseeing.config import INSTANCE_FILES
from sightseeing.data_loader import (
    _resolve_instance_path,
    load_instance,
    load_instance_by_id,
    parse_instance,
)
from sightseeing.exceptions import InvalidIndex, MalformedInstance
from sightseeing.models import Location


VALID_INSTANCE = """NAME: square
COMMENT: four corners of a square
HOTEL_LOCATION
0 0
AIRPORT_LOCATION
10 0
POINTS_OF_INTEREST
0 10
10 10
5   5
EOF
"""


def test_parse_instance():
    """Test parsing a well-formed instance."""
    instance = parse_instance(VALID_INSTANCE)

    assert instance.name == "square"
    assert instance.comment == "four corners of a square"
    assert instance.hotel == Location(x=0, y=0)
    assert instance.airport == Location(x=10, y=0)
    assert instance.locations == [Location(x=0, y=10), Location(x=10, y=10), Location(x=5, y=5)]


def test_name_keeps_text_after_first_separator():
    """Test only the first ':' separates the name."""
    instance = parse_instance(VALID_INSTANCE.replace("NAME: square", "NAME: city: centre"))
    assert instance.name == "city: centre"


def test_missing_eof_is_tolerated(caplog):
    """Test a missing EOF marker only logs a warning."""
    with caplog.at_level(logging.WARNING):
        instance = parse_instance(VALID_INSTANCE.replace("EOF\n", ""))

    assert instance.number_of_locations == 3
    assert "EOF" in caplog.text


def test_lines_after_eof_are_ignored():
    """Test nothing after EOF is read."""
    instance = parse_instance(VALID_INSTANCE + "not a location\n")
    assert instance.number_of_locations == 3


def test_missing_marker():
    """Test a missing section marker raises MalformedInstance."""
    with pytest.raises(MalformedInstance) as exc_info:
        parse_instance(VALID_INSTANCE.replace("AIRPORT_LOCATION", "AIRPORT"))
    assert exc_info.value.details["expected"] == "AIRPORT_LOCATION"


def test_non_integer_hotel_coordinate():
    """Test non-integer hotel coordinates raise MalformedInstance."""
    with pytest.raises(MalformedInstance):
        parse_instance(VALID_INSTANCE.replace("0 0\n", "0 zero\n", 1))


def test_non_integer_point_of_interest():
    """Test non-integer point of interest coordinates raise MalformedInstance."""
    with pytest.raises(MalformedInstance) as exc_info:
        parse_instance(VALID_INSTANCE.replace("10 10", "10 10.5"))
    assert exc_info.value.details["column"] == "y"


def test_point_of_interest_with_one_coordinate():
    """Test a point of interest missing a coordinate raises MalformedInstance."""
    with pytest.raises(MalformedInstance):
        parse_instance(VALID_INSTANCE.replace("5   5", "5"))


def test_empty_points_of_interest():
    """Test an instance without points of interest raises MalformedInstance."""
    text = VALID_INSTANCE.replace("0 10\n10 10\n5   5\n", "")
    with pytest.raises(MalformedInstance):
        parse_instance(text)


def test_truncated_instance():
    """Test a file ending before the sections raises MalformedInstance."""
    with pytest.raises(MalformedInstance):
        parse_instance("NAME: x\nCOMMENT\nHOTEL_LOCATION\n")
    with pytest.raises(MalformedInstance):
        parse_instance("")


def test_load_instance_from_file(tmp_path):
    """Test loading an instance by path and by name under a directory."""
    path = tmp_path / "square.ssp"
    path.write_text(VALID_INSTANCE)

    assert load_instance(str(path)).name == "square"
    assert load_instance("square.ssp", str(tmp_path)).number_of_locations == 3


def test_load_missing_file(tmp_path):
    """Test a missing instance file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_instance(str(tmp_path / "missing.ssp"))


def test_resolve_instance_path(tmp_path):
    """Test paths are tried as given, then under the instance directory."""
    (tmp_path / "grid.ssp").write_text(VALID_INSTANCE)

    assert _resolve_instance_path("grid.ssp", str(tmp_path)) == str(tmp_path / "grid.ssp")
    assert _resolve_instance_path("nowhere.ssp", str(tmp_path)) == "nowhere.ssp"


def test_load_instance_by_id(tmp_path):
    """Test benchmark instances are looked up by id."""
    (tmp_path / INSTANCE_FILES[4]).write_text(VALID_INSTANCE)

    assert load_instance_by_id(4, str(tmp_path)).name == "square"
    with pytest.raises(InvalidIndex):
        load_instance_by_id(len(INSTANCE_FILES), str(tmp_path))
