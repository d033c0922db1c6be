"""Data loader module for parsing sightseeing instance files.

Instance format:

    NAME: <name>
    <comment line>
    HOTEL_LOCATION
    x y
    AIRPORT_LOCATION
    x y
    POINTS_OF_INTEREST
    x y
    ...
    EOF
"""

import io
import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from sightseeing.config import (
    AIRPORT_MARKER,
    EOF_MARKER,
    HOTEL_MARKER,
    INSTANCE_FILES,
    NAME_SEPARATOR,
    POINTS_OF_INTEREST_MARKER,
)
from sightseeing.exceptions import InvalidIndex, MalformedInstance
from sightseeing.models.instance import Instance
from sightseeing.models.location import Location

logger = logging.getLogger(__name__)


def _resolve_instance_path(path: str, instance_dir: Optional[str] = None) -> str:
    """
    Resolve an instance path, trying it as given and then under ``instance_dir``.

    Args:
        path: Path or bare file name of the instance
        instance_dir: Directory holding the benchmark instances

    Returns:
        Resolved path that exists, or the original path
    """
    # If path already exists, use it
    if os.path.exists(path):
        return path

    if instance_dir:
        prefixed_path = os.path.join(instance_dir, path)
        if os.path.exists(prefixed_path):
            return prefixed_path

    # Return original path (will raise FileNotFoundError if doesn't exist)
    return path


def _parse_value(line: str) -> str:
    """Text after the first separator, or the whole line if there is none."""
    if NAME_SEPARATOR in line:
        return line.split(NAME_SEPARATOR, 1)[1].strip()
    return line.strip()


def _expect_marker(lines: List[str], index: int, marker: str) -> None:
    found = lines[index] if index < len(lines) else None
    if found != marker:
        raise MalformedInstance(
            f"Expected '{marker}' on line {index + 1}, found {found!r}",
            {"line": index + 1, "expected": marker, "found": found},
        )


def _parse_location(lines: List[str], index: int, label: str) -> Location:
    if index >= len(lines):
        raise MalformedInstance(f"Missing {label} coordinates", {"line": index + 1})

    fields = lines[index].split()
    try:
        x, y = (int(value) for value in fields)
    except ValueError as e:
        raise MalformedInstance(
            f"Invalid {label} coordinates on line {index + 1}: {lines[index]!r}",
            {"line": index + 1, "text": lines[index]},
        ) from e
    return Location(x=x, y=y)


def _parse_points_of_interest(lines: List[str], first_line: int) -> Tuple[List[Location], bool]:
    """Read the POI block with pandas. Returns the locations and whether EOF was seen."""
    block = []
    found_eof = False
    for line in lines[first_line:]:
        if line == EOF_MARKER:
            found_eof = True
            break
        block.append(line)

    if not block:
        raise MalformedInstance("Instance has no points of interest", {"line": first_line + 1})

    try:
        df = pd.read_csv(io.StringIO("\n".join(block)), sep=r"\s+", header=None)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise MalformedInstance(f"Invalid points of interest block: {e}", {"line": first_line + 1}) from e

    if df.shape[1] != 2:
        raise MalformedInstance(
            f"Points of interest need exactly two coordinates, found {df.shape[1]} columns",
            {"line": first_line + 1},
        )

    df.columns = ["x", "y"]
    for column in df.columns:
        if not pd.api.types.is_integer_dtype(df[column]):
            numeric = pd.to_numeric(df[column], errors="coerce")
            bad_rows = df.index[numeric.isna() | (numeric % 1 != 0)]
            row = int(bad_rows[0]) if len(bad_rows) else 0
            raise MalformedInstance(
                f"Non-integer {column} coordinate on line {first_line + row + 1}",
                {"line": first_line + row + 1, "column": column},
            )

    locations = [Location(x=int(row.x), y=int(row.y)) for row in df.itertuples(index=False)]
    return locations, found_eof


def parse_instance(text: str, source: str = "<string>") -> Instance:
    """
    Parse an instance from its text form.

    Blank lines are ignored. A missing EOF marker is tolerated.

    Args:
        text: Instance file contents
        source: Name used in log messages

    Returns:
        Parsed Instance

    Raises:
        MalformedInstance: If a marker is missing, a coordinate is not an
            integer or there are no points of interest
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise MalformedInstance(f"Instance {source} is missing the name and comment lines")

    name = _parse_value(lines[0])
    comment = _parse_value(lines[1])

    _expect_marker(lines, 2, HOTEL_MARKER)
    hotel = _parse_location(lines, 3, "hotel")
    _expect_marker(lines, 4, AIRPORT_MARKER)
    airport = _parse_location(lines, 5, "airport")
    _expect_marker(lines, 6, POINTS_OF_INTEREST_MARKER)

    locations, found_eof = _parse_points_of_interest(lines, 7)
    if not found_eof:
        logger.warning(f"Instance {source} has no {EOF_MARKER} marker")

    try:
        instance = Instance(name=name, comment=comment, hotel=hotel, airport=airport, locations=locations)
    except ValidationError as e:
        raise MalformedInstance(f"Invalid instance {source}: {e}") from e

    logger.info(f"Parsed instance '{name}' from {source} with {len(locations)} points of interest")
    return instance


def load_instance(path: str, instance_dir: Optional[str] = None) -> Instance:
    """
    Read and parse an instance file.

    Args:
        path: Path or bare file name of the instance
        instance_dir: Directory searched when ``path`` does not exist as given

    Returns:
        Parsed Instance
    """
    resolved_path = _resolve_instance_path(path, instance_dir)
    try:
        text = Path(resolved_path).read_text()
    except FileNotFoundError:
        logger.error(f"Instance file not found at {resolved_path}")
        raise
    return parse_instance(text, source=resolved_path)


def load_instance_by_id(instance_id: int, instance_dir: str) -> Instance:
    """Load one of the benchmark instances listed in INSTANCE_FILES."""
    if instance_id < 0 or instance_id >= len(INSTANCE_FILES):
        raise InvalidIndex(
            f"Invalid instance id: {instance_id}",
            {"instance_id": instance_id, "number_of_instances": len(INSTANCE_FILES)},
        )
    return load_instance(INSTANCE_FILES[instance_id], instance_dir)
