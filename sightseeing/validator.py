"""Validator module for route permutation checks."""

import logging
from typing import List, Sequence

from pydantic import BaseModel

from sightseeing.exceptions import InvalidPermutation

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    """Validation report with the problems found in a route."""

    errors: List[str]
    missing: List[int]
    duplicates: List[int]

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0


def validate_permutation(route: Sequence[int], number_of_locations: int) -> ValidationReport:
    """
    Check that ``route`` visits every location index exactly once.

    Args:
        route: Sequence of location indices
        number_of_locations: Expected number of points of interest

    Returns:
        ValidationReport listing out-of-range, duplicate and missing indices
    """
    errors = []
    seen = set()
    duplicates = []

    if len(route) != number_of_locations:
        errors.append(f"Route has {len(route)} entries, expected {number_of_locations}")

    for index in route:
        if index < 0 or index >= number_of_locations:
            errors.append(f"Location index {index} out of range [0, {number_of_locations})")
            continue
        if index in seen:
            duplicates.append(index)
            errors.append(f"Location {index} is visited more than once")
        seen.add(index)

    missing = [i for i in range(number_of_locations) if i not in seen]
    for index in missing:
        errors.append(f"Location {index} is not visited")

    return ValidationReport(errors=errors, missing=missing, duplicates=duplicates)


def check_permutation(route: Sequence[int], number_of_locations: int) -> None:
    """Raise InvalidPermutation if ``route`` is not a valid permutation."""
    report = validate_permutation(route, number_of_locations)
    if not report.is_valid():
        logger.error(f"Invalid route {list(route)}: {report.errors}")
        raise InvalidPermutation(
            f"Route is not a permutation of {number_of_locations} locations",
            report.model_dump(),
        )
