"""Tests for validator module."""

import pytest

from sightseeing.exceptions import InvalidPermutation
from sightseeing.validator import check_permutation, validate_permutation


def test_valid_permutation():
    """Test a permutation passes validation."""
    report = validate_permutation([2, 0, 1], 3)

    assert report.is_valid()
    assert report.missing == []
    assert report.duplicates == []


def test_duplicate_and_missing():
    """Test duplicates and missing indices are both reported."""
    report = validate_permutation([0, 0, 2], 3)

    assert not report.is_valid()
    assert report.duplicates == [0]
    assert report.missing == [1]


def test_wrong_length_and_out_of_range():
    """Test length mismatches and out-of-range indices are errors."""
    report = validate_permutation([0, 5], 3)

    assert not report.is_valid()
    assert any("entries" in error for error in report.errors)
    assert any("out of range" in error for error in report.errors)
    assert report.missing == [1, 2]


def test_check_permutation_raises_with_details():
    """Test check_permutation raises InvalidPermutation carrying the report."""
    check_permutation([1, 0], 2)

    with pytest.raises(InvalidPermutation) as exc_info:
        check_permutation([1, 1], 2)
    assert exc_info.value.details["missing"] == [0]
    assert exc_info.value.details["duplicates"] == [1]
