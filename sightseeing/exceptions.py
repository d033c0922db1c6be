"""Error types raised by the sightseeing search engine."""

from typing import Dict, Optional


class SightseeingError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.details = details or {}


class InvalidIndex(SightseeingError, IndexError):
    """Raised when a heuristic id, memory slot or location index is out of range."""


class UninitializedSolution(SightseeingError):
    """Raised when an operation reads a memory slot that was never populated."""


class MalformedInstance(SightseeingError):
    """Raised when an instance file or parsed instance is structurally invalid."""


class InvalidPermutation(SightseeingError):
    """Raised when a route is not a permutation of the location indices."""
