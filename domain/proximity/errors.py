"""Proximity Bounded Context - Error Hierarchy.

Custom exceptions for nearest-neighbor queries.
"""

from __future__ import annotations


class ProximityError(Exception):
    """Base error for proximity operations."""


class EmptyCandidateSetError(ProximityError):
    """Nearest-neighbor query was given no candidates."""


class InsufficientCandidatesError(ProximityError):
    """Fewer candidates than requested neighbors.

    Attributes:
        requested: Number of neighbors asked for
        available: Number of candidates supplied
    """

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} nearest candidates but only {available} available"
        )


class InvalidCountError(ProximityError, ValueError):
    """Requested neighbor count is not positive."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Neighbor count must be > 0, got {count}")
