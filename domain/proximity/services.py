"""Proximity Bounded Context - Domain Services.

Pure domain logic for distance and nearest-neighbor queries on the flat
planning plane. NO I/O operations.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from domain.network.value_objects import Coordinate, EmergencyCenter, Hub, NetworkEntity, Site
from domain.proximity.errors import (
    EmptyCandidateSetError,
    InsufficientCandidatesError,
    InvalidCountError,
)

E = TypeVar("E", bound=NetworkEntity)


# ---------------------------------------------------------------------------
# Distance Metric
# ---------------------------------------------------------------------------
def euclidean_distance(a: Coordinate, b: Coordinate) -> float:
    """Straight-line distance between two coordinates.

    Computed as sqrt(dx*dx + dy*dy) rather than math.hypot so that the
    vectorised form in _distances_from yields bit-identical values.
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def _distances_from(point: Coordinate, candidates: Sequence[NetworkEntity]) -> NDArray[np.float64]:
    """Distances from point to every candidate, in input order."""
    xs = np.fromiter((c.location.x for c in candidates), dtype=np.float64, count=len(candidates))
    ys = np.fromiter((c.location.y for c in candidates), dtype=np.float64, count=len(candidates))
    dx = xs - point.x
    dy = ys - point.y
    return np.sqrt(dx * dx + dy * dy)


# ---------------------------------------------------------------------------
# Nearest-Neighbor Search
# ---------------------------------------------------------------------------
def find_nearest(point: Coordinate, candidates: Sequence[E]) -> E:
    """Return the candidate closest to point; ties go to the earliest candidate.

    Raises:
        EmptyCandidateSetError: If candidates is empty
    """
    if not candidates:
        raise EmptyCandidateSetError("No candidates to search")
    distances = _distances_from(point, candidates)
    # argmin returns the first occurrence of the minimum
    return candidates[int(np.argmin(distances))]


def find_nearest_n(point: Coordinate, candidates: Sequence[E], n: int) -> list[E]:
    """Return the n candidates closest to point, nearest first.

    Equal distances keep input order. Selection uses a bounded heap of
    size n, O(M log n) for M candidates.

    Raises:
        InvalidCountError: If n <= 0
        InsufficientCandidatesError: If fewer than n candidates exist
    """
    if n <= 0:
        raise InvalidCountError(n)
    if len(candidates) < n:
        raise InsufficientCandidatesError(n, len(candidates))

    distances = _distances_from(point, candidates).tolist()
    order = heapq.nsmallest(n, range(len(candidates)), key=lambda i: (distances[i], i))
    return [candidates[i] for i in order]


# ---------------------------------------------------------------------------
# Domain-facing shortcuts
# ---------------------------------------------------------------------------
def find_nearest_emergency_center(
    site: Site, centers: Sequence[EmergencyCenter]
) -> EmergencyCenter:
    """Emergency center with the smallest straight-line distance to site.

    Raises:
        EmptyCandidateSetError: If centers is empty
    """
    return find_nearest(site.location, centers)


def find_nearest_hubs(point: Coordinate, hubs: Sequence[Hub], n: int) -> list[Hub]:
    """The n hubs nearest to point, nearest first.

    Raises:
        InvalidCountError: If n <= 0
        InsufficientCandidatesError: If fewer than n hubs exist
    """
    return find_nearest_n(point, hubs, n)
