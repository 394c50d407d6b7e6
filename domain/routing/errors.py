"""Routing Bounded Context - Error Hierarchy.

Custom exceptions for shortest-path computation and path reconstruction.
"""

from __future__ import annotations


class RoutingError(Exception):
    """Base error for routing operations."""


class UnknownStartNodeError(RoutingError):
    """Shortest-path source is not a node of the graph."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Start node {source!r} does not exist in the graph")


class NoPathFoundError(RoutingError):
    """Target cannot be reached from source.

    Attributes:
        source: Path origin
        target: Unreachable destination
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No path found from {source} to {target}")
