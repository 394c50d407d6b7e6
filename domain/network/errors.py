"""Network Bounded Context - Error Hierarchy.

Custom exceptions for entity validation and graph construction.
"""

from __future__ import annotations


class NetworkError(Exception):
    """Base error for network operations."""


class InvalidEntityError(NetworkError):
    """Entity has an empty identifier, an unset location, or a duplicate identifier.

    Attributes:
        identifier: The offending identifier (may be empty)
        reason: Human readable cause
    """

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid entity {identifier!r}: {reason}")


class BuildError(NetworkError):
    """Network graph could not be built.

    Always chained (``raise ... from``) to the error that aborted the build.
    """


class GraphFrozenError(NetworkError):
    """Attempted to mutate a graph after construction completed."""


class InvalidNetworkFileError(NetworkError):
    """Network file is empty, malformed, or has the wrong shape."""
