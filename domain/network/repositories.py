"""Domain Port(s) for Network Data Provisioning.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import NetworkData


class NetworkRepository(Protocol):
    """Port for obtaining site, hub and emergency center lists.

    Implementations live in infrastructure (e.g., JSON file adapter).
    """

    def load_network(self) -> NetworkData:
        """Load the three entity lists, each entity already validated."""
        ...
