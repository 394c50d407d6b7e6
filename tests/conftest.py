"""Root pytest configuration for all tests.

Shared fixtures build domain objects directly (no I/O), following DDD
principles - domain tests should not depend on infrastructure adapters.
"""

from __future__ import annotations

import pytest

from domain.network.graph import NetworkGraph
from domain.network.value_objects import EmergencyCenter, Hub, NetworkData, Site
from shared.sample_network import SAMPLE_CENTERS, SAMPLE_HUBS, SAMPLE_SITES


@pytest.fixture
def sample_network() -> NetworkData:
    """Reference network: 3 sites, 5 hubs, 3 emergency centers."""
    return NetworkData(
        sites=tuple(Site.at(*r) for r in SAMPLE_SITES),
        hubs=tuple(Hub.at(*r) for r in SAMPLE_HUBS),
        centers=tuple(EmergencyCenter.at(*r) for r in SAMPLE_CENTERS),
    )


@pytest.fixture
def sample_graph(sample_network: NetworkData) -> NetworkGraph:
    """Frozen graph built from the reference network."""
    from domain.network.services import build_network_graph

    return build_network_graph(
        sample_network.sites, sample_network.hubs, sample_network.centers
    )


@pytest.fixture
def detour_graph() -> NetworkGraph:
    """TS1(10,20), H1(12,22), H5(5,15), EC1(15,25) with a long H5 detour.

    Edges: TS1-H1 ~2.83, H1-H5 ~9.90, H5-EC1 ~14.14, EC1-H1 ~4.24
    """
    from domain.network.value_objects import Coordinate
    from domain.proximity.services import euclidean_distance

    points = {
        "TS1": Coordinate(x=10, y=20),
        "H1": Coordinate(x=12, y=22),
        "H5": Coordinate(x=5, y=15),
        "EC1": Coordinate(x=15, y=25),
    }
    graph = NetworkGraph()
    for a, b in (("TS1", "H1"), ("H1", "H5"), ("H5", "EC1"), ("EC1", "H1")):
        graph.add_edge(a, b, euclidean_distance(points[a], points[b]))
    graph.freeze()
    return graph
