"""Routing Bounded Context - Domain Services.

Pure domain logic for routing over a built NetworkGraph. The graph is only
read, so several invocations (from different sources) may share one frozen
graph.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Mapping, Sequence

from domain.network.graph import NetworkGraph
from domain.network.value_objects import EmergencyCenter, Site
from domain.proximity.services import find_nearest_emergency_center
from domain.routing.errors import NoPathFoundError, UnknownStartNodeError
from domain.routing.value_objects import EmergencyRoute, ShortestPathResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def shortest_path(graph: NetworkGraph, source: str) -> ShortestPathResult:
    """Single-source shortest distances and predecessors (Dijkstra).

    Valid because every edge weight is non-negative. Stale frontier entries
    are skipped on pop (lazy deletion). Entries with equal distance are
    popped smallest identifier first, so output is reproducible.

    Args:
        graph: Built network graph (read only)
        source: Identifier of the start node

    Returns:
        ShortestPathResult covering every node of the graph

    Raises:
        UnknownStartNodeError: If source is not in the graph
    """
    if source not in graph:
        raise UnknownStartNodeError(source)

    n = len(graph)
    start = graph.index_of(source)
    dist = [math.inf] * n
    prev = [-1] * n
    visited = [False] * n
    dist[start] = 0.0

    frontier: list[tuple[float, str, int]] = [(0.0, source, start)]
    settled = 0

    while frontier:
        d, _, u = heapq.heappop(frontier)
        if visited[u]:
            continue
        visited[u] = True
        settled += 1

        for v, w in graph.neighbor_indices(u).items():
            alt = d + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(frontier, (alt, graph.identifier_at(v), v))

    logger.debug("Dijkstra from %s settled %d of %d nodes", source, settled, n)

    ident = graph.identifier_at
    return ShortestPathResult(
        source=source,
        distances={ident(i): dist[i] for i in range(n)},
        predecessors={ident(i): ident(p) for i, p in enumerate(prev) if p >= 0},
    )


# ---------------------------------------------------------------------------
# Path Reconstruction
# ---------------------------------------------------------------------------
def reconstruct_path(
    predecessors: Mapping[str, str], source: str, target: str
) -> list[str]:
    """Walk predecessor links back from target to source.

    Returns:
        Node identifiers ordered from source to target. ``[source]`` when
        source == target (the map is not consulted).

    Raises:
        NoPathFoundError: If the walk hits a node without predecessor, or
            loops, before reaching source
    """
    if source == target:
        return [source]

    path = [target]
    seen = {target}
    current = target
    while current != source:
        previous = predecessors.get(current)
        if previous is None or previous in seen:
            raise NoPathFoundError(source, target)
        path.append(previous)
        seen.add(previous)
        current = previous

    path.reverse()
    return path


# ---------------------------------------------------------------------------
# Emergency Route
# ---------------------------------------------------------------------------
def route_to_nearest_center(
    graph: NetworkGraph, site: Site, centers: Sequence[EmergencyCenter]
) -> EmergencyRoute:
    """Shortest backbone route from site to its geographically nearest center.

    The center is chosen by straight-line distance; the route follows the
    graph.

    Raises:
        EmptyCandidateSetError: If centers is empty
        UnknownStartNodeError: If site is not in the graph
        NoPathFoundError: If the nearest center is unreachable through the graph
    """
    center = find_nearest_emergency_center(site, centers)
    result = shortest_path(graph, site.identifier)

    if not result.is_reachable(center.identifier):
        raise NoPathFoundError(site.identifier, center.identifier)

    path = result.path_to(center.identifier)
    logger.debug(
        "Route %s -> %s: %d hops, %.2f",
        site.identifier,
        center.identifier,
        len(path) - 1,
        result.distance_to(center.identifier),
    )
    return EmergencyRoute(
        site=site.identifier,
        center=center.identifier,
        path=tuple(path),
        total_distance=result.distance_to(center.identifier),
    )
