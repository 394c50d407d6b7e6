"""Network Bounded Context - Domain Services.

Builds the weighted backbone graph from site, hub and emergency center
lists. NO I/O operations - entity lists are supplied by infrastructure
adapters implementing domain.network.repositories.NetworkRepository.

Connectivity rules (counts configurable via ConnectivityRules):
    R-1: each Site links to its nearest Hub
    R-2: each Hub links to its two nearest *other* Hubs
    R-3: each EmergencyCenter links to its five nearest Hubs
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from domain.network.errors import BuildError, InvalidEntityError
from domain.network.graph import NetworkGraph
from domain.network.value_objects import (
    UNSET_LOCATION,
    ConnectivityRules,
    EmergencyCenter,
    Hub,
    NetworkEntity,
    Site,
)
from domain.proximity.errors import ProximityError
from domain.proximity.services import euclidean_distance, find_nearest_hubs

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Entity Validation
# ---------------------------------------------------------------------------
def validate_entities(
    sites: Sequence[Site],
    hubs: Sequence[Hub],
    centers: Sequence[EmergencyCenter],
) -> None:
    """Check entity variants, per-entity invariants and identifier uniqueness.

    Per-entity invariants (non-empty identifier, location set) are enforced
    when the entity is constructed; they are checked again here for entities
    built with ``model_construct``, which skips validation.

    Raises:
        InvalidEntityError: On a wrong entity variant, a blank identifier, an
            unset location or a duplicate identifier
    """
    seen: dict[str, str] = {}
    groups: tuple[tuple[type[NetworkEntity], Iterable[NetworkEntity]], ...] = (
        (Site, sites),
        (Hub, hubs),
        (EmergencyCenter, centers),
    )
    for expected, entities in groups:
        for entity in entities:
            if not isinstance(entity, expected):
                raise InvalidEntityError(
                    getattr(entity, "identifier", ""),
                    f"expected {expected.kind}, got {type(entity).__name__}",
                )
            if not entity.identifier.strip():
                raise InvalidEntityError(
                    entity.identifier, f"{entity.kind} identifier must not be empty"
                )
            if entity.location == UNSET_LOCATION:
                raise InvalidEntityError(
                    entity.identifier, f"{entity.kind} has no location set"
                )
            previous = seen.get(entity.identifier)
            if previous is not None:
                raise InvalidEntityError(
                    entity.identifier,
                    f"identifier already used by a {previous}",
                )
            seen[entity.identifier] = entity.kind


# ---------------------------------------------------------------------------
# Graph Construction
# ---------------------------------------------------------------------------
def _link(graph: NetworkGraph, entity: NetworkEntity, hub: Hub) -> None:
    """Add the entity-hub edge weighted by Euclidean distance.

    Raises:
        BuildError: If the graph rejects the edge (e.g. non-finite weight)
    """
    weight = euclidean_distance(entity.location, hub.location)
    try:
        graph.add_edge(entity.identifier, hub.identifier, weight)
    except ValueError as e:
        raise BuildError(
            f"Cannot link {entity.identifier} to {hub.identifier}: {e}"
        ) from e


def _peer_hubs(hub: Hub, hubs: Sequence[Hub], count: int) -> list[Hub]:
    """The count nearest hubs other than hub itself.

    Excludes by identifier, not by position: with coincident coordinates the
    hub is not guaranteed to come first in the nearest list.
    """
    nearest = find_nearest_hubs(hub.location, hubs, count + 1)
    peers = [h for h in nearest if h.identifier != hub.identifier]
    return peers[:count]


def build_network_graph(
    sites: Sequence[Site],
    hubs: Sequence[Hub],
    centers: Sequence[EmergencyCenter],
    rules: ConnectivityRules | None = None,
) -> NetworkGraph:
    """Build and freeze the backbone graph.

    Args:
        sites: Telecom sites, each linked to its nearest hub(s)
        hubs: Backbone hubs, each linked to its nearest peer hubs
        centers: Emergency centers, each linked to their nearest hubs
        rules: Link counts per category; defaults to ConnectivityRules()

    Returns:
        Frozen NetworkGraph with every entity as a node

    Raises:
        BuildError: On the first invalid entity, unsatisfiable rule or
            rejected edge, chained to the underlying InvalidEntityError,
            ProximityError or ValueError. No partial graph is returned.

    Example:
        >>> graph = build_network_graph(sites, hubs, centers)
        >>> result = shortest_path(graph, "TS1")
    """
    rules = rules or ConnectivityRules()

    try:
        validate_entities(sites, hubs, centers)
    except InvalidEntityError as e:
        raise BuildError(f"Invalid network input: {e}") from e

    graph = NetworkGraph()

    # R-1: site -> nearest hub(s)
    for site in sites:
        try:
            nearest = find_nearest_hubs(site.location, hubs, rules.site_hub_links)
        except ProximityError as e:
            raise BuildError(f"Error finding nearest hub for {site.identifier}: {e}") from e
        for hub in nearest:
            _link(graph, site, hub)

    # R-2: hub -> nearest peer hubs
    for hub in hubs:
        try:
            peers = _peer_hubs(hub, hubs, rules.hub_peer_links)
        except ProximityError as e:
            raise BuildError(f"Error finding peer hubs for {hub.identifier}: {e}") from e
        for peer in peers:
            if peer.location == hub.location:
                logger.warning(
                    "Hubs %s and %s share location (%s, %s)",
                    hub.identifier,
                    peer.identifier,
                    hub.location.x,
                    hub.location.y,
                )
            _link(graph, hub, peer)

    # R-3: center -> nearest hubs
    for center in centers:
        try:
            nearest = find_nearest_hubs(center.location, hubs, rules.center_hub_links)
        except ProximityError as e:
            raise BuildError(f"Error finding nearest hubs for {center.identifier}: {e}") from e
        for hub in nearest:
            _link(graph, center, hub)

    graph.freeze()
    logger.debug(
        "Built network graph: %d nodes, %d edges", len(graph), graph.edge_count
    )
    return graph
