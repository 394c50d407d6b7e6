"""Routing Bounded Context - Value Objects.

Results of shortest-path queries. Produced fresh per solver invocation and
never merged across invocations.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# ShortestPathResult
# ---------------------------------------------------------------------------
class ShortestPathResult(BaseModel):
    """Single-source shortest-path output (Value Object).

    Invariants:
        SP-1: distances[source] == 0
        SP-2: every predecessor key has a finite distance
    """

    source: str
    distances: dict[str, float]  # node -> min cumulative distance (inf if unreachable)
    predecessors: dict[str, str]  # node -> previous node on its shortest path

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_result(self) -> "ShortestPathResult":
        if self.distances.get(self.source) != 0:
            raise ValueError(f"Distance to source {self.source!r} must be 0")
        for node in self.predecessors:
            if math.isinf(self.distances.get(node, math.inf)):
                raise ValueError(f"Predecessor recorded for unreachable node {node!r}")
        return self

    def distance_to(self, node_id: str) -> float:
        return self.distances.get(node_id, math.inf)

    def is_reachable(self, node_id: str) -> bool:
        return not math.isinf(self.distance_to(node_id))

    def path_to(self, target: str) -> list[str]:
        """Ordered node identifiers from source to target.

        Raises:
            NoPathFoundError: If target is unreachable from source
        """
        from domain.routing.services import reconstruct_path

        return reconstruct_path(self.predecessors, self.source, target)


# ---------------------------------------------------------------------------
# EmergencyRoute
# ---------------------------------------------------------------------------
class EmergencyRoute(BaseModel):
    """Route from a site to its nearest emergency center (Value Object).

    Invariants:
        ER-1: path starts at site and ends at center
        ER-2: total_distance >= 0 and finite
    """

    site: str
    center: str
    path: tuple[str, ...]
    total_distance: float = Field(ge=0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_route(self) -> "EmergencyRoute":
        if not self.path:
            raise ValueError("Route path must not be empty")
        if self.path[0] != self.site:
            raise ValueError(f"Route must start at {self.site}, got {self.path[0]}")
        if self.path[-1] != self.center:
            raise ValueError(f"Route must end at {self.center}, got {self.path[-1]}")
        return self

    def hop_count(self) -> int:
        return len(self.path) - 1
