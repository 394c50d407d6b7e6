"""Network Bounded Context - NetworkGraph.

Undirected weighted graph keyed by entity identifiers.

Storage is a dense arena: every node gets an integer index at insertion,
adjacency is held per index as ``{neighbor_index: weight}``. Identifier
lookups happen once at the API boundary; the shortest-path solver walks
indices directly.

Invariants:
    NG-1: adjacency is symmetric (a->b with w implies b->a with w)
    NG-2: every neighbor index refers to an existing node
    NG-3: weights are finite and non-negative
    NG-4: no self-loops
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from domain.network.errors import GraphFrozenError


class NetworkGraph:
    """Mutable-until-frozen undirected graph.

    Created empty, populated by the network builder in a single pass, then
    frozen. Once frozen any mutation raises GraphFrozenError, so several
    solver runs may share the instance safely.
    """

    def __init__(self) -> None:
        self._ids: list[str] = []
        self._index: dict[str, int] = {}
        self._adjacency: list[dict[int, float]] = []
        self._edge_count = 0
        self._frozen = False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_node(self, node_id: str) -> int:
        """Insert node_id if absent and return its arena index (idempotent)."""
        existing = self._index.get(node_id)
        if existing is not None:
            return existing
        self._check_mutable()
        if not node_id:
            raise ValueError("Node identifier must not be empty")
        index = len(self._ids)
        self._ids.append(node_id)
        self._index[node_id] = index
        self._adjacency.append({})
        return index

    def add_edge(self, a: str, b: str, weight: float) -> None:
        """Upsert an undirected edge, overwriting any prior weight for the pair."""
        self._check_mutable()
        if a == b:
            raise ValueError(f"Self-loop not allowed on {a!r}")
        if math.isnan(weight) or math.isinf(weight) or weight < 0:
            raise ValueError(f"Edge weight must be finite and >= 0, got {weight}")
        ia = self.add_node(a)
        ib = self.add_node(b)
        if ib not in self._adjacency[ia]:
            self._edge_count += 1
        self._adjacency[ia][ib] = weight
        self._adjacency[ib][ia] = weight

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; build a new one instead")

    # ------------------------------------------------------------------
    # Identifier-level queries
    # ------------------------------------------------------------------
    @property
    def nodes(self) -> frozenset[str]:
        return frozenset(self._ids)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def neighbors(self, node_id: str) -> Mapping[str, float]:
        """Read-only view of ``{neighbor_id: weight}``.

        Raises:
            KeyError: If node_id is not in the graph
        """
        adjacency = self._adjacency[self._index[node_id]]
        return MappingProxyType({self._ids[j]: w for j, w in adjacency.items()})

    def has_edge(self, a: str, b: str) -> bool:
        ia, ib = self._index.get(a), self._index.get(b)
        if ia is None or ib is None:
            return False
        return ib in self._adjacency[ia]

    def weight(self, a: str, b: str) -> float:
        """Weight of edge a-b.

        Raises:
            KeyError: If either node or the edge does not exist
        """
        return self._adjacency[self._index[a]][self._index[b]]

    def edges(self) -> Iterator[tuple[str, str, float]]:
        """Yield each undirected edge once as (a, b, weight), a inserted before b."""
        for i, adjacency in enumerate(self._adjacency):
            for j, w in adjacency.items():
                if i < j:
                    yield self._ids[i], self._ids[j], w

    # ------------------------------------------------------------------
    # Arena access (solver hot loop)
    # ------------------------------------------------------------------
    def index_of(self, node_id: str) -> int:
        """Arena index of node_id.

        Raises:
            KeyError: If node_id is not in the graph
        """
        return self._index[node_id]

    def identifier_at(self, index: int) -> str:
        return self._ids[index]

    def neighbor_indices(self, index: int) -> Mapping[int, float]:
        """Raw ``{neighbor_index: weight}`` for index; callers must not mutate it."""
        return self._adjacency[index]

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"NetworkGraph(nodes={len(self._ids)}, edges={self._edge_count}, {state})"
