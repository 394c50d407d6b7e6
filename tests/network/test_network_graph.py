"""Tests for NetworkGraph (arena-backed undirected weighted graph)."""

from __future__ import annotations

import math

import pytest

from domain.network.errors import GraphFrozenError
from domain.network.graph import NetworkGraph


# ===========================================================================
# AddNode
# ===========================================================================
def test_add_node_inserts_isolated_node():
    """TC-001: New node has no neighbors."""
    graph = NetworkGraph()
    graph.add_node("H1")

    assert "H1" in graph
    assert graph.nodes == frozenset({"H1"})
    assert dict(graph.neighbors("H1")) == {}


def test_add_node_is_idempotent():
    """TC-002: Second AddNode leaves nodes and adjacency unchanged."""
    graph = NetworkGraph()
    graph.add_edge("H1", "H2", 3.0)
    first = graph.add_node("H1")

    second = graph.add_node("H1")

    assert first == second
    assert len(graph) == 2
    assert dict(graph.neighbors("H1")) == {"H2": 3.0}


def test_add_node_rejects_empty_identifier():
    with pytest.raises(ValueError, match="must not be empty"):
        NetworkGraph().add_node("")


# ===========================================================================
# AddEdge
# ===========================================================================
def test_add_edge_is_symmetric():
    """TC-003: Neighbors[a][b] == Neighbors[b][a] == w."""
    graph = NetworkGraph()
    graph.add_edge("TS1", "H1", 2.5)

    assert graph.neighbors("TS1")["H1"] == 2.5
    assert graph.neighbors("H1")["TS1"] == 2.5
    assert graph.weight("H1", "TS1") == 2.5
    assert graph.has_edge("H1", "TS1")


def test_add_edge_inserts_missing_endpoints():
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)

    assert graph.nodes == frozenset({"A", "B"})


def test_add_edge_upsert_overwrites_weight():
    """TC-004: Re-adding a pair overwrites, in both directions, without new edges."""
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)
    graph.add_edge("B", "A", 4.0)

    assert graph.weight("A", "B") == 4.0
    assert graph.weight("B", "A") == 4.0
    assert graph.edge_count == 1


def test_add_edge_rejects_self_loop():
    with pytest.raises(ValueError, match="Self-loop"):
        NetworkGraph().add_edge("H1", "H1", 0.0)


@pytest.mark.parametrize("weight", [-1.0, math.inf, math.nan])
def test_add_edge_rejects_invalid_weight(weight):
    """TC-005: Dijkstra needs finite, non-negative weights."""
    graph = NetworkGraph()

    with pytest.raises(ValueError, match="finite and >= 0"):
        graph.add_edge("A", "B", weight)

    assert len(graph) == 0


def test_zero_weight_edge_allowed():
    """Coincident endpoints give distance 0."""
    graph = NetworkGraph()
    graph.add_edge("A", "B", 0.0)

    assert graph.weight("A", "B") == 0.0


# ===========================================================================
# Queries
# ===========================================================================
def test_neighbors_view_is_read_only():
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)

    with pytest.raises(TypeError):
        graph.neighbors("A")["C"] = 2.0  # type: ignore[index]


def test_unknown_node_queries():
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)

    assert not graph.has_edge("A", "Z")
    with pytest.raises(KeyError):
        graph.neighbors("Z")
    with pytest.raises(KeyError):
        graph.weight("A", "Z")


def test_edges_yields_each_edge_once_in_insertion_order():
    """TC-006: Undirected edges reported once, earlier-inserted endpoint first."""
    graph = NetworkGraph()
    graph.add_edge("TS1", "H1", 1.0)
    graph.add_edge("H1", "H5", 2.0)
    graph.add_edge("H5", "TS1", 3.0)

    assert list(graph.edges()) == [
        ("TS1", "H1", 1.0),
        ("TS1", "H5", 3.0),
        ("H1", "H5", 2.0),
    ]
    assert graph.edge_count == 3


def test_arena_accessors_round_trip():
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.5)
    ia, ib = graph.index_of("A"), graph.index_of("B")

    assert graph.identifier_at(ia) == "A"
    assert dict(graph.neighbor_indices(ia)) == {ib: 1.5}


# ===========================================================================
# Freeze
# ===========================================================================
def test_frozen_graph_rejects_mutation():
    """TC-007: Read-only after construction."""
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)
    graph.freeze()

    assert graph.frozen
    with pytest.raises(GraphFrozenError):
        graph.add_edge("A", "C", 1.0)
    with pytest.raises(GraphFrozenError):
        graph.add_node("C")
    assert graph.nodes == frozenset({"A", "B"})


def test_frozen_graph_add_existing_node_is_noop():
    graph = NetworkGraph()
    graph.add_node("A")
    graph.freeze()

    assert graph.add_node("A") == graph.index_of("A")


def test_repr_reports_size_and_state():
    graph = NetworkGraph()
    graph.add_edge("A", "B", 1.0)

    assert repr(graph) == "NetworkGraph(nodes=2, edges=1, open)"
