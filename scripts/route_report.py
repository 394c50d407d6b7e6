#!/usr/bin/env python3
"""Print the emergency routing report for a telecom network.

Builds the backbone graph, lists its connections, then for every site shows
the nearest emergency center, the shortest path through the backbone and the
total distance.

Usage:
    python scripts/route_report.py                      # built-in sample network
    python scripts/route_report.py --input network.json
    python scripts/route_report.py --log-level DEBUG

Input format: see src/infrastructure/network/json_adapter.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from domain.network.errors import NetworkError
from domain.network.graph import NetworkGraph
from domain.network.repositories import NetworkRepository
from domain.network.services import build_network_graph
from domain.network.value_objects import NetworkData
from domain.proximity.errors import ProximityError
from domain.routing.errors import RoutingError
from domain.routing.services import route_to_nearest_center
from infrastructure.network import JsonNetworkAdapter, SampleNetworkAdapter


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--input",
        help="JSON network file (default: built-in sample network)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def print_connections(graph: NetworkGraph) -> None:
    print("Network Graph Connections:")
    for a, b, weight in graph.edges():
        print(f"{a} <--> {b} : {weight:.2f}")
    print()


def print_routes(graph: NetworkGraph, data: NetworkData) -> int:
    """Print one route block per site; return the number of failed sites."""
    failures = 0
    for site in data.sites:
        try:
            route = route_to_nearest_center(graph, site, data.centers)
        except (ProximityError, RoutingError) as e:
            print(f"Error routing {site.identifier}: {e}\n")
            failures += 1
            continue
        print(f"Nearest Emergency Center for {route.site} is {route.center}")
        print(f"Shortest path from {route.site} to {route.center}: {list(route.path)}")
        print(f"Total distance: {route.total_distance:.2f}\n")
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    repository: NetworkRepository = (
        JsonNetworkAdapter(args.input) if args.input else SampleNetworkAdapter()
    )

    try:
        data = repository.load_network()
        graph = build_network_graph(data.sites, data.hubs, data.centers)
    except (OSError, NetworkError) as e:
        print(f"Error building network graph: {e}", file=sys.stderr)
        return 2

    print_connections(graph)
    failures = print_routes(graph, data)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
