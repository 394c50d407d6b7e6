"""Routing Bounded Context.

Responsible for path finding over a built NetworkGraph:
- Value Objects: ShortestPathResult, EmergencyRoute
- Services: shortest_path (Dijkstra), reconstruct_path, route_to_nearest_center
"""
