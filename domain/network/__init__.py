"""Network Bounded Context.

Responsible for the three-tier telecom topology:
- Value Objects: Coordinate, Site, Hub, EmergencyCenter, ConnectivityRules
- Entities: NetworkGraph
- Services: build_network_graph, validate_entities
"""
