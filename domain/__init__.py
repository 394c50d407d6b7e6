"""Emergency Routing Domain Layer.

This package contains the core business logic organized by bounded contexts:
- network: Sites, hubs, emergency centers and the weighted backbone graph
- proximity: Euclidean distance and nearest-neighbor search
- routing: Shortest paths through the backbone, path reconstruction
"""

# Imports alphabetized per project style (isort)
from domain import network, proximity, routing

__all__ = ["network", "proximity", "routing"]
