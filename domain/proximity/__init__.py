"""Proximity Bounded Context.

Responsible for flat-plane distance and nearest-neighbor queries:
- Services: euclidean_distance, find_nearest, find_nearest_n
"""
