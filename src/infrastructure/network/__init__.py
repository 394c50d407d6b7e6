"""Infrastructure adapters for the network bounded context.

This module provides the infrastructure layer implementations of
NetworkRepository: the built-in sample network and a JSON file loader.

Adapters exported for simplified imports.
"""

from .json_adapter import JsonNetworkAdapter
from .sample_adapter import SampleNetworkAdapter

__all__ = ["JsonNetworkAdapter", "SampleNetworkAdapter"]
