"""Sample data adapter for NetworkRepository.

Serves the reference network defined in shared/sample_network.py. Useful for
demos and as a known-good input in tests.
"""

from __future__ import annotations

import logging

from domain.network.value_objects import EmergencyCenter, Hub, NetworkData, Site
from shared.sample_network import SAMPLE_CENTERS, SAMPLE_HUBS, SAMPLE_SITES

from .records import to_entities

logger = logging.getLogger(__name__)


class SampleNetworkAdapter:
    """Infrastructure adapter returning the built-in reference network."""

    def load_network(self) -> NetworkData:
        data = NetworkData(
            sites=to_entities(Site, SAMPLE_SITES),
            hubs=to_entities(Hub, SAMPLE_HUBS),
            centers=to_entities(EmergencyCenter, SAMPLE_CENTERS),
        )
        logger.debug("Sample network: %d entities", data.entity_count())
        return data
