"""Network Bounded Context - Value Objects.

Immutable data structures describing the telecom topology.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
# dx*dx + dy*dy stays below float max (~1.8e308) for any two coordinates
MAX_COORDINATE = 1e150


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------
class Coordinate(BaseModel):
    """Point on the flat planning plane (Value Object).

    Equality is exact value equality, no tolerance. Pydantic frozen models
    compare by value and are hashable.

    Invariants:
        CO-1: |x|, |y| <= MAX_COORDINATE (squared distances stay finite)
    """

    x: float = Field(ge=-MAX_COORDINATE, le=MAX_COORDINATE, allow_inf_nan=False)
    y: float = Field(ge=-MAX_COORDINATE, le=MAX_COORDINATE, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    def is_origin(self) -> bool:
        return self.x == 0 and self.y == 0


# (0, 0) is the "location never set" sentinel used by data providers
UNSET_LOCATION = Coordinate(x=0.0, y=0.0)


# ---------------------------------------------------------------------------
# Network Entities
# ---------------------------------------------------------------------------
class NetworkEntity(BaseModel):
    """Identified node of the telecom network (Value Object).

    Invariants:
        NE-1: identifier is not empty (nor whitespace only)
        NE-2: location is not the UNSET_LOCATION sentinel

    Uniqueness of identifiers across a whole network is checked by
    domain.network.services.validate_entities, not here.
    """

    kind: ClassVar[str] = "entity"

    identifier: str
    location: Coordinate

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_entity(self) -> "NetworkEntity":
        if not self.identifier.strip():
            raise ValueError(f"{self.kind} identifier must not be empty")
        if self.location == UNSET_LOCATION:
            raise ValueError(f"{self.kind} {self.identifier!r} has no location set")
        return self

    @classmethod
    def at(cls, identifier: str, x: float, y: float):
        """Shorthand constructor: ``Hub.at("H1", 12, 22)``."""
        return cls(identifier=identifier, location=Coordinate(x=x, y=y))


class Site(NetworkEntity):
    """Telecom site that needs a route to an emergency center."""

    kind: ClassVar[str] = "site"


class Hub(NetworkEntity):
    """Backbone hub relaying traffic between sites and centers."""

    kind: ClassVar[str] = "hub"


class EmergencyCenter(NetworkEntity):
    """Emergency center reachable through the hub backbone."""

    kind: ClassVar[str] = "center"


# ---------------------------------------------------------------------------
# NetworkData
# ---------------------------------------------------------------------------
class NetworkData(BaseModel):
    """The three entity lists a data provider hands to the builder."""

    sites: tuple[Site, ...] = ()
    hubs: tuple[Hub, ...] = ()
    centers: tuple[EmergencyCenter, ...] = ()

    model_config = ConfigDict(frozen=True)

    def entity_count(self) -> int:
        return len(self.sites) + len(self.hubs) + len(self.centers)


# ---------------------------------------------------------------------------
# ConnectivityRules
# ---------------------------------------------------------------------------
class ConnectivityRules(BaseModel):
    """How many links the builder creates per entity category.

    Defaults are the production backbone rules: one hub per site, two peer
    hubs per hub, five hubs per emergency center.
    """

    site_hub_links: int = Field(default=1, ge=1)
    hub_peer_links: int = Field(default=2, ge=1)
    center_hub_links: int = Field(default=5, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid")
