"""Conversion of raw (identifier, x, y) records into domain entities."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import ValidationError

from domain.network.errors import InvalidEntityError
from domain.network.value_objects import Coordinate, NetworkEntity


def to_entities(
    entity_type: type[NetworkEntity], records: Iterable[tuple[str, float, float]]
) -> tuple[NetworkEntity, ...]:
    """Build entity_type instances, translating validation failures.

    Raises:
        InvalidEntityError: If a record has an empty identifier, an unset
            (origin) location, or non-numeric / non-finite coordinates
    """
    entities = []
    for identifier, x, y in records:
        try:
            entities.append(
                entity_type(identifier=identifier, location=Coordinate(x=x, y=y))
            )
        except ValidationError as e:
            reason = "; ".join(err["msg"] for err in e.errors())
            raise InvalidEntityError(str(identifier), reason) from e
    return tuple(entities)
