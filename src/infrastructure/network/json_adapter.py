"""JSON file adapter for NetworkRepository.

Loads site, hub and emergency center lists from a JSON document and returns
a domain NetworkData Value Object.

Expected document shape::

    {
      "sites":   [{"id": "TS1", "x": 10, "y": 20}, ...],
      "hubs":    [{"id": "H1",  "x": 12, "y": 22}, ...],
      "centers": [{"id": "EC1", "x": 15, "y": 25}, ...]
    }

Lifecycle:
1) Validate path (exists, extension allowlist, not a symlink, not empty)
2) Parse JSON and check the document shape
3) Optionally enforce the entity budget
4) Convert records to entities (InvalidEntityError on bad entries)
5) Return NetworkData
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from domain.network.errors import InvalidNetworkFileError
from domain.network.value_objects import EmergencyCenter, Hub, NetworkData, Site

from .records import to_entities

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_SECTIONS = ("sites", "hubs", "centers")


def _records(section: str, raw: Any) -> list[tuple[str, float, float]]:
    """Check one section's shape and flatten it to (id, x, y) tuples."""
    if not isinstance(raw, list):
        raise InvalidNetworkFileError(
            f"Section {section!r} must be a list, got {type(raw).__name__}"
        )
    records = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise InvalidNetworkFileError(f"{section}[{position}] must be an object")
        missing = [key for key in ("id", "x", "y") if key not in entry]
        if missing:
            raise InvalidNetworkFileError(
                f"{section}[{position}] missing keys: {', '.join(missing)}"
            )
        records.append((entry["id"], entry["x"], entry["y"]))
    return records


class JsonNetworkAdapter:
    """Infrastructure adapter for loading a network from a JSON file.

    Parameters
    ----------
    file_path: Path | str
        Location of the JSON document.
    max_entities: int | None
        Optional cap on the total number of entities. Exceeding it raises
        InvalidNetworkFileError before any entity is built.
    """

    def __init__(self, file_path: Path | str, max_entities: int | None = None) -> None:
        self.file_path = Path(file_path)
        self.max_entities = max_entities

    def load_network(self) -> NetworkData:
        path = self.file_path

        # Missing files surface as FileNotFoundError
        if not path.exists():
            raise FileNotFoundError(str(path))

        if path.suffix.lower() != ".json":
            raise InvalidNetworkFileError(f"Unsupported file extension: {path.suffix}")

        try:
            if path.is_symlink():
                raise InvalidNetworkFileError("Symlinks are not permitted")
            if path.stat().st_size == 0:
                raise InvalidNetworkFileError("Empty file")
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            # Log only filename, errno and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidNetworkFileError(f"Malformed JSON: {e}") from e

        if not isinstance(document, dict):
            raise InvalidNetworkFileError("Top-level JSON value must be an object")

        sections = {name: _records(name, document.get(name, [])) for name in _SECTIONS}

        total = sum(len(records) for records in sections.values())
        if self.max_entities is not None and total > self.max_entities:
            raise InvalidNetworkFileError(
                f"File holds {total} entities, budget is {self.max_entities}"
            )

        data = NetworkData(
            sites=to_entities(Site, sections["sites"]),
            hubs=to_entities(Hub, sections["hubs"]),
            centers=to_entities(EmergencyCenter, sections["centers"]),
        )

        if not data.hubs:
            logger.warning("Network %s: no hubs defined", path.name)
        logger.info(
            "Network %s: loaded %d sites, %d hubs, %d centers",
            path.name,
            len(data.sites),
            len(data.hubs),
            len(data.centers),
        )
        return data
