"""Reference network used by scripts and tests.

Location: shared/ (not tests/) so scripts/route_report.py can use it without
a scripts->tests dependency.

Plain tuples only: this package stays free of domain imports. Adapters turn
the records into domain entities.
"""

from __future__ import annotations

# (identifier, x, y)
SAMPLE_SITES: list[tuple[str, float, float]] = [
    ("TS1", 10.0, 20.0),
    ("TS2", 25.0, 35.0),
    ("TS3", 40.0, 50.0),
]

SAMPLE_HUBS: list[tuple[str, float, float]] = [
    ("H1", 12.0, 22.0),
    ("H2", 28.0, 38.0),
    ("H3", 45.0, 55.0),
    ("H4", 50.0, 60.0),
    ("H5", 5.0, 15.0),
]

SAMPLE_CENTERS: list[tuple[str, float, float]] = [
    ("EC1", 15.0, 25.0),
    ("EC2", 30.0, 40.0),
    ("EC3", 35.0, 45.0),
]

SAMPLE_ENTITY_COUNT: int = len(SAMPLE_SITES) + len(SAMPLE_HUBS) + len(SAMPLE_CENTERS)
