"""Built-in fulfillment catalog.

The centers, their stock and the distance table are fixed at build time.
"""

from __future__ import annotations

from functools import lru_cache

from ..config import settings
from ..models.domain import Catalog, Tariff

CENTER_DISTANCES: dict[str, dict[str, float]] = {
    "C1": {"C2": 3, "C3": 2, "L1": 4},
    "C2": {"C1": 3, "C3": 3, "L1": 2.5},
    "C3": {"C1": 2, "C2": 3, "L1": 3},
}

CENTER_INVENTORY: dict[str, dict[str, float]] = {
    "C1": {"A": 3, "B": 2, "C": 8},
    "C2": {"D": 12, "E": 25, "F": 15},
    "C3": {"G": 0.5, "H": 1, "I": 2},
}

SAMPLE_ORDER: dict[str, int] = {"A": 2, "D": 1, "G": 3}


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog, built once on first use."""
    return Catalog(
        distances=CENTER_DISTANCES,
        inventory=CENTER_INVENTORY,
        destination=settings.destination,
        tariff=Tariff(),
    )
