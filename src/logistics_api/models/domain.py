"""Domain models for the fulfillment catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class CatalogError(ValueError):
    """Raised when catalog tables break the lookup invariants."""


@dataclass(frozen=True, slots=True)
class Tariff:
    """Stepped per-distance tariff.

    A segment carrying ``w`` weight units over distance ``d`` costs
    ``base_rate * d`` plus ``surcharge_rate * d`` for every started
    ``weight_block`` above ``free_weight``.
    """

    base_rate: float = 10.0
    surcharge_rate: float = 8.0
    free_weight: float = 0.5
    weight_block: float = 5.0


def _freeze(table: Mapping[str, Mapping[str, float]]) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType({key: MappingProxyType(dict(row)) for key, row in table.items()})


@dataclass(frozen=True, slots=True)
class Catalog:
    """Fixed centers, their inventory and the distances between them.

    ``inventory`` maps center -> product -> unit weight and its key order is
    the scan order used when assigning a product to its source center.
    ``distances`` maps center -> (center | destination) -> distance.
    """

    distances: Mapping[str, Mapping[str, float]]
    inventory: Mapping[str, Mapping[str, float]]
    destination: str = "L1"
    tariff: Tariff = field(default_factory=Tariff)

    def __post_init__(self) -> None:
        object.__setattr__(self, "distances", _freeze(self.distances))
        object.__setattr__(self, "inventory", _freeze(self.inventory))
        self._validate()

    def _validate(self) -> None:
        seen: dict[str, str] = {}
        for center, products in self.inventory.items():
            if center not in self.distances:
                raise CatalogError(f"Center '{center}' has no distance table entry.")
            targets = [other for other in self.inventory if other != center] + [self.destination]
            missing = [target for target in targets if target not in self.distances[center]]
            if missing:
                raise CatalogError(f"Center '{center}' is missing distances to: {', '.join(missing)}")
            for target, distance in self.distances[center].items():
                if distance < 0:
                    raise CatalogError(f"Negative distance {center} -> {target}: {distance}")
            for product, weight in products.items():
                if weight <= 0:
                    raise CatalogError(f"Product '{product}' at '{center}' has non-positive weight {weight}")
                if product in seen:
                    logging.warning(
                        f"Product {product} is stocked at both {seen[product]} and {center}; "
                        f"{seen[product]} will be used as its source"
                    )
                    continue
                seen[product] = center

    @property
    def centers(self) -> tuple[str, ...]:
        return tuple(self.inventory)

    def distance(self, origin: str, target: str) -> float:
        if origin == target:
            return 0.0
        return self.distances[origin][target]

    def find_source(self, product: str) -> Optional[tuple[str, float]]:
        """Return ``(center, unit_weight)`` of the first center stocking ``product``."""
        for center, products in self.inventory.items():
            if product in products:
                return center, products[product]
        return None

    def available_products(self) -> dict[str, list[str]]:
        return {center: list(products) for center, products in self.inventory.items()}
