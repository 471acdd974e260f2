"""Route pricing under the stepped weight/distance tariff."""

from __future__ import annotations

import math
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ...models.domain import Catalog, Tariff
from .models import CostPolicy, OrderLine, Route


def segment_cost(weight: float, distance: float, tariff: Tariff | None = None) -> float:
    """Price one leg carrying ``weight`` over ``distance``."""
    tariff = tariff or Tariff()
    base = tariff.base_rate * distance
    extra = max(0.0, weight - tariff.free_weight)
    surcharge = math.ceil(extra / tariff.weight_block) * tariff.surcharge_rate * distance
    return base + surcharge


def round_cost(cost: float) -> float:
    """Round to cents, ties away from zero."""
    return float(Decimal(repr(cost)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def weight_by_center(order_details: Sequence[OrderLine]) -> dict[str, float]:
    weights: dict[str, float] = defaultdict(float)
    for line in order_details:
        weights[line.center] += line.total_weight
    return dict(weights)


def route_cost(
    route: Route,
    order_details: Sequence[OrderLine],
    total_weight: float,
    catalog: Catalog,
    policy: CostPolicy = CostPolicy.PER_STOP,
) -> float:
    """Total cost of visiting ``route`` in order and delivering to the destination.

    Reaching the first center is free. With ``PER_STOP`` the leg into each
    center is priced on the weight collected at that center; with
    ``CUMULATIVE`` it is priced on the weight already on board. The final leg
    always carries ``total_weight`` from the last center to the destination.
    """
    if not route:
        raise ValueError("Cannot price an empty route.")

    collected = weight_by_center(order_details)
    tariff = catalog.tariff
    total = 0.0
    on_board = 0.0
    previous: str | None = None

    for center in route:
        center_weight = collected.get(center, 0.0)
        if policy is CostPolicy.PER_STOP:
            distance = catalog.distance(previous, center) if previous is not None else 0.0
            if center_weight > 0:
                total += segment_cost(center_weight, distance, tariff)
        elif previous is not None:
            total += segment_cost(on_board, catalog.distance(previous, center), tariff)
        on_board += center_weight
        previous = center

    total += segment_cost(total_weight, catalog.distance(previous, catalog.destination), tariff)
    return total
