"""Exhaustive search for the cheapest visiting order."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...config import settings
from ...models.domain import Catalog
from .cost import round_cost, route_cost
from .enumerator import iter_routes
from .models import CostPolicy, ErrorKind, OrderLine, RouteCandidate, RouteError, RouteQuote


def optimize_route(
    required_centers: Sequence[str],
    order_details: Sequence[OrderLine],
    catalog: Catalog,
    policy: CostPolicy = CostPolicy.PER_STOP,
    *,
    max_centers: int | None = None,
    keep_candidates: bool = False,
) -> RouteQuote | RouteError:
    """Price every permutation of ``required_centers`` and keep the cheapest.

    A route replaces the current best only when strictly cheaper, so ties go
    to the route enumerated first.
    The rounded cost takes ties half up, so 0.125 is presented as 0.13.
    """
    centers = tuple(required_centers)
    if not centers:
        return RouteError(kind=ErrorKind.EMPTY_ROUTE_SET, message="No centers to route through.")

    limit = max_centers if max_centers is not None else settings.max_route_centers
    if len(centers) > limit:
        return RouteError(
            kind=ErrorKind.ROUTE_LIMIT_EXCEEDED,
            message=f"Order requires {len(centers)} centers; at most {limit} can be routed.",
            details={"centersRequired": list(centers)},
        )

    total_weight = sum(line.total_weight for line in order_details)
    best_route = None
    best_cost = math.inf
    evaluated = 0
    candidates: list[RouteCandidate] = []

    for route in iter_routes(centers):
        cost = route_cost(route, order_details, total_weight, catalog, policy)
        evaluated += 1
        if not math.isfinite(cost):
            return RouteError(
                kind=ErrorKind.COST_OUT_OF_RANGE,
                message=f"Route {' -> '.join(route)} costs more than can be represented.",
                details={"centersRequired": list(centers)},
            )
        logging.debug(f"Route {' -> '.join(route)} costs: {cost}")
        if keep_candidates:
            candidates.append(RouteCandidate(route=route, cost=round_cost(cost)))
        if cost < best_cost:
            best_cost = cost
            best_route = route

    logging.info(f"Best of {evaluated} routes under {policy.value}: {' -> '.join(best_route)} ({best_cost:.2f})")
    return RouteQuote(
        route=best_route,
        cost=best_cost,
        rounded_cost=round_cost(best_cost),
        evaluated_routes=evaluated,
        policy=policy,
        candidates=candidates,
    )
