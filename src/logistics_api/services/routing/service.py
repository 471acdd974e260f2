"""Delivery quote orchestration service."""

from __future__ import annotations

import logging
from typing import Any

from ...config import settings
from ...data.catalog_repository import get_catalog
from ...models.domain import Catalog
from ...schemas.delivery import DeliveryQuoteResponse, OrderLineModel, RouteCandidateModel
from .models import CoreError, CostPolicy, ErrorKind, OrderError, RouteQuote
from .optimizer import optimize_route
from .resolver import resolve_order


def route_description(route: tuple[str, ...], destination: str) -> str:
    return " → ".join((*route, destination))


def _build_response(
    quote: RouteQuote,
    resolved_lines: list,
    centers: tuple[str, ...],
    skipped: list[str],
    total_weight: float,
    catalog: Catalog,
    include_candidates: bool,
) -> DeliveryQuoteResponse:
    return DeliveryQuoteResponse(
        success=True,
        minimumCost=quote.rounded_cost,
        optimalRoute=list(quote.route),
        routeDescription=route_description(quote.route, catalog.destination),
        totalWeight=total_weight,
        orderDetails=[
            OrderLineModel(
                product=line.product,
                quantity=line.quantity,
                center=line.center,
                unitWeight=line.unit_weight,
                totalWeight=line.total_weight,
            )
            for line in resolved_lines
        ],
        centersRequired=list(centers),
        skippedProducts=skipped,
        costPolicy=quote.policy.value,
        evaluatedRoutes=quote.evaluated_routes,
        candidates=[
            RouteCandidateModel(route=list(candidate.route), cost=candidate.cost)
            for candidate in quote.candidates
        ]
        if include_candidates
        else None,
    )


def quote_delivery(
    order: Any,
    *,
    catalog: Catalog | None = None,
    policy: CostPolicy | None = None,
    include_candidates: bool = False,
) -> DeliveryQuoteResponse | CoreError:
    """Resolve ``order`` and price its cheapest route.

    Returns the response model on success or the core error describing why
    no quote could be produced.
    """
    catalog = catalog or get_catalog()
    policy = policy or CostPolicy(settings.cost_policy)

    resolved = resolve_order(order, catalog)
    if isinstance(resolved, OrderError):
        return resolved

    if not resolved.order_details:
        logging.info(f"No recognised products in order; skipped {resolved.skipped_products}")
        return OrderError(
            kind=ErrorKind.NO_RECOGNIZED_PRODUCTS,
            message="No valid products found in order",
            details={
                "availableProducts": catalog.available_products(),
                "receivedOrder": dict(order),
                "skippedProducts": list(resolved.skipped_products),
            },
        )

    quote = optimize_route(
        resolved.required_centers,
        resolved.order_details,
        catalog,
        policy,
        keep_candidates=include_candidates,
    )
    if isinstance(quote, CoreError):
        logging.error(f"Routing failed for centers {list(resolved.required_centers)}: {quote.message}")
        return quote

    return _build_response(
        quote,
        resolved.order_details,
        resolved.required_centers,
        resolved.skipped_products,
        resolved.total_weight,
        catalog,
        include_candidates,
    )
