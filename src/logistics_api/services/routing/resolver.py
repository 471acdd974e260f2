"""Turn an incoming order into order lines and the centers to visit."""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any, Mapping

from ...models.domain import Catalog
from .models import ErrorKind, OrderError, OrderLine, ResolvedOrder

EXAMPLE_ORDER = {"A": 2, "D": 1}


def _invalid(message: str) -> OrderError:
    return OrderError(
        kind=ErrorKind.INVALID_ORDER_FORMAT,
        message=message,
        details={"example": dict(EXAMPLE_ORDER)},
    )


def _is_quantity(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def resolve_order(order: Any, catalog: Catalog) -> ResolvedOrder | OrderError:
    """Assign every ordered product to its source center.

    Each product is sourced from the first center, in catalog order, that
    stocks it. Products no center stocks are skipped and reported in
    ``skipped_products``; lines with a quantity of zero or less are ignored.
    """
    if not isinstance(order, Mapping) or not order:
        return _invalid("Invalid order format. Please provide a valid order object.")

    for product, quantity in order.items():
        if not _is_quantity(quantity):
            return _invalid(f"Invalid quantity {quantity!r} for product {product}.")

    logging.info(f"Processing order: {dict(order)}")

    required: dict[str, None] = {}
    details: list[OrderLine] = []
    skipped: list[str] = []
    running_weight = 0.0
    for product, quantity in order.items():
        if quantity <= 0:
            continue
        source = catalog.find_source(product)
        if source is None:
            logging.warning(f"Product {product} not found in inventory")
            skipped.append(product)
            continue
        center, unit_weight = source
        line_weight = unit_weight * quantity
        running_weight += line_weight
        if not math.isfinite(running_weight):
            return _invalid(f"Quantity {quantity!r} for product {product} exceeds the weight the tariff can price.")
        required.setdefault(center, None)
        details.append(
            OrderLine(
                product=product,
                quantity=quantity,
                center=center,
                unit_weight=unit_weight,
                total_weight=line_weight,
            )
        )

    logging.info(f"Required centers: {list(required)}")
    return ResolvedOrder(required_centers=tuple(required), order_details=details, skipped_products=skipped)
