"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple

Route = Tuple[str, ...]


class CostPolicy(str, Enum):
    """How the weight priced on each leg between centers is chosen."""

    PER_STOP = "per_stop"
    CUMULATIVE = "cumulative"


class ErrorKind(str, Enum):
    INVALID_ORDER_FORMAT = "invalid_order_format"
    NO_RECOGNIZED_PRODUCTS = "no_recognized_products"
    ROUTE_LIMIT_EXCEEDED = "route_limit_exceeded"
    COST_OUT_OF_RANGE = "cost_out_of_range"
    EMPTY_ROUTE_SET = "empty_route_set"


@dataclass(frozen=True, slots=True)
class OrderLine:
    product: str
    quantity: float
    center: str
    unit_weight: float
    total_weight: float


@dataclass(slots=True)
class ResolvedOrder:
    required_centers: Route
    order_details: List[OrderLine]
    skipped_products: List[str] = field(default_factory=list)

    @property
    def total_weight(self) -> float:
        return sum(line.total_weight for line in self.order_details)


@dataclass(frozen=True, slots=True)
class RouteCandidate:
    route: Route
    cost: float


@dataclass(slots=True)
class RouteQuote:
    route: Route
    cost: float
    rounded_cost: float
    evaluated_routes: int
    policy: CostPolicy
    candidates: List[RouteCandidate] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CoreError:
    """Error outcome returned by the core instead of raising."""

    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)


class OrderError(CoreError):
    __slots__ = ()


class RouteError(CoreError):
    __slots__ = ()
