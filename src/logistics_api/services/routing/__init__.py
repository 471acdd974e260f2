"""Route resolution, enumeration, costing and optimisation."""

from .cost import route_cost, segment_cost
from .enumerator import enumerate_routes, iter_routes
from .models import CostPolicy, ErrorKind, OrderError, RouteError
from .optimizer import optimize_route
from .resolver import resolve_order

__all__ = [
    "resolve_order",
    "enumerate_routes",
    "iter_routes",
    "segment_cost",
    "route_cost",
    "optimize_route",
    "CostPolicy",
    "ErrorKind",
    "OrderError",
    "RouteError",
]
