import itertools

import pytest

from logistics_api.data.catalog_repository import get_catalog
from logistics_api.models.domain import Tariff
from logistics_api.services.routing.cost import round_cost, route_cost, segment_cost, weight_by_center
from logistics_api.services.routing.models import CostPolicy
from logistics_api.services.routing.resolver import resolve_order


def _resolved(order):
    return resolve_order(order, get_catalog())


@pytest.mark.parametrize(
    "weight, distance, expected",
    [
        (0.0, 3.0, 30.0),
        (0.5, 3.0, 30.0),
        (0.6, 3.0, 54.0),
        (5.5, 2.0, 36.0),
        (5.6, 2.0, 52.0),
        (6.0, 4.0, 104.0),
        (15.5, 2.5, 85.0),
        (10.0, 0.0, 0.0),
    ],
)
def test_segment_cost_tariff_steps(weight, distance, expected):
    assert segment_cost(weight, distance) == pytest.approx(expected)


def test_segment_cost_uses_given_tariff():
    tariff = Tariff(base_rate=1.0, surcharge_rate=2.0, free_weight=0.0, weight_block=1.0)

    assert segment_cost(3.0, 2.0, tariff) == pytest.approx(2.0 + 3 * 2.0 * 2.0)


def test_segment_cost_is_monotonic():
    weights = [0, 0.25, 0.5, 0.51, 3, 5.5, 5.51, 10, 12.5, 40]
    distances = [0, 0.5, 1, 2.5, 3, 10]

    for distance in distances:
        costs = [segment_cost(weight, distance) for weight in weights]
        assert costs == sorted(costs)
    for weight in weights:
        costs = [segment_cost(weight, distance) for distance in distances]
        assert costs == sorted(costs)


def test_single_center_pays_only_final_leg():
    resolved = _resolved({"A": 2})

    for policy in CostPolicy:
        cost = route_cost(("C1",), resolved.order_details, resolved.total_weight, get_catalog(), policy)
        assert cost == pytest.approx(104.0)


def test_weight_by_center_sums_lines():
    resolved = _resolved({"A": 1, "B": 2, "G": 4})

    assert weight_by_center(resolved.order_details) == {"C1": 7, "C3": 2.0}


PER_STOP_COSTS = {
    ("C1", "C2", "C3"): 234.0,
    ("C1", "C3", "C2"): 207.0,
    ("C2", "C1", "C3"): 176.0,
    ("C2", "C3", "C1"): 202.0,
    ("C3", "C1", "C2"): 223.0,
    ("C3", "C2", "C1"): 292.0,
}

CUMULATIVE_COSTS = {
    ("C1", "C2", "C3"): 258.0,
    ("C1", "C3", "C2"): 175.0,
    ("C2", "C1", "C3"): 272.0,
    ("C2", "C3", "C1"): 306.0,
    ("C3", "C1", "C2"): 159.0,
    ("C3", "C2", "C1"): 268.0,
}


@pytest.mark.parametrize(
    "policy, expected",
    [(CostPolicy.PER_STOP, PER_STOP_COSTS), (CostPolicy.CUMULATIVE, CUMULATIVE_COSTS)],
)
def test_three_center_route_costs(policy, expected):
    resolved = _resolved({"A": 1, "D": 1, "G": 1})
    catalog = get_catalog()

    for route in itertools.permutations(("C1", "C2", "C3")):
        cost = route_cost(route, resolved.order_details, resolved.total_weight, catalog, policy)
        assert cost == pytest.approx(expected[route]), route


def test_route_cost_is_pure():
    resolved = _resolved({"C": 1, "E": 2, "I": 3})
    catalog = get_catalog()
    route = ("C3", "C1", "C2")

    first = route_cost(route, resolved.order_details, resolved.total_weight, catalog)
    second = route_cost(route, list(reversed(resolved.order_details)), resolved.total_weight, catalog)

    assert first == second


def test_empty_route_cannot_be_priced():
    with pytest.raises(ValueError):
        route_cost((), [], 0.0, get_catalog())


@pytest.mark.parametrize(
    "cost, expected",
    [(0.125, 0.13), (0.124, 0.12), (176.0, 176.0), (10.005, 10.01), (3.14159, 3.14)],
)
def test_round_cost_takes_ties_half_up(cost, expected):
    assert round_cost(cost) == expected
