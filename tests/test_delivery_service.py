import pytest

from logistics_api.config import settings
from logistics_api.schemas.delivery import DeliveryQuoteResponse
from logistics_api.services.routing.models import CostPolicy, ErrorKind, OrderError
from logistics_api.services.routing.service import quote_delivery, route_description


def test_quote_for_single_product():
    response = quote_delivery({"A": 2})

    assert isinstance(response, DeliveryQuoteResponse)
    assert response.minimumCost == 104.0
    assert response.optimalRoute == ["C1"]
    assert response.routeDescription == "C1 → L1"
    assert response.totalWeight == 6
    assert response.centersRequired == ["C1"]
    assert response.evaluatedRoutes == 1
    assert response.costPolicy == "per_stop"
    assert response.candidates is None
    assert response.orderDetails[0].model_dump() == {
        "product": "A",
        "quantity": 2,
        "center": "C1",
        "unitWeight": 3,
        "totalWeight": 6,
    }


def test_unknown_products_are_listed_alongside_quote():
    response = quote_delivery({"A": 1, "Z": 4})

    assert response.skippedProducts == ["Z"]
    assert [line.product for line in response.orderDetails] == ["A"]


def test_order_without_known_products():
    result = quote_delivery({"Z": 1, "A": 0})

    assert isinstance(result, OrderError)
    assert result.kind is ErrorKind.NO_RECOGNIZED_PRODUCTS
    assert result.details["availableProducts"]["C2"] == ["D", "E", "F"]
    assert result.details["receivedOrder"] == {"Z": 1, "A": 0}
    assert result.details["skippedProducts"] == ["Z"]


def test_invalid_order_is_passed_through():
    result = quote_delivery([])

    assert isinstance(result, OrderError)
    assert result.kind is ErrorKind.INVALID_ORDER_FORMAT


def test_policy_defaults_to_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "cost_policy", "cumulative")

    response = quote_delivery({"A": 1, "D": 1, "G": 1})

    assert response.costPolicy == "cumulative"
    assert response.optimalRoute == ["C3", "C1", "C2"]
    assert response.minimumCost == 159.0


def test_explicit_policy_wins_over_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "cost_policy", "cumulative")

    response = quote_delivery({"A": 1, "D": 1, "G": 1}, policy=CostPolicy.PER_STOP)

    assert response.optimalRoute == ["C2", "C1", "C3"]
    assert response.minimumCost == 176.0


def test_candidates_included_on_request():
    response = quote_delivery({"A": 1, "D": 1}, include_candidates=True)

    assert len(response.candidates) == 2
    assert {tuple(candidate.route) for candidate in response.candidates} == {("C1", "C2"), ("C2", "C1")}


def test_identical_orders_give_identical_quotes():
    order = {"C": 2, "E": 1, "I": 4}

    assert quote_delivery(order) == quote_delivery(order)


def test_route_description():
    assert route_description(("C2", "C1", "C3"), "L1") == "C2 → C1 → C3 → L1"
