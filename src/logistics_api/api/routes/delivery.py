"""Delivery cost endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from ...data.catalog_repository import get_catalog
from ...models.domain import Catalog
from ...schemas.delivery import CatalogResponse, DeliveryQuoteResponse, ErrorResponse, TariffModel
from ...services.routing.models import CoreError, CostPolicy, ErrorKind
from ...services.routing.service import quote_delivery

router = APIRouter(tags=["delivery"])

ERROR_STATUS = {
    ErrorKind.INVALID_ORDER_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NO_RECOGNIZED_PRODUCTS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ROUTE_LIMIT_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.COST_OUT_OF_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EMPTY_ROUTE_SET: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: CoreError) -> JSONResponse:
    status_code = ERROR_STATUS.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        # Internal failures keep their details out of the response.
        content = {"error": "Internal server error", "kind": error.kind.value}
    else:
        content = {"error": error.message, "kind": error.kind.value, **error.details}
    return JSONResponse(status_code=status_code, content=content)


@router.post(
    "/calculate-delivery-cost",
    response_model=DeliveryQuoteResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def calculate_delivery_cost(
    order: Any = Body(default=None),
    policy: Optional[CostPolicy] = Query(default=None, description="Weight accumulation policy."),
    include_candidates: bool = Query(default=False, description="List every evaluated route."),
    catalog: Catalog = Depends(get_catalog),
):
    result = quote_delivery(order, catalog=catalog, policy=policy, include_candidates=include_candidates)
    if isinstance(result, CoreError):
        return error_response(result)
    return result


@router.get("/catalog", response_model=CatalogResponse, status_code=status.HTTP_200_OK)
def get_catalog_tables(catalog: Catalog = Depends(get_catalog)) -> CatalogResponse:
    return CatalogResponse(
        centers=list(catalog.centers),
        destination=catalog.destination,
        distances={center: dict(row) for center, row in catalog.distances.items()},
        inventory={center: dict(row) for center, row in catalog.inventory.items()},
        tariff=TariffModel(**asdict(catalog.tariff)),
    )
