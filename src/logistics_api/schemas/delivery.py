"""Delivery cost request/response schemas."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class OrderLineModel(BaseModel):
    product: str
    quantity: Number
    center: str
    unitWeight: Number
    totalWeight: Number


class RouteCandidateModel(BaseModel):
    route: List[str]
    cost: float


class DeliveryQuoteResponse(BaseModel):
    success: bool = True
    minimumCost: float
    optimalRoute: List[str]
    routeDescription: str
    totalWeight: Number
    orderDetails: List[OrderLineModel]
    centersRequired: List[str]
    skippedProducts: List[str] = Field(default_factory=list, description="Products no center stocks.")
    costPolicy: str
    evaluatedRoutes: int
    candidates: Optional[List[RouteCandidateModel]] = Field(
        default=None,
        description="Every evaluated route with its cost, when requested.",
    )


class ErrorResponse(BaseModel):
    error: str
    kind: Optional[str] = None
    example: Optional[Dict[str, int]] = None
    availableProducts: Optional[Dict[str, List[str]]] = None
    receivedOrder: Optional[dict] = None
    skippedProducts: Optional[List[str]] = None
    centersRequired: Optional[List[str]] = None


class TariffModel(BaseModel):
    base_rate: float
    surcharge_rate: float
    free_weight: float
    weight_block: float


class CatalogResponse(BaseModel):
    centers: List[str]
    destination: str
    distances: Dict[str, Dict[str, float]]
    inventory: Dict[str, Dict[str, float]]
    tariff: TariffModel
