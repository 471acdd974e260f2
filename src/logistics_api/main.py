"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routes import delivery, health
from .config import settings
from .data.catalog_repository import SAMPLE_ORDER, get_catalog
from .models.domain import Catalog
from .services.routing.models import ErrorKind, OrderError
from .services.routing.resolver import EXAMPLE_ORDER


def _available_routes(prefix: str) -> list[str]:
    return [
        "GET /",
        f"GET {prefix}/test",
        f"GET {prefix}/health",
        f"GET {prefix}/catalog",
        f"POST {prefix}/calculate-delivery-cost",
    ]


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level)
    logging.getLogger().setLevel(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    prefix = settings.api_prefix

    @app.get("/")
    def root(catalog: Catalog = Depends(get_catalog)):
        return {
            "message": f"{settings.app_name} is running successfully!",
            "version": settings.app_version,
            "endpoints": {
                "test": f"GET {prefix}/test",
                "health": f"GET {prefix}/health",
                "catalog": f"GET {prefix}/catalog",
                "calculate": f"POST {prefix}/calculate-delivery-cost",
            },
            "availableProducts": catalog.available_products(),
            "sampleRequest": SAMPLE_ORDER,
        }

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found", "availableRoutes": _available_routes(prefix)},
            )
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        # Unparseable JSON bodies are reported like any other malformed order.
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            error = OrderError(
                kind=ErrorKind.INVALID_ORDER_FORMAT,
                message="Invalid order format. Please provide a valid order object.",
                details={"example": dict(EXAMPLE_ORDER)},
            )
            return delivery.error_response(error)
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logging.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": "Something went wrong!"},
        )

    app.include_router(health.router, prefix=prefix)
    app.include_router(delivery.router, prefix=prefix)
    return app


app = create_app()
