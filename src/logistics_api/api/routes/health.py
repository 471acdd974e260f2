"""Health endpoints."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {
        "status": "healthy",
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "timestamp": _timestamp(),
    }


@router.get("/test", status_code=status.HTTP_200_OK)
def test_endpoint() -> dict:
    return {
        "message": "API is working perfectly!",
        "timestamp": _timestamp(),
        "server": f"{settings.app_name} v{settings.app_version}",
    }
