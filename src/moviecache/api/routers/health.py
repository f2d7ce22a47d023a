"""Health check endpoints for movie-cache.

Provides Kubernetes-compatible liveness and readiness probes:
- /health/live  - Liveness probe (always returns OK if process is running)
- /health/ready - Readiness probe (checks key-value store connectivity)
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from moviecache.api.deps import StoreDep

router = APIRouter(prefix="/health", tags=["health"])

STORE_CHECK_TIMEOUT = 5.0  # seconds


@router.get("/live")
async def liveness() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(store: StoreDep) -> JSONResponse:
    """Readiness probe: the store must answer a ping."""
    start = time.monotonic()
    try:
        healthy = await asyncio.wait_for(store.ping(), timeout=STORE_CHECK_TIMEOUT)
        message = None if healthy else "Store ping failed"
    except asyncio.TimeoutError:
        healthy = False
        message = "Store check timed out"

    component: dict[str, Any] = {
        "name": "store",
        "status": "healthy" if healthy else "unhealthy",
        "latency_ms": round((time.monotonic() - start) * 1000, 2),
    }
    if message:
        component["message"] = message

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": component["status"],
            "components": [component],
        },
    )
