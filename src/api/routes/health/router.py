"""Endpoints de health check para orquestração externa."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    uptime_seconds: float
    timestamp: str
    version: str = SERVICE_VERSION


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "disabled", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
        }


def _uptime_seconds(request: Request) -> float:
    started_at = getattr(request.app.state, "started_at", None)
    if started_at is None:
        return 0.0
    return round(time.monotonic() - started_at, 3)


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: o processo está de pé."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        uptime_seconds=_uptime_seconds(request),
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: pool outbound aberto é a única dependência crítica."""
    relay_check = _check_relay_client(getattr(request.app.state, "relay_client", None))
    limiter_check = _check_rate_limiter(getattr(request.app.state, "rate_limiter", None))
    ready = relay_check.status == "ok"

    if not ready:
        logger.warning("readiness_relay_client_failed", extra={"error": relay_check.error})

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "relay_client": relay_check.as_dict(),
            "rate_limiter": limiter_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_relay_client(relay_client: Any | None) -> DependencyCheck:
    if relay_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    if relay_client.is_closed:
        return DependencyCheck(status="failed", error="closed")
    return DependencyCheck(status="ok")


def _check_rate_limiter(rate_limiter: Any | None) -> DependencyCheck:
    if rate_limiter is None:
        return DependencyCheck(status="disabled")
    return DependencyCheck(status="ok")
