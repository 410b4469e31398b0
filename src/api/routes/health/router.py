"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = ""


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    settings = get_base_settings()
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        timestamp=datetime.now(UTC).isoformat(),
        version=settings.service_version,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: publisher criado e tópico dead acessível."""
    state = request.app.state
    use_case = getattr(state, "relay_use_case", None)
    pubsub_check = await _check_pubsub(
        getattr(state, "publisher", None),
        use_case.dead_topic if use_case is not None else None,
    )
    ready = pubsub_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"pubsub": pubsub_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_pubsub(publisher: Any | None, dead_topic: str | None) -> DependencyCheck:
    if publisher is None or not dead_topic:
        return DependencyCheck(status="failed", error="not_configured")
    check_topic = getattr(publisher, "check_topic", None)
    if check_topic is None:
        return DependencyCheck(status="ok")
    started_at = time.perf_counter()
    try:
        await check_topic(dead_topic)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))
