# pizzaria_admin/api/endpoints/status.py
import time as process_time
from datetime import datetime, timezone
from typing import Dict, Literal, Optional

from fastapi import APIRouter, Depends, Response, status as http_status
from loguru import logger
from pydantic import BaseModel, Field

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.models.api_common import StatusResponse

class ComponentStatus(BaseModel):
    status: Literal["ok", "error"] = "ok"
    message: Optional[str] = None

class HealthCheckResponse(BaseModel):
    overall_status: Literal["ok", "error"] = "ok"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uptime_seconds: float = Field(..., description="Process uptime in seconds")
    components: Dict[str, ComponentStatus]

PROCESS_START_TIME = process_time.monotonic()

router = APIRouter()

@router.get("/health", response_model=StatusResponse, tags=["Status & Health"], summary="Liveness probe")
async def get_health():
    return StatusResponse(status="ok")

@router.get(
    "/healthcheck",
    response_model=HealthCheckResponse,
    tags=["Status & Health"],
    summary="Application health and key-value store status",
)
async def get_application_health(store: KeyValueStore = Depends(get_kv_store)):
    log = logger.bind(api_endpoint="/healthcheck GET")
    log.info("Performing application health check...")

    components: Dict[str, ComponentStatus] = {}
    try:
        await store.ping()
        components["kv_store_redis"] = ComponentStatus(status="ok")
        log.debug("Redis ping successful.")
    except Exception as e:
        err_msg = f"Redis connection check failed: {e}"
        log.error(err_msg)
        components["kv_store_redis"] = ComponentStatus(status="error", message=err_msg)

    critical_ok = all(c.status == "ok" for c in components.values())
    payload = HealthCheckResponse(
        overall_status="ok" if critical_ok else "error",
        uptime_seconds=process_time.monotonic() - PROCESS_START_TIME,
        components=components,
    )
    return Response(
        content=payload.model_dump_json(exclude_none=True),
        status_code=http_status.HTTP_200_OK if critical_ok else http_status.HTTP_503_SERVICE_UNAVAILABLE,
        media_type="application/json",
    )
