# FILE: specforge/routers/status.py
"""
Health/status endpoint.

Three independent probes: backend (always true if we got here), database
(SELECT 1), llm (minimal completion). 200 when all pass, 503 otherwise.
The per-component booleans are always returned, even after an exception.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from specforge.db import check_db_health
from specforge.llm.generator import SpecGenerationClient, get_generation_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


class HealthStatus(BaseModel):
    backend: bool = True
    database: bool = False
    llm: bool = False
    timestamp: str

    @property
    def healthy(self) -> bool:
        return self.backend and self.database and self.llm


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_optional_generation_client():
    try:
        return get_generation_client()
    except RuntimeError as e:
        logger.error("[status] %s", e)
        return None


@router.get("/status", response_model=HealthStatus)
def get_status(generator: Optional[SpecGenerationClient] = Depends(get_optional_generation_client)):
    status = HealthStatus(timestamp=_now_iso())

    try:
        status.database = check_db_health()
        status.llm = generator.health_check() if generator is not None else False
    except Exception:
        logger.exception("[status] health check error")
        return JSONResponse(status_code=503, content=status.model_dump())

    return JSONResponse(status_code=200 if status.healthy else 503, content=status.model_dump())
