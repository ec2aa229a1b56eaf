# hook_studio/adapters/api/routers/health.py
from typing import Dict

import structlog
from fastapi import APIRouter, Depends, Response, status

from hook_studio.adapters.api.dependencies import get_llm_adapter
from hook_studio.core.ports.llm_port import ILanguageModel
from hook_studio.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": settings.APP_NAME}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    llm: ILanguageModel = Depends(get_llm_adapter),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Returns 503 Service Unavailable when no LLM credentials are configured.
    """
    health_status = {"llm": "up" if llm.is_configured else "down"}

    if health_status["llm"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
