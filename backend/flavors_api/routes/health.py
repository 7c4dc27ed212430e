"""
Acme Flavors Backend: Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs SELECT 1 through the shared Database; the service is only
       healthy if the store answers.

    healthy:   store reachable (HTTP 200)
    unhealthy: store unreachable (HTTP 503)
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from flavors_api import __version__
from flavors_api.schemas.flavor import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    try:
        await request.app.state.database.ping()
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        body = HealthResponse(status="unhealthy", version=__version__, database="disconnected")
        return JSONResponse(status_code=503, content=body.model_dump())

    return HealthResponse(status="healthy", version=__version__, database="connected")
