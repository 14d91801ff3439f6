"""
Palindrome API — Health Check Route
====================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Runs a `SELECT 1` through the WordStore and reports the result.
       Uptime counts from app startup (app.state.started_at).

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from palindrome_api import __version__
from palindrome_api.schemas.word import HealthResponse
from palindrome_api.services.word_store import WordStore, get_word_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, store: WordStore = Depends(get_word_store)):
    connected = await store.ping()
    health = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - request.app.state.started_at, 2),
    )
    if not connected:
        logger.warning("Health check: database unreachable")
        return JSONResponse(status_code=503, content=health.model_dump())
    return health
