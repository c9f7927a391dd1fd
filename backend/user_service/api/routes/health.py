"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /healthcheck always returns 200 with an empty body if the process is up
    - GET /healthcheck/ready returns 503 if the database is unreachable

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - The memory backend has no external store, so it is always ready
"""

import logging

from fastapi import APIRouter, Request, Response, status

from user_service.api.responses import error_response, json_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/healthcheck", tags=["health"])


@router.get("")
async def health_check():
    """Basic liveness probe."""
    return Response(status_code=status.HTTP_200_OK)


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is not None and not await db_manager.health_check():
        logger.warning("readiness check failed: database is not reachable")
        return error_response(
            "database is not reachable", status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return json_response({"status": "ready"})
