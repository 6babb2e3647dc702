"""
Health check router.

Reports whether the Firebase handles opened by the lifespan are available.
The endpoint always answers 200 so a liveness check passes while the
application is still starting.
"""

from fastapi import APIRouter, Request

from dispo.core.config import settings
from dispo.interfaces.staffing.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, Firebase readiness and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return ``ok`` once the Firebase handles are open, ``starting`` before."""
    firebase_ready = getattr(request.app.state, "firebase", None) is not None
    return HealthResponse(
        status="ok" if firebase_ready else "starting",
        firebase=firebase_ready,
        version=settings.version,
    )
