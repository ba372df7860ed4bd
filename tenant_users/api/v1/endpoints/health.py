"""Health check endpoint. No tenant or database dependency; used for liveness probes."""

from fastapi import APIRouter

from tenant_users.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()
