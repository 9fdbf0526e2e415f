"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ridematch.domain.policies.measure_policy import MeasurePolicy
from ridematch.infrastructure.api.dependencies import get_measure_policy

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(policy: MeasurePolicy = Depends(get_measure_policy)):
    """Report which distance source the ranking uses."""
    return {
        "status": "ok",
        "distance_matrix": "enabled" if policy.distance_matrix_available else "disabled",
        "departure": {
            "latitude": policy.departure.latitude,
            "longitude": policy.departure.longitude,
        },
        "service": "ridematch - detour-based driver ranking",
    }
