"""
Health check router.

Liveness endpoint for monitoring and load balancers. No authentication
and no storage access.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for the journal API.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
