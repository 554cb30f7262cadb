"""Health check endpoints"""

from typing import Any

from fastapi import APIRouter

from ..schemas.common import HealthResponse
from ..utils.docs import responses
from ..utils.utc import utcnow


router = APIRouter(tags=["health"])


@router.get("/health", responses=responses(HealthResponse))
async def health() -> Any:
    """Report that the server is up."""

    return {"message": "Portfolio Backend Server is running!", "status": "healthy", "timestamp": utcnow().isoformat()}
