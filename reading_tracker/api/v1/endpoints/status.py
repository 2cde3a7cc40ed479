"""
API status endpoint
"""
from datetime import datetime, timezone
from fastapi import APIRouter

from ....core.responses import success_response
from ....services.progress_service import to_iso_timestamp

router = APIRouter()


@router.get("/")
async def api_status():
    """Liveness check"""
    return {
        "message": "API is up and running",
        **success_response(time=to_iso_timestamp(datetime.now(timezone.utc))),
    }
