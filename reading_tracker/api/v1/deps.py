"""
Shared endpoint dependencies
"""
from fastapi import Request

from ...core.config import settings


async def get_current_user(request: Request) -> str:
    """
    Resolve the acting user id from the user id header.
    
    There is no authentication yet: a missing or blank header falls back to
    the demo user.
    """
    header = request.headers.get(settings.USER_ID_HEADER)
    if header and header.strip():
        return header
    return settings.DEMO_USER_ID
