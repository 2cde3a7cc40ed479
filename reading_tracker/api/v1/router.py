"""
Main API router
"""
from fastapi import APIRouter

from .endpoints import status, books, content, progress, words, highlights, insights

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(status.router, tags=["status"])
api_router.include_router(books.router, tags=["books"])
api_router.include_router(content.router, tags=["content"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(words.router, prefix="/words", tags=["words"])
api_router.include_router(highlights.router, prefix="/highlights", tags=["highlights"])
api_router.include_router(insights.router, prefix="/insights", tags=["insights"])

# Bare prefix (``/api``) answers directly instead of redirecting to ``/api/``
api_router.add_api_route("", status.api_status, methods=["GET"], include_in_schema=False)
