"""
CORS preflight and request logging middleware
"""
import logging
from typing import Iterable
from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class PreflightMiddleware(BaseHTTPMiddleware):
    """Answer every OPTIONS request with 204 before routing"""
    
    def __init__(self, app, allow_methods: Iterable[str], allow_headers: Iterable[str]):
        super().__init__(app)
        self.headers = {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ",".join(allow_methods),
            "Access-Control-Allow-Headers": ",".join(allow_headers),
        }
    
    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self.headers)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path and query of each inbound request"""
    
    async def dispatch(self, request: Request, call_next):
        logger.info(
            f"Request received: method={request.method} path={request.url.path} "
            f"query={dict(request.query_params)}"
        )
        return await call_next(request)
