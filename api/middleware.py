"""
API Middleware
Request logging and a last-resort error handler
"""
import uuid
from datetime import datetime
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for consistent error handling

    Route handlers convert expected failures themselves; anything that still
    escapes is logged and returned as a 500 in the standard error shape so a
    request can never take the process down.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request with error handling"""
        from api.exceptions import create_error_response

        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unexpected error [{request_id}] in {request.url.path}: {e}", exc_info=True)
            return create_error_response(
                message="An unexpected error occurred",
                error=str(e)
            )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging

    Logs all API requests with timing information
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Log request and response with metadata"""
        start_time = datetime.now()
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.info(f"[{request_id}] → {request.method} {request.url.path}")

        response = await call_next(request)

        duration = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"[{request_id}] ← {request.method} {request.url.path} - "
            f"{response.status_code} ({duration:.2f}s)"
        )

        return response
