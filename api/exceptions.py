"""
API Exceptions and Error Response Models
Every failure leaves the proxy as ``{"message": ..., "error": ...}``
"""
from typing import Any, Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.utils.logger import setup_logger

logger = setup_logger(__name__)


# ============================================
# ERROR RESPONSE MODELS
# ============================================

class ErrorResponse(BaseModel):
    """Standardized error response"""
    message: str
    error: Optional[Any] = None


# ============================================
# CUSTOM EXCEPTIONS
# ============================================

class APIException(HTTPException):
    """Base API exception with standardized response"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[Any] = None
    ):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response"""
        return {"message": self.message, "error": self.error}


class ProxyError(APIException):
    """An operation of the proxy failed (upstream, storage or input)"""
    def __init__(self, message: str, error: Optional[Any] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            error=error
        )


# ============================================
# ERROR RESPONSE HANDLERS
# ============================================

def create_error_response(
    message: str,
    error: Optional[Any] = None,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        message: Human-readable summary of what failed
        error: Best available detail (upstream body or exception message)
        status_code: HTTP status code

    Returns:
        JSONResponse with standardized error format
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error=error).model_dump()
    )


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render APIException raised by route handlers."""
    return create_error_response(exc.message, exc.error, exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies in the standard error shape."""
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return create_error_response(
        "Invalid request body",
        jsonable_errors(exc),
        status.HTTP_422_UNPROCESSABLE_ENTITY
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors reduced to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]
