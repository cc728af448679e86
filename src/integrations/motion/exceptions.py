"""
Motion Integration Exceptions

Custom exceptions for Motion API operations.
"""
from typing import Any, Optional

from ..base_exceptions import IntegrationServiceException, AuthenticationException


class MotionServiceException(IntegrationServiceException):
    """Base exception for Motion service errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message, service_name="Motion", cause=cause)

    @property
    def error_detail(self) -> Any:
        """Best available description of the failure for API callers."""
        return self.message


class MotionAPIException(MotionServiceException):
    """
    Raised when a Motion API call fails.

    Covers network failures and timeouts (``status_code`` is None) as well as
    non-2xx responses, in which case ``error_body`` holds the decoded
    response body.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_body: Any = None,
        cause: Optional[Exception] = None
    ):
        self.status_code = status_code
        self.error_body = error_body
        super().__init__(message, cause=cause)

    @property
    def error_detail(self) -> Any:
        if self.error_body not in (None, ""):
            return self.error_body
        return self.message


class MotionAuthenticationException(MotionServiceException, AuthenticationException):
    """Raised when no Motion API key is configured."""

    def __init__(self, message: str = "No Motion API key configured"):
        super().__init__(message)
