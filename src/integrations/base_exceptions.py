"""
Base Integration Exceptions

Exception hierarchy shared by the external service integrations.

Usage:
    from src.integrations.base_exceptions import (
        IntegrationServiceException,
        AuthenticationException,
    )
"""
from typing import Optional, Dict, Any


class IntegrationServiceException(Exception):
    """
    Base exception for all integration service operations.

    All integration-specific exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        service_name: str = "Integration",
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.service_name = service_name
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(service={self.service_name}, message={self.message})"


class AuthenticationException(IntegrationServiceException):
    """Exception raised for authentication/authorization failures."""
    pass
