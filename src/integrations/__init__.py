"""
Integrations Module

Provides integrations with external platforms. Currently only the Motion
task-management API.
"""

from .base_exceptions import IntegrationServiceException, AuthenticationException

__all__ = ['IntegrationServiceException', 'AuthenticationException']
