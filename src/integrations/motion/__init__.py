"""
Motion Integration Package

Provides access to Motion workspaces and task creation.
"""
from .client import MotionClient
from .exceptions import (
    MotionServiceException,
    MotionAPIException,
    MotionAuthenticationException,
)

__all__ = [
    'MotionClient',
    'MotionServiceException',
    'MotionAPIException',
    'MotionAuthenticationException',
]
