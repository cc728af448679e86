"""
API Routers - Modular organization of API endpoints
"""
from . import tasks, workspaces

__all__ = ["tasks", "workspaces"]
