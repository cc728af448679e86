"""
Services - Business logic for the task proxy

Active Services:
- TaskProxyService: list workspaces, set the default workspace, add tasks
- task_normalizer: shapes form drafts into Motion task payloads
"""

from .task_normalizer import normalize_task
from .task_proxy_service import TaskProxyService

__all__ = [
    "normalize_task",
    "TaskProxyService",
]
