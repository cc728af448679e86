"""
Task Proxy Service - Business logic behind the proxy endpoints

Combines the Motion client, the default workspace preference and the task
normalizer. Every method is a single request/response; nothing is kept
between calls except what the preference store writes to disk.

Usage:
    from src.services import TaskProxyService

    service = TaskProxyService(motion_client, DefaultWorkspaceStore(path))
    listing = await service.list_workspaces()
    created = await service.add_task({"name": "Write report"})
"""
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from src.integrations.motion import MotionClient
from src.storage import DefaultWorkspaceStore
from src.utils.datetime import utc_now
from src.utils.logger import setup_logger

from .task_normalizer import normalize_task

logger = setup_logger(__name__)


class TaskProxyService:
    """
    Proxy operations over the Motion API.

    Errors are not translated here: Motion failures surface as
    ``MotionServiceException``, preference writes as
    ``PreferenceStoreException`` and unparseable due dates as ``ValueError``.
    """

    def __init__(
        self,
        motion_client: MotionClient,
        preference_store: DefaultWorkspaceStore,
        clock: Callable[[], datetime] = utc_now
    ):
        """
        Initialize the service.

        Args:
            motion_client: Client for the Motion API
            preference_store: Default workspace persistence
            clock: Returns the request time; injectable for tests
        """
        self.motion_client = motion_client
        self.preference_store = preference_store
        self.clock = clock

    async def list_workspaces(self) -> Dict[str, Any]:
        """
        Workspaces from Motion plus the persisted default.

        Returns:
            ``{"workspaces": [...], "defaultWorkspaceId": str | None}``
        """
        workspaces = await self.motion_client.list_workspaces()
        default_workspace_id = await self.preference_store.get()
        logger.info(
            f"Sending workspaces to client: workspace_count={len(workspaces)}, "
            f"default_workspace_id={default_workspace_id}"
        )
        return {"workspaces": workspaces, "defaultWorkspaceId": default_workspace_id}

    async def set_default_workspace(self, workspace_id: Optional[str]) -> None:
        """Persist ``workspace_id`` as the default. It is not checked against Motion."""
        await self.preference_store.set(workspace_id)

    async def add_task(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        """
        Normalize ``draft`` and create it in Motion.

        Returns:
            ``{"taskId": <Motion id>, "task": <created task>}``
        """
        logger.info(f"Received task data: {draft}")
        task = normalize_task(draft, now=self.clock())
        created = await self.motion_client.create_task(task)
        task_id = created.get("id")
        if task_id is not None:
            task_id = str(task_id)
        return {"taskId": task_id, "task": created}
