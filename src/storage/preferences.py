"""
Default workspace preference persistence.

The preference lives in a small JSON document::

    {"defaultWorkspaceId": "<id>"}

Each write replaces the whole file. Concurrent writers are not
coordinated: the last one wins.
"""
import asyncio
import json
from pathlib import Path
from typing import Optional, Union

from src.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_WORKSPACE_KEY = "defaultWorkspaceId"


class PreferenceStoreException(Exception):
    """Raised when the preference file cannot be written."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")


class DefaultWorkspaceStore:
    """Reads and writes the default workspace identifier."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def get(self) -> Optional[str]:
        """
        Return the stored workspace id.

        A missing, unreadable or malformed file means no default is set;
        the problem is logged and None returned.
        """
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading default workspace from {self.path}: {e}")
            return None

    async def set(self, workspace_id: Optional[str]) -> None:
        """
        Persist ``workspace_id``, overwriting any previous value.

        Raises:
            PreferenceStoreException: the file could not be written
        """
        logger.info(f"Setting default workspace: {workspace_id}")
        try:
            await asyncio.to_thread(self._write, workspace_id)
        except (OSError, TypeError) as e:
            logger.error(f"Error setting default workspace: {e}")
            raise PreferenceStoreException(self.path, e) from e

    def _read(self) -> Optional[str]:
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        workspace_id = data.get(DEFAULT_WORKSPACE_KEY)
        if workspace_id is not None and not isinstance(workspace_id, str):
            raise ValueError(f"expected a string workspace id, got {type(workspace_id).__name__}")
        return workspace_id

    def _write(self, workspace_id: Optional[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({DEFAULT_WORKSPACE_KEY: workspace_id}, f)
