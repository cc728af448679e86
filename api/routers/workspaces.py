"""
Workspace Endpoints
Lists Motion workspaces and stores the user's default workspace
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator

from src.integrations.motion import MotionServiceException
from src.services import TaskProxyService
from src.storage import PreferenceStoreException
from src.utils.logger import setup_logger
from ..dependencies import get_task_service
from ..exceptions import ErrorResponse, ProxyError

logger = setup_logger(__name__)
router = APIRouter(tags=["workspaces"])


class Workspace(BaseModel):
    """A Motion workspace; extra upstream fields are passed through"""
    id: str
    name: Optional[str] = None

    class Config:
        extra = "allow"

    @field_validator("id", "name", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Numeric ids and names from Motion are rendered as text."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class WorkspaceListResponse(BaseModel):
    """Response model for /list-workspaces"""
    workspaces: List[Workspace]
    defaultWorkspaceId: Optional[str] = None


class SetDefaultWorkspaceRequest(BaseModel):
    """Request model for /set-default-workspace"""
    workspaceId: Optional[str] = None


class MessageResponse(BaseModel):
    """Plain acknowledgment"""
    message: str


@router.get(
    "/list-workspaces",
    response_model=WorkspaceListResponse,
    responses={500: {"model": ErrorResponse}}
)
async def list_workspaces(
    service: TaskProxyService = Depends(get_task_service)
) -> Dict[str, Any]:
    """Workspaces visible to the API key plus the stored default."""
    try:
        return await service.list_workspaces()
    except MotionServiceException as e:
        logger.error(f"Error in /list-workspaces: {e.message}")
        raise ProxyError("Error fetching workspaces", e.error_detail)


@router.post(
    "/set-default-workspace",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}}
)
async def set_default_workspace(
    request: SetDefaultWorkspaceRequest,
    service: TaskProxyService = Depends(get_task_service)
) -> Dict[str, str]:
    """Persist the default workspace. The id is not checked against Motion."""
    try:
        await service.set_default_workspace(request.workspaceId)
    except PreferenceStoreException as e:
        raise ProxyError("Error setting default workspace", str(e.cause))
    return {"message": "Default workspace set successfully"}
