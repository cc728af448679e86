"""
Task Endpoints
Normalizes task drafts and creates them in Motion
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from src.integrations.motion import MotionServiceException
from src.services import TaskProxyService
from src.utils.logger import setup_logger
from ..dependencies import get_task_service
from ..exceptions import ErrorResponse, ProxyError

logger = setup_logger(__name__)
router = APIRouter(tags=["tasks"])


class AddTaskResponse(BaseModel):
    """Response model for /add-task"""
    message: str
    taskId: Optional[str] = None


@router.post(
    "/add-task",
    response_model=AddTaskResponse,
    responses={500: {"model": ErrorResponse}}
)
async def add_task(
    draft: Dict[str, Any] = Body(...),
    service: TaskProxyService = Depends(get_task_service)
) -> Dict[str, Any]:
    """
    Create a task from a loosely structured draft.

    Priority, due date, auto-scheduling and duration are defaulted before the
    draft is forwarded; Motion's own rejection is relayed as the error.
    """
    try:
        result = await service.add_task(draft)
    except MotionServiceException as e:
        logger.error(f"Error adding task: {e.error_detail}")
        raise ProxyError("Error adding task", e.error_detail)
    except ValueError as e:
        logger.error(f"Error adding task: {e}")
        raise ProxyError("Error adding task", str(e))

    return {"message": "Task added successfully", "taskId": result["taskId"]}
