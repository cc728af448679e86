"""
Pytest configuration and fixtures
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from api.dependencies import AppState, get_task_service
from api.main import create_app
from src.integrations.motion import MotionClient
from src.services import TaskProxyService
from src.storage import DefaultWorkspaceStore

# Request time used by every proxy-side test
FIXED_NOW = datetime(2026, 10, 19, 15, 30, 0, tzinfo=timezone.utc)


class FakeMotion:
    """In-memory stand-in for the Motion API, served through httpx.MockTransport"""

    def __init__(self):
        self.workspaces: List[Dict[str, Any]] = [
            {"id": "W1", "name": "Personal", "type": "INDIVIDUAL"},
            {"id": "W2", "name": "Team", "type": "TEAM"},
        ]
        self.created_tasks: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []
        self.workspace_error: Optional[Tuple[int, Any]] = None
        self.task_error: Optional[Tuple[int, Any]] = None
        self.task_id: Optional[Any] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "GET" and path.endswith("/workspaces"):
            if self.workspace_error:
                status, body = self.workspace_error
                return httpx.Response(status, json=body)
            return httpx.Response(200, json={"meta": {"pageSize": 20}, "workspaces": self.workspaces})

        if request.method == "POST" and path.endswith("/tasks"):
            if self.task_error:
                status, body = self.task_error
                return httpx.Response(status, json=body)
            payload = json.loads(request.content)
            self.created_tasks.append(payload)
            task_id = self.task_id if self.task_id is not None else f"task-{len(self.created_tasks)}"
            return httpx.Response(201, json={**payload, "id": task_id})

        return httpx.Response(404, json={"message": f"No route for {request.method} {path}"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_task(self) -> Dict[str, Any]:
        return self.created_tasks[-1]


@pytest.fixture
def fake_motion():
    """Fake Motion API"""
    return FakeMotion()


@pytest.fixture
def motion_client(fake_motion):
    """Motion client wired to the fake API"""
    return MotionClient(api_key="test-motion-key", transport=fake_motion.transport)


@pytest.fixture
def preference_path(tmp_path):
    """Location of the default workspace file (not created)"""
    return tmp_path / "defaultWorkspace.json"


@pytest.fixture
def preference_store(preference_path):
    return DefaultWorkspaceStore(preference_path)


@pytest.fixture
def task_service(motion_client, preference_store):
    """Proxy service with a frozen clock"""
    return TaskProxyService(motion_client, preference_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def app(task_service):
    """FastAPI app with the service dependency replaced"""
    application = create_app()
    application.dependency_overrides[get_task_service] = lambda: task_service
    yield application
    application.dependency_overrides.clear()
    AppState.reset()


@pytest_asyncio.fixture
async def api_client(app):
    """HTTP client talking to the app in-process"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://proxy") as client:
        yield client
