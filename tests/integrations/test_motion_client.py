"""
Tests for the Motion API client
"""
import httpx
import pytest

from src.integrations.motion import (
    MotionAPIException,
    MotionAuthenticationException,
    MotionClient,
    MotionServiceException,
)
from src.utils.config import MotionConfig


class TestMotionClientSetup:
    """Construction and configuration"""

    def test_api_key_header(self):
        client = MotionClient(api_key="secret")
        assert client.headers["X-API-Key"] == "secret"
        assert client.headers["Content-Type"] == "application/json"
        assert client.is_configured

    def test_no_api_key(self):
        client = MotionClient()
        assert "X-API-Key" not in client.headers
        assert not client.is_configured

    def test_from_config(self):
        config = MotionConfig(api_key="k", base_url="https://motion.test/v1", timeout=3.0)
        client = MotionClient.from_config(config)
        assert client.api_key == "k"
        assert client.base_url == "https://motion.test/v1"
        assert client.timeout == 3.0

    @pytest.mark.asyncio
    async def test_missing_key_fails_before_any_request(self, fake_motion):
        client = MotionClient(transport=fake_motion.transport)
        with pytest.raises(MotionAuthenticationException) as exc_info:
            await client.list_workspaces()
        assert isinstance(exc_info.value, MotionServiceException)
        assert fake_motion.requests == []


class TestListWorkspaces:
    """GET /workspaces"""

    @pytest.mark.asyncio
    async def test_returns_workspaces(self, motion_client, fake_motion):
        workspaces = await motion_client.list_workspaces()
        assert [ws["id"] for ws in workspaces] == ["W1", "W2"]

        request = fake_motion.requests[0]
        assert request.url.path == "/v1/workspaces"
        assert request.headers["X-API-Key"] == "test-motion-key"

    @pytest.mark.asyncio
    async def test_follows_cursor(self):
        """Pages are fetched until Motion stops returning a cursor"""
        pages = {
            None: {"workspaces": [{"id": "W1", "name": "One"}], "meta": {"nextCursor": "c2"}},
            "c2": {"workspaces": [{"id": "W2", "name": "Two"}], "meta": {}},
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=pages[request.url.params.get("cursor")])

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        workspaces = await client.list_workspaces()
        assert [ws["id"] for ws in workspaces] == ["W1", "W2"]

    @pytest.mark.asyncio
    async def test_repeated_cursor_stops(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"workspaces": [], "meta": {"nextCursor": "same"}})

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        assert await client.list_workspaces() == []
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_error_status(self, motion_client, fake_motion):
        fake_motion.workspace_error = (401, {"message": "Unauthorized"})

        with pytest.raises(MotionAPIException) as exc_info:
            await motion_client.list_workspaces()

        assert exc_info.value.status_code == 401
        assert exc_info.value.error_detail == {"message": "Unauthorized"}


class TestCreateTask:
    """POST /tasks"""

    @pytest.mark.asyncio
    async def test_posts_payload(self, motion_client, fake_motion):
        created = await motion_client.create_task({"name": "Write report", "workspaceId": "W1"})

        assert created["id"] == "task-1"
        assert fake_motion.last_task == {"name": "Write report", "workspaceId": "W1"}
        assert fake_motion.requests[0].method == "POST"

    @pytest.mark.asyncio
    async def test_upstream_error_body_is_kept(self, motion_client, fake_motion):
        fake_motion.task_error = (500, {"message": "Internal failure", "code": "E_TASK"})

        with pytest.raises(MotionAPIException) as exc_info:
            await motion_client.create_task({"name": "x"})

        assert exc_info.value.status_code == 500
        assert exc_info.value.error_body == {"message": "Internal failure", "code": "E_TASK"}

    @pytest.mark.asyncio
    async def test_plain_text_error_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text="bad workspace")

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        with pytest.raises(MotionAPIException) as exc_info:
            await client.create_task({"name": "x"})
        assert exc_info.value.error_detail == "bad workspace"

    @pytest.mark.asyncio
    async def test_empty_error_body_falls_back_to_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502)

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        with pytest.raises(MotionAPIException) as exc_info:
            await client.create_task({"name": "x"})
        assert exc_info.value.error_body is None
        assert exc_info.value.error_detail == "Motion API returned status 502"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        with pytest.raises(MotionAPIException) as exc_info:
            await client.create_task({"name": "x"})
        assert exc_info.value.status_code is None
        assert "timed out" in exc_info.value.error_detail

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = MotionClient(api_key="k", transport=httpx.MockTransport(handler))
        with pytest.raises(MotionAPIException) as exc_info:
            await client.create_task({"name": "x"})
        assert isinstance(exc_info.value.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_close_reopens_lazily(motion_client):
    """A closed client is recreated on the next request"""
    await motion_client.list_workspaces()
    await motion_client.close()
    workspaces = await motion_client.list_workspaces()
    assert len(workspaces) == 2
    await motion_client.close()
