"""
Proxy Client

Async HTTP client for the task proxy's three endpoints.
"""
from typing import Any, Dict, Optional

import httpx

from src.utils.config import ClientConfig, ConfigDefaults
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class ProxyRequestError(Exception):
    """A proxy call failed; ``message`` is what the user should see."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ProxyClient:
    """
    Talks to the task proxy over HTTP.

    Usage:
        async with ProxyClient("http://localhost:3000") as proxy:
            listing = await proxy.list_workspaces()
    """

    def __init__(
        self,
        base_url: str = ConfigDefaults.PROXY_URL_DEFAULT,
        timeout: float = ConfigDefaults.CLIENT_TIMEOUT_DEFAULT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ProxyClient":
        return cls(base_url=config.proxy_url, timeout=config.timeout)

    async def __aenter__(self) -> "ProxyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Could not reach proxy at {self.base_url}{path}: {e}")
            raise ProxyRequestError(f"Could not reach the proxy: {e}") from e

    async def list_workspaces(self) -> Dict[str, Any]:
        """GET /list-workspaces"""
        response = await self._send("GET", "/list-workspaces")
        logger.debug(f"Response received: {response.status_code}")
        if response.is_error:
            raise ProxyRequestError(f"HTTP error! status: {response.status_code}", response.status_code)
        return _json_object(response)

    async def set_default_workspace(self, workspace_id: Optional[str]) -> Dict[str, Any]:
        """POST /set-default-workspace"""
        response = await self._send("POST", "/set-default-workspace", json={"workspaceId": workspace_id})
        if response.is_error:
            raise ProxyRequestError("Failed to set default workspace", response.status_code)
        return _json_object(response)

    async def add_task(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST /add-task

        Raises:
            ProxyRequestError: carrying the proxy's ``message`` when it sent one
        """
        response = await self._send("POST", "/add-task", json=payload)
        if response.is_error:
            try:
                result = response.json()
            except ValueError:
                result = None
            message = result.get("message") if isinstance(result, dict) else None
            raise ProxyRequestError(message or "Error adding task", response.status_code)
        return _json_object(response)


def _json_object(response: httpx.Response) -> Dict[str, Any]:
    """Decode a successful reply, which must be a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise ProxyRequestError(f"Invalid response from proxy: {e}", response.status_code) from e
    if not isinstance(data, dict):
        raise ProxyRequestError(
            f"Invalid response from proxy: expected a JSON object, got {type(data).__name__}",
            response.status_code
        )
    return data
