"""
Motion API Client

Lightweight async client for the Motion REST API.
Authenticates with a static API key sent in the X-API-Key header.
"""
from typing import Any, Dict, List, Optional

import httpx

from src.utils.config import ConfigDefaults, MotionConfig
from src.utils.logger import setup_logger

from .exceptions import MotionAPIException, MotionAuthenticationException

logger = setup_logger(__name__)


class MotionClient:
    """
    Motion REST API client.

    One ``httpx.AsyncClient`` is created lazily and reused across requests;
    call ``close`` on shutdown. No retries are attempted: every failure is
    raised as ``MotionAPIException``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = ConfigDefaults.MOTION_BASE_URL_DEFAULT,
        timeout: float = ConfigDefaults.MOTION_TIMEOUT_DEFAULT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Motion client.

        Args:
            api_key: Motion API key
            base_url: API base address
            timeout: Ceiling in seconds for each outbound request
            transport: Optional httpx transport (used to fake Motion in tests)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
        }
        if self.api_key:
            self.headers["X-API-Key"] = self.api_key

        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(
        cls,
        config: MotionConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "MotionClient":
        """Build a client from the ``motion`` config section."""
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport
        )

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            MotionAuthenticationException: no API key configured
            MotionAPIException: network failure, timeout or non-2xx response
        """
        if not self.is_configured:
            raise MotionAuthenticationException()

        client = await self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Motion {method} {path} timed out after {self.timeout}s")
            raise MotionAPIException(f"Request to Motion timed out: {e}", cause=e) from e
        except httpx.HTTPError as e:
            logger.error(f"Motion {method} {path} failed: {e}")
            raise MotionAPIException(f"Request to Motion failed: {e}", cause=e) from e

        if response.is_error:
            error_body = _decode_body(response)
            logger.error(f"Motion {method} {path} returned {response.status_code}: {error_body}")
            raise MotionAPIException(
                f"Motion API returned status {response.status_code}",
                status_code=response.status_code,
                error_body=error_body
            )

        return _decode_body(response)

    async def list_workspaces(self) -> List[Dict[str, Any]]:
        """
        Get every workspace visible to the API key.

        Follows ``meta.nextCursor`` until Motion stops returning one.
        """
        logger.info("Fetching workspaces...")
        workspaces: List[Dict[str, Any]] = []
        cursor: Optional[str] = None
        seen_cursors = set()

        while True:
            params = {"cursor": cursor} if cursor else None
            data = await self._request("GET", "/workspaces", params=params)
            if not isinstance(data, dict):
                data = {}
            workspaces.extend(data.get("workspaces") or [])

            cursor = (data.get("meta") or {}).get("nextCursor")
            if not cursor or cursor in seen_cursors:
                break
            seen_cursors.add(cursor)

        logger.info(f"Workspaces fetched successfully ({len(workspaces)})")
        return workspaces

    async def create_task(self, task: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a task.

        Args:
            task: Fully normalized Motion task payload

        Returns:
            Created task data (contains the generated ``id``)
        """
        logger.info(f"Sending task data to Motion API: {task}")
        created = await self._request("POST", "/tasks", json=task)
        if not isinstance(created, dict):
            created = {}
        logger.info(f"Task added successfully: {created.get('id')}")
        return created


def _decode_body(response: httpx.Response) -> Any:
    """Decode a JSON body, falling back to raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
