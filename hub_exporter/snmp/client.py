"""
Hub Client.

Fetches the router status dump from the hub over HTTP.
URL format: http://{hub_ip}/getRouterStatus
"""
from __future__ import annotations

import logging

import httpx

from hub_exporter.snmp.errors import FetchFailed
from hub_exporter.snmp.table import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_STATUS_PATH = "/getRouterStatus"


class HubClient:
    """
    Synchronous client for the hub's router status endpoint.

    One instance owns one ``httpx.Client`` (connection pool) for the process
    lifetime; every call performs exactly one GET.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        status_path: str = DEFAULT_STATUS_PATH,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the hub client.

        Args:
            base_url: Hub base URL, e.g. ``http://192.168.100.1``
            timeout: Request timeout in seconds
            status_path: Path of the JSON router status endpoint
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.status_path = "/" + status_path.lstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.status_path}"

    def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def get_router_status(self) -> Snapshot:
        """
        Fetch one router status snapshot.

        Returns:
            Snapshot: immutable OID → value mapping

        Raises:
            FetchFailed: on connection errors, timeouts, non-2xx responses
                and bodies that are not a JSON object of strings.
        """
        logger.debug("Fetching router status from %s", self.url)
        try:
            response = self._client.get(self.status_path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchFailed(
                f"hub returned HTTP {e.response.status_code} for {self.url}"
            ) from e
        except httpx.TimeoutException as e:
            raise FetchFailed(
                f"timed out after {self.timeout}s fetching {self.url}"
            ) from e
        except httpx.RequestError as e:
            raise FetchFailed(f"failed to connect to {self.url}: {e}") from e

        try:
            snapshot = Snapshot.from_json(response.json())
        except (ValueError, TypeError) as e:
            raise FetchFailed(f"invalid router status from {self.url}: {e}") from e

        logger.debug("Fetched %d values from %s", len(snapshot), self.url)
        return snapshot

    def __enter__(self) -> HubClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
