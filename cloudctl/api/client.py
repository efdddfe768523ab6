"""Async HTTP client for the cloud API endpoints used by the dashboard.

Each call accepts a ``timeout`` deadline in seconds. Transport errors,
non-success status codes and malformed payloads are all raised as
:class:`~cloudctl.api.errors.CloudAPIError` subclasses.
"""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from cloudctl.api.errors import (
    APIStatusError,
    APITimeoutError,
    CloudAPIError,
    ForbiddenError,
    UnhealthyResponse,
)
from cloudctl.constants.timeouts import DASHBOARD_REQUEST_TIMEOUT, HTTP_CONNECT_TIMEOUT
from cloudctl.models.config import FilterContext
from cloudctl.models.records import (
    ClusterRecord,
    HealthReport,
    StorageClusterRecord,
    VolumeRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CLUSTER_LIST = TypeAdapter(list[ClusterRecord])
_VOLUME_LIST = TypeAdapter(list[VolumeRecord])
_STORAGE_CLUSTER_LIST = TypeAdapter(list[StorageClusterRecord])


class _VersionPayload(BaseModel):
    version: str


class CloudClient:
    """Thin async client over the cloud API REST endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``https://api.example.com/cloud``
            token: Optional bearer token
            transport: Optional httpx transport, used by tests
        """
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers=headers,
            timeout=httpx.Timeout(DASHBOARD_REQUEST_TIMEOUT, connect=HTTP_CONNECT_TIMEOUT),
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> CloudClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def find_clusters(
        self,
        filters: FilterContext,
        *,
        timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> list[ClusterRecord]:
        """Find clusters matching the filter context (machines omitted)."""
        body = _strip_empty(
            {
                "PartitionID": filters.partition,
                "Tenant": filters.tenant,
                "Purpose": filters.purpose,
            }
        )
        payload = await self._request(
            "find clusters",
            "POST",
            "v1/cluster/find",
            json=body,
            params={"returnmachines": "false"},
            timeout=timeout,
        )
        return self._parse("find clusters", _CLUSTER_LIST, payload or [])

    async def find_volumes(
        self,
        filters: FilterContext,
        *,
        timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> list[VolumeRecord]:
        """Find volumes of the filtered tenant and partition."""
        body = _strip_empty(
            {
                "PartitionID": filters.partition,
                "TenantID": filters.tenant,
            }
        )
        payload = await self._request(
            "find volumes", "POST", "v1/volume/find", json=body, timeout=timeout
        )
        return self._parse("find volumes", _VOLUME_LIST, payload or [])

    async def storage_cluster_info(
        self,
        partition: str,
        *,
        timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> list[StorageClusterRecord]:
        """Fetch storage cluster info; provider admins only.

        Raises:
            ForbiddenError: If the caller is not allowed to see cluster info.
        """
        params = {"partitionid": partition} if partition else None
        payload = await self._request(
            "storage cluster info",
            "GET",
            "v1/volume/clusterinfo",
            params=params,
            timeout=timeout,
        )
        return self._parse("storage cluster info", _STORAGE_CLUSTER_LIST, payload or [])

    async def version_info(self, *, timeout: float = DASHBOARD_REQUEST_TIMEOUT) -> str:
        """Return the API version string."""
        payload = await self._request("version", "GET", "v1/version", timeout=timeout)
        return self._parse("version", TypeAdapter(_VersionPayload), payload).version

    async def health(self, *, timeout: float = DASHBOARD_REQUEST_TIMEOUT) -> HealthReport:
        """Return the API health report.

        Raises:
            UnhealthyResponse: If the API answers 500 with a health payload.
        """
        try:
            payload = await self._request("health", "GET", "v1/health", timeout=timeout)
        except APIStatusError as exc:
            if exc.status_code != HTTPStatus.INTERNAL_SERVER_ERROR:
                raise
            report = _health_report_from(exc.detail)
            if report is None:
                raise
            raise UnhealthyResponse(report) from exc
        return self._parse("health", TypeAdapter(HealthReport), payload)

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        timeout: float,
        **kwargs: Any,
    ) -> Any:
        """Send a request under a deadline and decode the JSON body."""
        try:
            response = await asyncio.wait_for(
                self._http.request(method, path, **kwargs), timeout=timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise APITimeoutError(operation, timeout) from exc
        except httpx.HTTPError as exc:
            raise CloudAPIError(f"{operation} failed: {exc}") from exc

        if response.status_code == HTTPStatus.FORBIDDEN:
            raise ForbiddenError(operation, response.text)
        if response.is_error:
            raise APIStatusError(operation, response.status_code, response.text)

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise CloudAPIError(f"{operation} returned invalid JSON") from exc

    @staticmethod
    def _parse(operation: str, adapter: TypeAdapter[T], payload: Any) -> T:
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise CloudAPIError(f"{operation} returned an unexpected payload: {exc}") from exc


def _strip_empty(body: dict[str, str]) -> dict[str, str]:
    """Drop unset filters so the API does not match on empty strings."""
    return {key: value for key, value in body.items() if value}


def _health_report_from(raw: str) -> HealthReport | None:
    """Parse a health payload carried by an error response, if it is one."""
    try:
        report = HealthReport.model_validate_json(raw)
    except ValidationError:
        return None
    return report if report.status else None


__all__ = [
    "CloudClient",
]
