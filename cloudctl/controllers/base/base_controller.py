"""Base controller with deadline-bounded API calls.

Controllers run inside Textual workers; every outbound call is wrapped in a
deadline so a stalled request delays one render cycle instead of freezing the
dashboard.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any, Protocol, TypeVar

from cloudctl.api.errors import APITimeoutError
from cloudctl.constants.timeouts import DASHBOARD_REQUEST_TIMEOUT
from cloudctl.models.config import FilterContext
from cloudctl.models.records import (
    ClusterRecord,
    HealthReport,
    StorageClusterRecord,
    VolumeRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CloudAPI(Protocol):
    """The subset of the cloud API consumed by the dashboard."""

    async def find_clusters(
        self, filters: FilterContext, *, timeout: float = ...
    ) -> list[ClusterRecord]: ...

    async def find_volumes(
        self, filters: FilterContext, *, timeout: float = ...
    ) -> list[VolumeRecord]: ...

    async def storage_cluster_info(
        self, partition: str, *, timeout: float = ...
    ) -> list[StorageClusterRecord]: ...

    async def version_info(self, *, timeout: float = ...) -> str: ...

    async def health(self, *, timeout: float = ...) -> HealthReport: ...


class BaseController(ABC):
    """Base controller class for deadline-bounded fetches.

    Subclasses should implement :meth:`fetch_all` to fetch and reduce the
    data for one pane.
    """

    def __init__(
        self,
        client: CloudAPI,
        *,
        request_timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the controller.

        Args:
            client: API client used for all fetches
            request_timeout: Deadline in seconds applied to each call
        """
        self._client = client
        self._request_timeout = request_timeout

    @property
    def request_timeout(self) -> float:
        """Deadline in seconds applied to each call."""
        return self._request_timeout

    async def _with_deadline(self, operation: str, call: Awaitable[T]) -> T:
        """Await ``call`` and raise APITimeoutError once the deadline passes."""
        try:
            return await asyncio.wait_for(call, timeout=self._request_timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("%s timed out after %ss", operation, self._request_timeout)
            raise APITimeoutError(operation, self._request_timeout) from exc

    @abstractmethod
    async def fetch_all(self) -> Any:
        """Fetch and reduce all data of this controller's domain.

        Returns:
            The reduced summary for one render cycle
        """
        ...


__all__ = [
    "BaseController",
    "CloudAPI",
]
