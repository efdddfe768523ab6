"""Volume controller - fetches volumes and storage cluster info for the volume pane."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cloudctl.api.errors import ForbiddenError
from cloudctl.constants.timeouts import DASHBOARD_REQUEST_TIMEOUT
from cloudctl.controllers.base import BaseController, CloudAPI
from cloudctl.controllers.volume.parsers import StorageParser, VolumeParser
from cloudctl.models.config import FilterContext
from cloudctl.models.records import StorageClusterRecord
from cloudctl.models.summaries import StorageHealthSummary, VolumeHealthSummary

logger = logging.getLogger(__name__)


@dataclass
class VolumePaneData:
    """Everything the volume pane draws in one cycle.

    ``storage`` is None when storage cluster info is not visible to the caller
    or when no storage cluster was reported.
    """

    volumes: VolumeHealthSummary
    storage: StorageHealthSummary | None = None


class VolumeController(BaseController):
    """Fetches volumes and, for provider admins, storage cluster info."""

    def __init__(
        self,
        client: CloudAPI,
        filters: FilterContext,
        *,
        request_timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> None:
        super().__init__(client, request_timeout=request_timeout)
        self._filters = filters
        self._volume_parser = VolumeParser()
        self._storage_parser = StorageParser()

    async def fetch_all(self) -> VolumePaneData:
        """Fetch volumes and storage info and return their summaries.

        Raises:
            CloudAPIError: If either fetch fails, except for a forbidden
                storage cluster info request.
        """
        volumes = await self._with_deadline(
            "find volumes",
            self._client.find_volumes(self._filters, timeout=self._request_timeout),
        )
        storage_clusters = await self._fetch_storage_clusters()

        data = VolumePaneData(volumes=self._volume_parser.summarize(volumes))
        if storage_clusters:
            data.storage = self._storage_parser.summarize(storage_clusters)
        return data

    async def _fetch_storage_clusters(self) -> list[StorageClusterRecord] | None:
        """Fetch storage cluster info; None when the caller is not allowed to."""
        try:
            return await self._with_deadline(
                "storage cluster info",
                self._client.storage_cluster_info(
                    self._filters.partition, timeout=self._request_timeout
                ),
            )
        except ForbiddenError:
            # cluster info is only visible to provider admins
            logger.debug("Storage cluster info forbidden, skipping storage section")
            return None
