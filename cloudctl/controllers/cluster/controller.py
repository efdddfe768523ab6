"""Cluster controller - fetches clusters and reduces them for the cluster pane."""

from __future__ import annotations

import logging

from cloudctl.constants.timeouts import DASHBOARD_REQUEST_TIMEOUT
from cloudctl.controllers.base import BaseController, CloudAPI
from cloudctl.controllers.cluster.parsers import ClusterParser
from cloudctl.models.config import FilterContext
from cloudctl.models.summaries import ClusterHealthSummary

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Fetches the filtered cluster list and classifies its health."""

    def __init__(
        self,
        client: CloudAPI,
        filters: FilterContext,
        *,
        request_timeout: float = DASHBOARD_REQUEST_TIMEOUT,
    ) -> None:
        super().__init__(client, request_timeout=request_timeout)
        self._filters = filters
        self._parser = ClusterParser()

    async def fetch_all(self) -> ClusterHealthSummary:
        """Fetch clusters and return their health summary."""
        clusters = await self._with_deadline(
            "find clusters",
            self._client.find_clusters(self._filters, timeout=self._request_timeout),
        )
        logger.debug("Fetched %d clusters", len(clusters))
        return self._parser.summarize(clusters)
