"""Status controller - API version and health for the dashboard header."""

from __future__ import annotations

import logging

from cloudctl.api.errors import UnhealthyResponse
from cloudctl.controllers.base import BaseController
from cloudctl.models.records import HealthReport

logger = logging.getLogger(__name__)


class StatusController(BaseController):
    """Fetches the API version and health."""

    async def fetch_version(self) -> str:
        """Return the API version string."""
        return await self._with_deadline(
            "version", self._client.version_info(timeout=self._request_timeout)
        )

    async def fetch_health(self) -> HealthReport:
        """Return the API health report.

        An unhealthy API answers with an error status but still carries a
        health report; that report is returned instead of raising.
        """
        try:
            return await self._with_deadline(
                "health", self._client.health(timeout=self._request_timeout)
            )
        except UnhealthyResponse as exc:
            logger.info("API reports %s: %s", exc.report.status, exc.report.message)
            return exc.report

    async def fetch_all(self) -> tuple[str, HealthReport]:
        """Fetch version then health; a version failure skips the health call."""
        version = await self.fetch_version()
        health = await self.fetch_health()
        return version, health
