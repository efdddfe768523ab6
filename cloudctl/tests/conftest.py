"""Shared fixtures for the cloudctl test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from cloudctl.api.errors import CloudAPIError
from cloudctl.models.config import DashboardConfig, FilterContext
from cloudctl.models.records import (
    ClusterRecord,
    HealthReport,
    StorageClusterRecord,
    VolumeRecord,
)


class FakeCloudClient:
    """In-memory API boundary with per-call failure and delay injection.

    Responses are pydantic records built from API-shaped dicts. Setting
    ``errors[name]`` raises that exception from the named call; setting
    ``delays[name]`` sleeps that many seconds before answering.
    """

    def __init__(self) -> None:
        self.clusters: list[dict[str, Any]] = []
        self.volumes: list[dict[str, Any]] = []
        self.storage_clusters: list[dict[str, Any]] = []
        self.version = "v1.2.3"
        self.health_report = HealthReport(status="healthy", message="")
        self.errors: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[str] = []
        self.closed = False

    async def _answer(self, name: str) -> None:
        self.calls.append(name)
        delay = self.delays.get(name)
        if delay:
            await asyncio.sleep(delay)
        error = self.errors.get(name)
        if error is not None:
            raise error

    async def find_clusters(
        self, filters: FilterContext, *, timeout: float = 5.0
    ) -> list[ClusterRecord]:
        await self._answer("find_clusters")
        return [ClusterRecord.model_validate(raw) for raw in self.clusters]

    async def find_volumes(
        self, filters: FilterContext, *, timeout: float = 5.0
    ) -> list[VolumeRecord]:
        await self._answer("find_volumes")
        return [VolumeRecord.model_validate(raw) for raw in self.volumes]

    async def storage_cluster_info(
        self, partition: str, *, timeout: float = 5.0
    ) -> list[StorageClusterRecord]:
        await self._answer("storage_cluster_info")
        return [StorageClusterRecord.model_validate(raw) for raw in self.storage_clusters]

    async def version_info(self, *, timeout: float = 5.0) -> str:
        await self._answer("version_info")
        return self.version

    async def health(self, *, timeout: float = 5.0) -> HealthReport:
        await self._answer("health")
        return self.health_report

    async def aclose(self) -> None:
        self.closed = True


def make_cluster(
    name: str,
    state: str | None = "Succeeded",
    conditions: list[dict[str, Any]] | None = None,
    last_errors: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build an API-shaped cluster dict."""
    status: dict[str, Any] = {
        "conditions": conditions or [],
        "lastErrors": last_errors or [],
    }
    if state is not None:
        status["lastOperation"] = {"state": state, "type": "Reconcile"}
    return {"ID": f"id-{name}", "Name": name, "Tenant": "acme", "Status": status}


def make_condition(
    condition_type: str,
    status: str = "True",
    message: str | None = "ok",
    last_update_time: str | None = "2024-05-01T10:00:00Z",
) -> dict[str, Any]:
    """Build an API-shaped cluster condition dict."""
    return {
        "type": condition_type,
        "status": status,
        "message": message,
        "lastUpdateTime": last_update_time,
    }


def healthy_conditions() -> list[dict[str, Any]]:
    """All four tracked conditions reporting True."""
    return [
        make_condition("APIServerAvailable"),
        make_condition("ControlPlaneHealthy"),
        make_condition("EveryNodeReady"),
        make_condition("SystemComponentsHealthy"),
    ]


@pytest.fixture
def fake_client() -> FakeCloudClient:
    """Create an empty fake API client."""
    return FakeCloudClient()


@pytest.fixture
def filters() -> FilterContext:
    """Create a filter context with all fields set."""
    return FilterContext(tenant="acme", partition="fra-1", purpose="production")


@pytest.fixture
def dashboard_config(filters: FilterContext) -> DashboardConfig:
    """Create a dashboard config with a long refresh interval for tests."""
    return DashboardConfig(filters=filters, refresh_interval=60.0, request_timeout=0.5)


@pytest.fixture
def cluster_factory():
    """Expose the cluster dict builders to tests."""
    return make_cluster


@pytest.fixture
def condition_factory():
    """Expose the condition dict builder to tests."""
    return make_condition


@pytest.fixture
def healthy_condition_list() -> list[dict[str, Any]]:
    """All four tracked conditions reporting True."""
    return healthy_conditions()


@pytest.fixture
def api_error() -> CloudAPIError:
    """A generic API failure."""
    return CloudAPIError("find clusters failed: connection refused")
