"""Smoke tests for the dashboard app: render cycles, tabs and quitting."""

from __future__ import annotations

import pytest

from cloudctl.api.errors import APIStatusError, UnhealthyResponse
from cloudctl.app import CloudDashboardApp
from cloudctl.models.config import DashboardConfig
from cloudctl.models.records import HealthReport
from cloudctl.utils.geometry import Rect


@pytest.fixture
def app(fake_client, dashboard_config: DashboardConfig) -> CloudDashboardApp:
    """Create the dashboard app against the fake client."""
    return CloudDashboardApp(fake_client, dashboard_config)


async def _settle(app: CloudDashboardApp, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestRenderCycle:
    """Smoke tests for render_dashboard."""

    @pytest.mark.asyncio
    async def test_initial_render(
        self, app: CloudDashboardApp, fake_client, cluster_factory
    ) -> None:
        """Mounting renders the header and the active pane once."""
        fake_client.clusters = [cluster_factory("a")]
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            status = app.status_header.paragraph_text
            assert "cloud-api v1.2.3" in status
            assert "[green]healthy[/green]" in status
            assert "Last Update: " in status
            assert "Switch between tabs with number keys" in status
            assert "Update Error" not in status
            assert app.filter_header.paragraph_text == (
                "Tenant=acme\nPartition=fra-1\nPurpose=production"
            )
            assert "find_clusters" in fake_client.calls
            assert "find_volumes" not in fake_client.calls

    @pytest.mark.asyncio
    async def test_version_failure_stops_cycle(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """A failed version fetch shows the error and skips health and pane."""
        fake_client.errors["version_info"] = APIStatusError("version", 502, "bad gateway")
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert isinstance(app.last_error, APIStatusError)
            status = app.status_header.paragraph_text
            assert "cloud-api unknown" in status
            assert "[red]Update Error: version failed with status 502" in status
            assert "health" not in fake_client.calls
            assert "find_clusters" not in fake_client.calls

    @pytest.mark.asyncio
    async def test_unhealthy_api_still_renders_pane(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """An unhealthy health report is shown in red and the pane still renders."""
        fake_client.errors["health"] = UnhealthyResponse(
            HealthReport(status="unhealthy", message="ipam down")
        )
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert app.last_error is None
            assert "[red]unhealthy (ipam down)[/red]" in app.status_header.paragraph_text
            assert "find_clusters" in fake_client.calls

    @pytest.mark.asyncio
    async def test_pane_failure_is_reported(
        self, app: CloudDashboardApp, fake_client, api_error
    ) -> None:
        """A failed pane fetch shows up in the status line."""
        fake_client.errors["find_clusters"] = api_error
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert app.last_error is api_error
            assert "Update Error: find clusters failed" in app.status_header.paragraph_text

    @pytest.mark.asyncio
    async def test_health_failure_stops_cycle(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """A health failure other than an unhealthy report skips the pane."""
        fake_client.errors["health"] = APIStatusError("health", 503, "unavailable")
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            status = app.status_header.paragraph_text
            assert "API Health: unknown" in status
            assert "Update Error: health failed with status 503" in status
            assert "find_clusters" not in fake_client.calls

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """Errors outside the API error hierarchy still reach the status line."""
        fake_client.errors["find_clusters"] = RuntimeError("bad cluster payload")
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert isinstance(app.last_error, RuntimeError)
            assert "Update Error: bad cluster payload" in app.status_header.paragraph_text

    @pytest.mark.asyncio
    async def test_busy_dashboard_drops_render(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """A render while the dashboard guard is held makes no API calls."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            fake_client.calls.clear()

            assert app.render_guard.try_acquire()
            try:
                await app.render_dashboard()
            finally:
                app.render_guard.release()

            assert fake_client.calls == []


class TestTabSwitching:
    """Smoke tests for number-key tab switching."""

    @pytest.mark.asyncio
    async def test_digit_switches_tab(self, app: CloudDashboardApp, fake_client) -> None:
        """Pressing 2 shows the volume pane and renders it."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            fake_client.calls.clear()

            await pilot.press("2")
            await _settle(app, pilot)

            cluster_pane, volume_pane = list(app.tabs)
            assert app.tabs.active_index == 1
            assert app.tab_strip.active_tab_index == 1
            assert app.tab_strip.active == "dashboard-tab-2"
            assert volume_pane.display is True
            assert cluster_pane.display is False
            assert "find_volumes" in fake_client.calls

    @pytest.mark.asyncio
    async def test_unknown_digit_is_ignored(self, app: CloudDashboardApp) -> None:
        """A digit without a tab leaves the active tab unchanged."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            await pilot.press("7")
            await pilot.pause()

            assert app.tabs.active_index == 0

    @pytest.mark.asyncio
    async def test_initial_tab(self, fake_client, filters) -> None:
        """The initial tab option selects the pane shown first."""
        config = DashboardConfig(filters=filters, initial_tab="volumes", refresh_interval=60.0)
        app = CloudDashboardApp(fake_client, config)
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)

            assert app.tabs.active_index == 1
            assert "find_volumes" in fake_client.calls
            assert "find_clusters" not in fake_client.calls

    @pytest.mark.asyncio
    async def test_clicking_tab_switches_pane(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """Activating a tab in the strip switches to its pane."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            fake_client.calls.clear()

            await pilot.click("#dashboard-tab-2")
            await pilot.pause()
            await _settle(app, pilot)

            assert app.tabs.active_index == 1
            assert app.tab_strip.active_tab_index == 1
            assert "find_volumes" in fake_client.calls


class TestResize:
    """Smoke tests for terminal resize handling."""

    @pytest.mark.asyncio
    async def test_resize_relays_out_and_renders(
        self, app: CloudDashboardApp, fake_client
    ) -> None:
        """A resized terminal refits every pane and starts a new render."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            cluster_pane, volume_pane = list(app.tabs)
            assert cluster_pane.rect == Rect(0, 5, 120, 39)
            version_calls = fake_client.calls.count("version_info")

            await pilot.resize_terminal(100, 30)
            await pilot.pause()
            await _settle(app, pilot)

            assert cluster_pane.rect == Rect(0, 5, 100, 29)
            assert volume_pane.rect == Rect(0, 5, 100, 29)
            assert cluster_pane.styles.width.value == 100
            assert cluster_pane.styles.height.value == 24
            assert fake_client.calls.count("version_info") > version_calls


class TestQuit:
    """Smoke tests for quitting."""

    @pytest.mark.asyncio
    async def test_q_quits_and_closes_client(self, app: CloudDashboardApp, fake_client) -> None:
        """Pressing q exits the app and releases the API client."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(app, pilot)
            await pilot.press("q")

        assert fake_client.closed is True
