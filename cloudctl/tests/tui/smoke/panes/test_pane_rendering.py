"""Smoke tests for pane rendering inside a running Textual app."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult

from cloudctl.api.errors import APITimeoutError, ForbiddenError
from cloudctl.controllers import ClusterController, VolumeController
from cloudctl.panes import ClusterPane, DashboardPane, VolumePane


class PaneHostApp(App[None]):
    """Minimal app hosting a single pane."""

    def __init__(self, pane: DashboardPane) -> None:
        super().__init__()
        self.pane = pane

    def compose(self) -> ComposeResult:
        yield self.pane


# =============================================================================
# Cluster pane
# =============================================================================


class TestClusterPaneRendering:
    """Smoke tests for ClusterPane.render_pane."""

    @pytest.fixture
    def pane(self, fake_client, filters) -> ClusterPane:
        """Create a cluster pane with a short deadline."""
        return ClusterPane(ClusterController(fake_client, filters, request_timeout=0.1))

    @pytest.mark.asyncio
    async def test_renders_summary(
        self,
        pane: ClusterPane,
        fake_client,
        cluster_factory,
        condition_factory,
        healthy_condition_list,
    ) -> None:
        """Histogram, gauges and tables reflect the fetched clusters."""
        fake_client.clusters = [
            cluster_factory("good", conditions=healthy_condition_list),
            cluster_factory(
                "bad",
                "Error",
                conditions=[condition_factory("EveryNodeReady", "False", "2 nodes down")],
                last_errors=[
                    {"description": "quota exceeded", "lastUpdateTime": "2024-05-01T09:00:00Z"}
                ],
            ),
        ]
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            await pilot.pause()

            assert pane.health_chart.bar_values == [1.0, 0.0, 1.0]
            assert pane.gauges["API"].percent == 50
            assert pane.gauges["Nodes"].percent == 50
            assert pane.problems_table.rows_snapshot == [
                ("bad", "(EveryNodeReady) 2 nodes down")
            ]
            assert pane.problems_table.row_count == 1
            assert pane.last_errors_table.rows_snapshot == [("bad", "quota exceeded")]

    @pytest.mark.asyncio
    async def test_zero_clusters_draws_nothing(self, pane: ClusterPane, fake_client) -> None:
        """With no clusters no widget is redrawn."""
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            await pilot.pause()

            assert pane.health_chart.draw_count == 0
            assert all(gauge.percent == 0 for gauge in pane.gauges.values())
            assert fake_client.calls == ["find_clusters"]

    @pytest.mark.asyncio
    async def test_timeout_keeps_previous_render(
        self, pane: ClusterPane, fake_client, cluster_factory
    ) -> None:
        """A stalled fetch raises and leaves the last drawn data on screen."""
        fake_client.clusters = [cluster_factory("a"), cluster_factory("b", "Processing")]
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            fake_client.delays["find_clusters"] = 1.0

            with pytest.raises(APITimeoutError):
                await pane.render_pane()
            await pilot.pause()

            assert pane.health_chart.bar_values == [1.0, 1.0, 0.0]
            assert pane.health_chart.draw_count == 1
            assert not pane.render_guard.busy

    @pytest.mark.asyncio
    async def test_busy_pane_drops_render(self, pane: ClusterPane, fake_client) -> None:
        """A render request while the pane guard is held is dropped."""
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)):
            assert pane.render_guard.try_acquire()
            try:
                await pane.render_pane()
            finally:
                pane.render_guard.release()

            assert fake_client.calls == []
            assert pane.render_guard.dropped == 1


# =============================================================================
# Volume pane
# =============================================================================


class TestVolumePaneRendering:
    """Smoke tests for VolumePane.render_pane."""

    @pytest.fixture
    def pane(self, fake_client, filters) -> VolumePane:
        """Create a volume pane."""
        return VolumePane(VolumeController(fake_client, filters))

    @pytest.fixture
    def volumes(self) -> list[dict]:
        """Two volumes of 1 GiB each."""
        return [
            {
                "VolumeID": "v1",
                "State": "Available",
                "ProtectionState": "FullyProtected",
                "Statistics": {"PhysicalUsedStorage": 1024**3},
            },
            {
                "VolumeID": "v2",
                "State": "Failed",
                "ProtectionState": "Degraded",
                "Statistics": {"PhysicalUsedStorage": 1024**3},
            },
        ]

    @pytest.mark.asyncio
    async def test_renders_volumes_and_storage(
        self, pane: VolumePane, fake_client, volumes: list[dict]
    ) -> None:
        """Volume charts, the usage paragraph and the storage section are drawn."""
        fake_client.volumes = volumes
        fake_client.storage_clusters = [
            {
                "UUID": "c1",
                "Health": {"State": "Warning"},
                "Servers": [{"Name": "s1", "State": "Enabled"}, {"Name": "s2", "State": "Failed"}],
                "Statistics": {
                    "FreePhysicalStorage": 5,
                    "PhysicalUsedStorage": 95,
                    "CompressionRatio": 0.8,
                },
            }
        ]
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            await pilot.pause()

            assert pane.volume_state_chart.bar_values == [1.0, 1.0, 0.0, 0.0]
            assert pane.protection_state_chart.bar_values == [1.0, 1.0, 0.0, 0.0, 0.0]
            assert pane.used_space.paragraph_text == (
                "Summed up physical size of volumes: 2.0 GiB"
            )
            assert pane.physical_free_gauge.percent == 5
            assert pane.physical_free_gauge.bar_color == "red"
            assert pane.compression_ratio_gauge.percent == 80
            assert pane.cluster_state_chart.bar_values == [0.0, 1.0, 0.0, 0.0]
            assert pane.server_state_chart.bar_values == [1.0, 0.0, 1.0, 0.0]

    @pytest.mark.asyncio
    async def test_forbidden_storage_skips_section(
        self, pane: VolumePane, fake_client, volumes: list[dict]
    ) -> None:
        """Non-admins see volume data only, without an error."""
        fake_client.volumes = volumes
        fake_client.errors["storage_cluster_info"] = ForbiddenError("storage cluster info")
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            await pilot.pause()

            assert pane.volume_state_chart.draw_count == 1
            assert pane.cluster_state_chart.draw_count == 0
            assert pane.server_state_chart.draw_count == 0
            assert pane.physical_free_gauge.percent == 0

    @pytest.mark.asyncio
    async def test_all_zero_histograms_keep_previous_bars(
        self, pane: VolumePane, fake_client, volumes: list[dict]
    ) -> None:
        """When every volume disappears the last bars stay on screen."""
        fake_client.volumes = volumes
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            fake_client.volumes = []
            await pane.render_pane()
            await pilot.pause()

            assert pane.volume_state_chart.bar_values == [1.0, 1.0, 0.0, 0.0]
            assert pane.volume_state_chart.draw_count == 1
            assert pane.used_space.paragraph_text == (
                "Summed up physical size of volumes: 0 B"
            )

    @pytest.mark.asyncio
    async def test_storage_without_capacity_skips_free_gauge(
        self, pane: VolumePane, fake_client, volumes: list[dict]
    ) -> None:
        """A free-space gauge without capacity data is left untouched."""
        fake_client.volumes = volumes
        fake_client.storage_clusters = [{"UUID": "c1", "Health": {"State": "OK"}}]
        app = PaneHostApp(pane)
        async with app.run_test(size=(120, 40)) as pilot:
            await pane.render_pane()
            await pilot.pause()

            assert pane.physical_free_gauge.percent == 0
            assert pane.cluster_state_chart.bar_values == [1.0, 0.0, 0.0, 0.0]
