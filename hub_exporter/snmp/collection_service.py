"""
Hub Collection Service.

HubCollector 是註冊在 Prometheus registry 上的 custom collector：
每次 scrape 都會重新抓一次 router status，依序交給各 metric group 處理。

Fail-fast: if the fetch or any group fails, the scrape exposes ``up 0`` and
nothing else. Scrapes are serialised; a concurrent scrape waits for the one
in flight and then runs its own cycle.
"""
from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterator, Sequence

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

from hub_exporter.core.enums import CycleState
from hub_exporter.snmp.client import HubClient
from hub_exporter.snmp.collector_base import BaseMetricGroup
from hub_exporter.snmp.errors import FetchFailed, HubExporterError

logger = logging.getLogger(__name__)


def build_metric_groups(namespace: str = "") -> list[BaseMetricGroup]:
    """Build the metric groups in evaluation order."""
    from hub_exporter.snmp.collectors import (
        ConfigurationMetrics,
        DownstreamMetrics,
        StatusMetrics,
        UpstreamMetrics,
    )

    return [
        StatusMetrics(namespace),
        DownstreamMetrics(namespace),
        UpstreamMetrics(namespace),
        ConfigurationMetrics(namespace),
    ]


class HubCollector(Collector):
    """
    Prometheus collector for one hub.

    States per scrape: idle → fetching → extracting → ready | degraded → idle.
    """

    def __init__(
        self,
        client: HubClient,
        namespace: str = "",
        groups: Sequence[BaseMetricGroup] | None = None,
    ) -> None:
        self._client = client
        self.namespace = namespace
        self._groups = list(groups) if groups is not None else build_metric_groups(namespace)
        self._lock = threading.Lock()

        self.state = CycleState.IDLE
        self.last_outcome: CycleState | None = None
        self.last_error: str | None = None
        self.last_duration: float | None = None

    def _up(self, value: int) -> GaugeMetricFamily:
        name = f"{self.namespace}_up" if self.namespace else "up"
        return GaugeMetricFamily(
            name, "Whether the Virgin Media scrape was successful.", value=value,
        )

    def update(self) -> list[Metric]:
        """
        Run fetch + every metric group against one snapshot.

        Returns:
            All domain metric families of this cycle.

        Raises:
            HubExporterError: on the first failing step.
        """
        self.state = CycleState.FETCHING
        snapshot = self._client.get_router_status()

        self.state = CycleState.EXTRACTING
        families: list[Metric] = []
        for group in self._groups:
            families.extend(group.collect(snapshot))
        return families

    def _finish(self, outcome: CycleState, error: str | None, started: float) -> None:
        self.last_outcome = outcome
        self.last_error = error
        self.last_duration = time.monotonic() - started
        self.state = CycleState.IDLE

    def collect(self) -> Iterator[Metric]:
        """
        Called by the registry on every scrape.

        Yields ``up`` followed by every domain family, or ``up 0`` alone.
        """
        with self._lock:
            started = time.monotonic()
            try:
                families = self.update()
            except FetchFailed as e:
                logger.error("error fetching router status: %s", e)
                self._finish(CycleState.DEGRADED, str(e), started)
                families = None
            except HubExporterError as e:
                logger.error("error updating metrics: %s", e)
                self._finish(CycleState.DEGRADED, str(e), started)
                families = None
            except Exception as e:
                logger.exception("unexpected error updating metrics")
                self._finish(CycleState.DEGRADED, f"{type(e).__name__}: {e}", started)
                families = None
            else:
                self._finish(CycleState.READY, None, started)

        if families is None:
            yield self._up(0)
            return

        logger.debug(
            "Scrape ok: %d families in %.3fs", len(families), self.last_duration,
        )
        yield self._up(1)
        yield from families
