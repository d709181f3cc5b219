"""
BaseMetricGroup — metric group 抽象基底類別。

每個 metric group（status / downstream / upstream / configuration）繼承此類別，
實作 collect()：從同一份 Snapshot 取出需要的 scalar / table，轉成 gauges。
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric

from hub_exporter.snmp.table import Snapshot

logger = logging.getLogger(__name__)

INDEX_LABEL = "index"


class BaseMetricGroup(ABC):
    """
    Abstract base for all metric groups.

    Each group knows:
    - Which scalars/tables of the snapshot it needs
    - How to decode them into domain models
    - Which gauges it exposes

    ``collect()`` either returns every gauge of the group or raises; it never
    returns a partial set.
    """

    # Short name used in logs
    group_name: str

    def __init__(self, namespace: str = "") -> None:
        self.namespace = namespace

    @abstractmethod
    def collect(self, snapshot: Snapshot) -> list[Metric]:
        """
        Build this group's gauges from one snapshot.

        Raises:
            ExtractionError: if anything the group needs is missing or invalid.
        """
        ...

    def metric_name(self, name: str) -> str:
        """Apply the namespace prefix: ``docsis_mode`` → ``virgin_media_docsis_mode``."""
        return f"{self.namespace}_{name}" if self.namespace else name

    def gauge(
        self, name: str, documentation: str, value: float,
    ) -> GaugeMetricFamily:
        """Unlabelled gauge holding a single value."""
        return GaugeMetricFamily(self.metric_name(name), documentation, value=value)

    def indexed_gauge(self, name: str, documentation: str) -> GaugeMetricFamily:
        """Gauge labelled by table row index; fill with ``add_metric([index], v)``."""
        return GaugeMetricFamily(
            self.metric_name(name), documentation, labels=[INDEX_LABEL],
        )
