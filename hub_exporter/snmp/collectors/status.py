"""
Metric Group — Connection status.

ARRIS-CM-DOC30-MIB registration state plus the frequencies of the acquired
downstream and ranged upstream channel (row "1" of each channel table).
"""
from __future__ import annotations

from prometheus_client.metrics_core import Metric

from hub_exporter.snmp.collector_base import BaseMetricGroup
from hub_exporter.snmp.oid_maps import (
    ARRIS_CM_DOC30_SW_REGISTRATION_STATE,
    DOCS_IF_DOWN_CHANNEL_FREQUENCY,
    DOCS_IF_DOWNSTREAM_CHANNEL_TABLE,
    DOCS_IF_UP_CHANNEL_FREQUENCY,
    DOCS_IF_UPSTREAM_CHANNEL_TABLE,
)
from hub_exporter.snmp.table import Snapshot

# The hub lists the channel it locked onto first under index 1.
ACQUIRED_CHANNEL_INDEX = "1"


class StatusMetrics(BaseMetricGroup):
    """Provisioning state and acquired channel frequencies."""

    group_name = "status"

    def collect(self, snapshot: Snapshot) -> list[Metric]:
        provisioning_state = snapshot.parse_scalar(ARRIS_CM_DOC30_SW_REGISTRATION_STATE)

        acquired_down = (
            snapshot.get_table(DOCS_IF_DOWNSTREAM_CHANNEL_TABLE)
            .require(ACQUIRED_CHANNEL_INDEX)
            .parse_int(DOCS_IF_DOWN_CHANNEL_FREQUENCY, "acquired_down_channel_frequency")
        )
        ranged_up = (
            snapshot.get_table(DOCS_IF_UPSTREAM_CHANNEL_TABLE)
            .require(ACQUIRED_CHANNEL_INDEX)
            .parse_int(DOCS_IF_UP_CHANNEL_FREQUENCY, "ranged_up_channel_frequency")
        )

        return [
            self.gauge(
                "acquired_down_channel_frequency",
                "Acquired Downstream Channel (Hz)",
                acquired_down,
            ),
            self.gauge(
                "ranged_up_channel_frequency",
                "Ranged Upstream Channel (Hz)",
                ranged_up,
            ),
            self.gauge("provisioning_state", "Provisioning State", provisioning_state),
        ]
