"""
Metric Group — Upstream channels.

DOCS-IF-MIB::docsIfUpstreamChannelTable joined by channel index with
ARRIS-CM-DOC30-MIB::arrisCmDoc30IfUpstreamChannelExtendedTable and
DOCS-IF3-MIB::docsIf3CmStatusUsTable.
"""
from __future__ import annotations

import logging

from prometheus_client.metrics_core import Metric

from hub_exporter.snmp.collector_base import BaseMetricGroup
from hub_exporter.snmp.models import CmStatusUs, UpstreamChannel, UpstreamChannelExtended
from hub_exporter.snmp.oid_maps import (
    ARRIS_CM_DOC30_IF_UPSTREAM_CHANNEL_EXTENDED_TABLE,
    DOCS_IF3_CM_STATUS_US_TABLE,
    DOCS_IF_UPSTREAM_CHANNEL_TABLE,
)
from hub_exporter.snmp.table import Snapshot

logger = logging.getLogger(__name__)


class UpstreamMetrics(BaseMetricGroup):
    """Per-channel upstream gauges, labelled by channel index."""

    group_name = "upstream"

    def collect(self, snapshot: Snapshot) -> list[Metric]:
        channels = snapshot.parse_table(
            DOCS_IF_UPSTREAM_CHANNEL_TABLE, UpstreamChannel.from_row,
        )
        extended = snapshot.parse_table(
            ARRIS_CM_DOC30_IF_UPSTREAM_CHANNEL_EXTENDED_TABLE,
            UpstreamChannelExtended.from_row,
        )
        status = snapshot.parse_table(DOCS_IF3_CM_STATUS_US_TABLE, CmStatusUs.from_row)

        channel_id = self.indexed_gauge("up_channel_id", "Upstream Channel ID")
        frequency = self.indexed_gauge(
            "up_channel_frequency", "Upstream Channel Frequency (Hz)",
        )
        channel_type = self.indexed_gauge("up_channel_type", "Upstream Channel Type")
        symbol_rate = self.indexed_gauge(
            "up_channel_symbol_rate", "Upstream Channel Symbol Rate (ksps)",
        )
        modulation = self.indexed_gauge(
            "up_channel_modulation", "Upstream Channel Modulation",
        )
        tx_power = self.indexed_gauge(
            "up_channel_tx_power", "Upstream Channel Power (dBmV)",
        )
        t3_timeouts = self.indexed_gauge(
            "up_channel_t3_timeouts", "Upstream Channel T3 Timeouts",
        )
        t4_timeouts = self.indexed_gauge(
            "up_channel_t4_timeouts", "Upstream Channel T4 Timeouts",
        )

        rows = channels.join(extended, status)
        for index, channel, ext, us in rows:
            labels = [index]
            channel_id.add_metric(labels, channel.channel_id)
            frequency.add_metric(labels, channel.frequency)
            channel_type.add_metric(labels, int(channel.channel_type))
            symbol_rate.add_metric(labels, ext.symbol_rate)
            modulation.add_metric(labels, int(ext.modulation))
            tx_power.add_metric(labels, us.tx_power)
            t3_timeouts.add_metric(labels, us.t3_timeouts)
            t4_timeouts.add_metric(labels, us.t4_timeouts)

        logger.debug("Upstream: %d channels", len(rows))
        return [
            channel_id,
            frequency,
            channel_type,
            symbol_rate,
            modulation,
            tx_power,
            t3_timeouts,
            t4_timeouts,
        ]
