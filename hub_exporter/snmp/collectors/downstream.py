"""
Metric Group — Downstream channels.

DOCS-IF-MIB::docsIfDownstreamChannelTable joined by channel index with
DOCS-IF3-MIB::docsIf3SignalQualityExtTable and DOCS-IF-MIB::docsIfSignalQualityTable.
"""
from __future__ import annotations

import logging

from prometheus_client.metrics_core import Metric

from hub_exporter.snmp.collector_base import BaseMetricGroup
from hub_exporter.snmp.models import DownstreamChannel, SignalQuality, SignalQualityExt
from hub_exporter.snmp.oid_maps import (
    DOCS_IF3_SIGNAL_QUALITY_EXT_TABLE,
    DOCS_IF_DOWNSTREAM_CHANNEL_TABLE,
    DOCS_IF_SIGNAL_QUALITY_TABLE,
)
from hub_exporter.snmp.table import Snapshot

logger = logging.getLogger(__name__)


class DownstreamMetrics(BaseMetricGroup):
    """Per-channel downstream gauges, labelled by channel index."""

    group_name = "downstream"

    def collect(self, snapshot: Snapshot) -> list[Metric]:
        channels = snapshot.parse_table(
            DOCS_IF_DOWNSTREAM_CHANNEL_TABLE, DownstreamChannel.from_row,
        )
        quality_ext = snapshot.parse_table(
            DOCS_IF3_SIGNAL_QUALITY_EXT_TABLE, SignalQualityExt.from_row,
        )
        quality = snapshot.parse_table(
            DOCS_IF_SIGNAL_QUALITY_TABLE, SignalQuality.from_row,
        )

        channel_id = self.indexed_gauge("down_channel_id", "Downstream Channel ID")
        frequency = self.indexed_gauge(
            "down_channel_frequency", "Downstream Channel Frequency (Hz)",
        )
        modulation = self.indexed_gauge(
            "down_channel_modulation", "Downstream Channel Modulation",
        )
        power = self.indexed_gauge(
            "down_channel_power", "Downstream Channel Power (dBmV)",
        )
        rx_mer = self.indexed_gauge(
            "down_channel_rx_mer", "Downstream Channel RxMER (dB)",
        )
        correcteds = self.indexed_gauge(
            "down_channel_correcteds", "Downstream Channel Pre RS Errors",
        )
        uncorrectables = self.indexed_gauge(
            "down_channel_uncorrectables", "Downstream Channel Post RS Errors",
        )
        signal_noise = self.indexed_gauge(
            "down_channel_signal_noise", "Downstream Channel SNR (dB)",
        )

        rows = channels.join(quality_ext, quality)

        for index, channel, ext, sq in rows:
            labels = [index]
            channel_id.add_metric(labels, channel.channel_id)
            frequency.add_metric(labels, channel.frequency)
            modulation.add_metric(labels, int(channel.modulation))
            power.add_metric(labels, channel.power)
            rx_mer.add_metric(labels, ext.rx_mer)
            correcteds.add_metric(labels, sq.correcteds)
            uncorrectables.add_metric(labels, sq.uncorrectables)
            signal_noise.add_metric(labels, sq.signal_noise)

        logger.debug("Downstream: %d channels", len(rows))
        return [
            channel_id,
            frequency,
            modulation,
            power,
            rx_mer,
            correcteds,
            uncorrectables,
            signal_noise,
        ]
