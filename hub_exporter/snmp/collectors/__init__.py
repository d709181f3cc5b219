"""Metric groups, one per area of the router status dump."""
from hub_exporter.snmp.collectors.configuration import ConfigurationMetrics
from hub_exporter.snmp.collectors.downstream import DownstreamMetrics
from hub_exporter.snmp.collectors.status import StatusMetrics
from hub_exporter.snmp.collectors.upstream import UpstreamMetrics

__all__ = [
    "ConfigurationMetrics",
    "DownstreamMetrics",
    "StatusMetrics",
    "UpstreamMetrics",
]
