"""Prometheus exporter for DOCSIS cable modem hubs (Virgin Media Hub / Arris)."""

__version__ = "0.4.0"
