"""Root conftest — shared fixtures for all tests."""
from __future__ import annotations

import pytest

from hub_exporter.snmp.oid_maps import (
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_MODULATION,
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_SYMBOL_RATE,
    ARRIS_CM_DOC30_SW_REGISTRATION_STATE,
    DOCS_IF3_CM_STATUS_US_T3_TIMEOUTS,
    DOCS_IF3_CM_STATUS_US_T4_TIMEOUTS,
    DOCS_IF3_CM_STATUS_US_TX_POWER,
    DOCS_IF3_SIGNAL_QUALITY_EXT_RX_MER,
    DOCS_IF_DOWN_CHANNEL_FREQUENCY,
    DOCS_IF_DOWN_CHANNEL_ID,
    DOCS_IF_DOWN_CHANNEL_MODULATION,
    DOCS_IF_DOWN_CHANNEL_POWER,
    DOCS_IF_SIG_Q_CORRECTEDS,
    DOCS_IF_SIG_Q_SIGNAL_NOISE,
    DOCS_IF_SIG_Q_UNCORRECTABLES,
    DOCS_IF_UP_CHANNEL_FREQUENCY,
    DOCS_IF_UP_CHANNEL_ID,
    DOCS_IF_UP_CHANNEL_TYPE,
    DOCS_QOS_PARAM_SET_MAX_CONCAT_BURST,
    DOCS_QOS_PARAM_SET_MAX_TRAFFIC_BURST,
    DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE,
    DOCS_QOS_PARAM_SET_MIN_RESERVED_RATE,
    DOCS_QOS_PARAM_SET_SCHEDULING_TYPE,
    DOCS_QOS_SERVICE_FLOW_DIRECTION,
    DOCS_QOS_SERVICE_FLOW_PRIMARY,
    DOCSIS_BASE_CAPABILITY,
)
from hub_exporter.snmp.table import Snapshot

# ══════════════════════════════════════════════════════════════════
# Router status sample
#
# Downstream channels at index 1 and 3, upstream channels at index 1 and 2,
# primary downstream flow 2.3904, primary upstream flow 2.3905.
# ══════════════════════════════════════════════════════════════════

_COLUMNS: dict[str, dict[str, str]] = {
    # column OID → {row index → raw value}
    DOCS_IF_DOWN_CHANNEL_ID: {"1": "1", "3": "7"},
    DOCS_IF_DOWN_CHANNEL_FREQUENCY: {"1": "331000000", "3": "603000000"},
    DOCS_IF_DOWN_CHANNEL_MODULATION: {"1": "4", "3": "3"},
    DOCS_IF_DOWN_CHANNEL_POWER: {"1": "35", "3": "205"},
    DOCS_IF3_SIGNAL_QUALITY_EXT_RX_MER: {"1": "380", "3": "402"},
    DOCS_IF_SIG_Q_CORRECTEDS: {"1": "10", "3": "17"},
    DOCS_IF_SIG_Q_UNCORRECTABLES: {"1": "0", "3": "2"},
    DOCS_IF_SIG_Q_SIGNAL_NOISE: {"1": "380", "3": "401"},
    DOCS_IF_UP_CHANNEL_ID: {"1": "1", "2": "3"},
    DOCS_IF_UP_CHANNEL_FREQUENCY: {"1": "49600000", "2": "36600000"},
    DOCS_IF_UP_CHANNEL_TYPE: {"1": "2", "2": "2"},
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_SYMBOL_RATE: {"1": "5120", "2": "2560"},
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_MODULATION: {"1": "5", "2": "7"},
    DOCS_IF3_CM_STATUS_US_TX_POWER: {"1": "440", "2": "455"},
    DOCS_IF3_CM_STATUS_US_T3_TIMEOUTS: {"1": "0", "2": "1"},
    DOCS_IF3_CM_STATUS_US_T4_TIMEOUTS: {"1": "0", "2": "0"},
    DOCS_QOS_SERVICE_FLOW_DIRECTION: {"2.3904": "1", "2.3905": "2", "2.3906": "1"},
    DOCS_QOS_SERVICE_FLOW_PRIMARY: {"2.3904": "1", "2.3905": "1", "2.3906": "2"},
    DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE: {
        "2.3904": "230000000", "2.3905": "20000000", "2.3906": "0",
    },
    DOCS_QOS_PARAM_SET_MAX_TRAFFIC_BURST: {
        "2.3904": "42600", "2.3905": "42600", "2.3906": "3044",
    },
    DOCS_QOS_PARAM_SET_MIN_RESERVED_RATE: {"2.3904": "0", "2.3905": "0", "2.3906": "0"},
    DOCS_QOS_PARAM_SET_MAX_CONCAT_BURST: {"2.3904": "0", "2.3905": "16320", "2.3906": "0"},
    DOCS_QOS_PARAM_SET_SCHEDULING_TYPE: {"2.3904": "1", "2.3905": "2", "2.3906": "1"},
}

_SCALARS: dict[str, str] = {
    DOCSIS_BASE_CAPABILITY: "3",
    ARRIS_CM_DOC30_SW_REGISTRATION_STATE: "12",
}


def make_router_status() -> dict[str, str]:
    """Build a fresh, complete router status payload."""
    payload: dict[str, str] = {
        f"{oid}.0": value for oid, value in _SCALARS.items()
    }
    for column, rows in _COLUMNS.items():
        for index, value in rows.items():
            payload[f"{column}.{index}"] = value
    # Unrelated keys the hub also returns
    payload["1.3.6.1.2.1.69.1.1.3.0"] = "1"
    payload["1.3.6.1.4.1.4115.1.20.1.1.1.7.1.3.200"] = "16"
    return payload


@pytest.fixture
def router_status() -> dict[str, str]:
    """Complete router status payload (mutable copy per test)."""
    return make_router_status()


@pytest.fixture
def snapshot(router_status) -> Snapshot:
    """Snapshot of the complete router status payload."""
    return Snapshot(router_status)
