"""
Tests for the metric groups (status / downstream / upstream / configuration).

Every group reads the shared ``snapshot`` fixture; failure cases remove or
corrupt single keys of the ``router_status`` payload.
"""
from __future__ import annotations

import pytest

from hub_exporter.core.enums import ServiceFlowDirection
from hub_exporter.snmp.collectors import (
    ConfigurationMetrics,
    DownstreamMetrics,
    StatusMetrics,
    UpstreamMetrics,
)
from hub_exporter.snmp.collectors.configuration import extract_sfid, select_primary_flow
from hub_exporter.snmp.errors import (
    AmbiguousPrimaryFlow,
    ColumnNotFound,
    InvalidValue,
    MalformedIndex,
    ParamSetNotFound,
    PrimaryFlowNotFound,
    RowJoinMismatch,
    RowNotFound,
    ScalarNotFound,
    UnknownEnumCode,
)
from hub_exporter.snmp.models import QosParamSet, QosServiceFlow
from hub_exporter.snmp.oid_maps import (
    ARRIS_CM_DOC30_SW_REGISTRATION_STATE,
    DOCS_IF3_CM_STATUS_US_TX_POWER,
    DOCS_IF_DOWN_CHANNEL_FREQUENCY,
    DOCS_IF_SIG_Q_SIGNAL_NOISE,
    DOCS_IF_UP_CHANNEL_TYPE,
    DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE,
    DOCS_QOS_PARAM_SET_TABLE,
    DOCS_QOS_SERVICE_FLOW_PRIMARY,
    DOCS_QOS_SERVICE_FLOW_TABLE,
    DOCSIS_BASE_CAPABILITY,
)
from hub_exporter.snmp.table import Snapshot

NS = "virgin_media"


def _values(families) -> dict[str, dict[tuple, float]]:
    """family name → {label values → sample value}."""
    return {
        family.name: {
            tuple(sample.labels.values()): sample.value for sample in family.samples
        }
        for family in families
    }


# ══════════════════════════════════════════════════════════════════
# Status
# ══════════════════════════════════════════════════════════════════


class TestStatusMetrics:
    def test_collect(self, snapshot):
        families = StatusMetrics(NS).collect(snapshot)

        assert [f.name for f in families] == [
            "virgin_media_acquired_down_channel_frequency",
            "virgin_media_ranged_up_channel_frequency",
            "virgin_media_provisioning_state",
        ]
        values = _values(families)
        assert values["virgin_media_acquired_down_channel_frequency"] == {(): 331000000}
        assert values["virgin_media_ranged_up_channel_frequency"] == {(): 49600000}
        assert values["virgin_media_provisioning_state"] == {(): 12}

    def test_missing_registration_state(self, router_status):
        del router_status[f"{ARRIS_CM_DOC30_SW_REGISTRATION_STATE}.0"]
        with pytest.raises(ScalarNotFound):
            StatusMetrics(NS).collect(Snapshot(router_status))

    def test_missing_acquired_channel_row(self, router_status):
        for key in [k for k in router_status if k.endswith(".1")]:
            if key.startswith("1.3.6.1.2.1.10.127.1.1.1.1."):
                del router_status[key]
        with pytest.raises(RowNotFound) as exc_info:
            StatusMetrics(NS).collect(Snapshot(router_status))
        assert exc_info.value.index == "1"

    def test_without_namespace(self, snapshot):
        families = StatusMetrics().collect(snapshot)
        assert families[-1].name == "provisioning_state"


# ══════════════════════════════════════════════════════════════════
# Downstream
# ══════════════════════════════════════════════════════════════════


class TestDownstreamMetrics:
    def test_collect(self, snapshot):
        values = _values(DownstreamMetrics(NS).collect(snapshot))

        assert values["virgin_media_down_channel_id"] == {("1",): 1, ("3",): 7}
        assert values["virgin_media_down_channel_frequency"][("3",)] == 603000000
        assert values["virgin_media_down_channel_modulation"] == {("1",): 4, ("3",): 3}
        assert values["virgin_media_down_channel_power"][("3",)] == pytest.approx(20.5)
        assert values["virgin_media_down_channel_power"][("1",)] == pytest.approx(3.5)
        assert values["virgin_media_down_channel_rx_mer"][("3",)] == pytest.approx(40.2)
        assert values["virgin_media_down_channel_correcteds"][("3",)] == 17
        assert values["virgin_media_down_channel_uncorrectables"][("3",)] == 2
        assert values["virgin_media_down_channel_signal_noise"][("3",)] == pytest.approx(40.1)

    def test_all_families_labelled_by_index(self, snapshot):
        for family in DownstreamMetrics(NS).collect(snapshot):
            assert family.type == "gauge"
            assert all(list(s.labels) == ["index"] for s in family.samples)

    def test_missing_signal_noise_column(self, router_status):
        del router_status[f"{DOCS_IF_SIG_Q_SIGNAL_NOISE}.3"]
        # Row "3" still has other columns, so the row exists but fails decoding.
        with pytest.raises(ColumnNotFound):
            DownstreamMetrics(NS).collect(Snapshot(router_status))

    def test_join_mismatch(self, router_status):
        router_status[f"{DOCS_IF_DOWN_CHANNEL_FREQUENCY}.5"] = "100"
        for column in ("1.1", "1.4", "1.6"):
            router_status[f"1.3.6.1.2.1.10.127.1.1.1.{column}.5"] = "1"
        with pytest.raises(RowJoinMismatch) as exc_info:
            DownstreamMetrics(NS).collect(Snapshot(router_status))
        assert exc_info.value.index == "5"


# ══════════════════════════════════════════════════════════════════
# Upstream
# ══════════════════════════════════════════════════════════════════


class TestUpstreamMetrics:
    def test_collect(self, snapshot):
        values = _values(UpstreamMetrics(NS).collect(snapshot))

        assert values["virgin_media_up_channel_id"] == {("1",): 1, ("2",): 3}
        assert values["virgin_media_up_channel_frequency"][("2",)] == 36600000
        assert values["virgin_media_up_channel_type"][("2",)] == 2
        assert values["virgin_media_up_channel_symbol_rate"][("2",)] == 2560
        assert values["virgin_media_up_channel_modulation"][("2",)] == 7
        assert values["virgin_media_up_channel_tx_power"][("2",)] == pytest.approx(45.5)
        assert values["virgin_media_up_channel_t3_timeouts"][("2",)] == 1
        assert values["virgin_media_up_channel_t4_timeouts"][("2",)] == 0

    def test_unknown_channel_type(self, router_status):
        router_status[f"{DOCS_IF_UP_CHANNEL_TYPE}.2"] = "9"
        with pytest.raises(UnknownEnumCode):
            UpstreamMetrics(NS).collect(Snapshot(router_status))

    def test_missing_status_row(self, router_status):
        for key in list(router_status):
            if key.startswith("1.3.6.1.4.1.4491.2.1.20.1.2.1.") and key.endswith(".2"):
                del router_status[key]
        with pytest.raises(RowJoinMismatch):
            UpstreamMetrics(NS).collect(Snapshot(router_status))

    def test_invalid_tx_power(self, router_status):
        router_status[f"{DOCS_IF3_CM_STATUS_US_TX_POWER}.1"] = "n/a"
        with pytest.raises(InvalidValue) as exc_info:
            UpstreamMetrics(NS).collect(Snapshot(router_status))
        assert exc_info.value.field == "tx_power"


# ══════════════════════════════════════════════════════════════════
# Configuration
# ══════════════════════════════════════════════════════════════════


class TestExtractSfid:
    @pytest.mark.parametrize(
        "index, expected", [("2.3904", 3904), ("3905", 3905), ("1.2.7", 7)],
    )
    def test_last_component(self, index, expected):
        assert extract_sfid(index) == expected

    @pytest.mark.parametrize("index", ["2.", "2.abc", "", "2.³"])
    def test_invalid(self, index):
        with pytest.raises(MalformedIndex):
            extract_sfid(index)


class TestSelectPrimaryFlow:
    def _tables(self, router_status):
        snap = Snapshot(router_status)
        return (
            snap.parse_table(DOCS_QOS_SERVICE_FLOW_TABLE, QosServiceFlow.from_row),
            snap.parse_table(DOCS_QOS_PARAM_SET_TABLE, QosParamSet.from_row),
        )

    def test_selects_primary_flow_per_direction(self, router_status):
        flows, params = self._tables(router_status)

        down = select_primary_flow(flows, params, ServiceFlowDirection.DOWNSTREAM)
        up = select_primary_flow(flows, params, ServiceFlowDirection.UPSTREAM)

        assert (down.index, down.sfid) == ("2.3904", 3904)
        assert down.param_set.max_traffic_rate == 230000000
        assert (up.index, up.sfid) == ("2.3905", 3905)
        assert up.param_set.max_concat_burst == 16320

    def test_no_primary_flow(self, router_status):
        router_status[f"{DOCS_QOS_SERVICE_FLOW_PRIMARY}.2.3905"] = "2"
        flows, params = self._tables(router_status)
        with pytest.raises(PrimaryFlowNotFound) as exc_info:
            select_primary_flow(flows, params, ServiceFlowDirection.UPSTREAM)
        assert exc_info.value.direction == "upstream"

    def test_multiple_primary_flows(self, router_status):
        router_status[f"{DOCS_QOS_SERVICE_FLOW_PRIMARY}.2.3906"] = "1"
        flows, params = self._tables(router_status)
        with pytest.raises(AmbiguousPrimaryFlow) as exc_info:
            select_primary_flow(flows, params, ServiceFlowDirection.DOWNSTREAM)
        assert exc_info.value.indexes == ["2.3904", "2.3906"]

    def test_param_set_missing(self, router_status):
        for key in list(router_status):
            if key.startswith("1.3.6.1.4.1.4491.2.1.21.1.2.1.") and key.endswith(".2.3904"):
                del router_status[key]
        flows, params = self._tables(router_status)
        with pytest.raises(ParamSetNotFound) as exc_info:
            select_primary_flow(flows, params, ServiceFlowDirection.DOWNSTREAM)
        assert exc_info.value.index == "2.3904"


class TestConfigurationMetrics:
    def test_collect(self, snapshot):
        values = _values(ConfigurationMetrics(NS).collect(snapshot))

        assert values == {
            "virgin_media_docsis_mode": {(): 3},
            "virgin_media_primary_downstream_sfid": {(): 3904},
            "virgin_media_primary_downstream_max_traffic_rate": {(): 230000000},
            "virgin_media_primary_downstream_max_traffic_burst": {(): 42600},
            "virgin_media_primary_downstream_min_reserved_rate": {(): 0},
            "virgin_media_primary_upstream_sfid": {(): 3905},
            "virgin_media_primary_upstream_max_traffic_rate": {(): 20000000},
            "virgin_media_primary_upstream_max_traffic_burst": {(): 42600},
            "virgin_media_primary_upstream_min_reserved_rate": {(): 0},
            "virgin_media_primary_upstream_max_concat_burst": {(): 16320},
            "virgin_media_primary_upstream_scheduling_type": {(): 2},
        }

    def test_missing_docsis_mode(self, router_status):
        del router_status[f"{DOCSIS_BASE_CAPABILITY}.0"]
        with pytest.raises(ScalarNotFound):
            ConfigurationMetrics(NS).collect(Snapshot(router_status))

    def test_non_primary_flow_is_still_decoded(self, router_status):
        # Every row of the param set table must decode, even unused ones.
        router_status[f"{DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE}.2.3906"] = "fast"
        with pytest.raises(InvalidValue, match="max_traffic_rate"):
            ConfigurationMetrics(NS).collect(Snapshot(router_status))
