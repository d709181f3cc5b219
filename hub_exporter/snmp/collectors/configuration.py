"""
Metric Group — Configuration / QoS.

DOCSIS mode (DOCS-IF-MIB::docsIfDocsisBaseCapability) and the primary
downstream / upstream service flow from DOCS-QOS3-MIB.

Primary flow lookup:
1. Decode docsQosServiceFlowTable and docsQosParamSetTable.
2. Pick the single service flow with the wanted direction and primary=true.
3. Take the param set row with the same index.
4. SFID = last component of the index (ifIndex.sfid).
"""
from __future__ import annotations

import logging

from prometheus_client.metrics_core import Metric

from hub_exporter.core.enums import ServiceFlowDirection
from hub_exporter.snmp.collector_base import BaseMetricGroup
from hub_exporter.snmp.errors import (
    AmbiguousPrimaryFlow,
    MalformedIndex,
    ParamSetNotFound,
    PrimaryFlowNotFound,
)
from hub_exporter.snmp.models import PrimaryServiceFlow, QosParamSet, QosServiceFlow
from hub_exporter.snmp.oid_maps import (
    DOCS_QOS_PARAM_SET_TABLE,
    DOCS_QOS_SERVICE_FLOW_TABLE,
    DOCSIS_BASE_CAPABILITY,
)
from hub_exporter.snmp.table import Snapshot, Table

logger = logging.getLogger(__name__)


def extract_sfid(index: str) -> int:
    """``"2.3904"`` → ``3904``."""
    last = index.rsplit(".", 1)[-1]
    if not (last.isascii() and last.isdigit()):
        raise MalformedIndex(index, "unable to extract SFID")
    return int(last)


def select_primary_flow(
    flows: Table[QosServiceFlow],
    param_sets: Table[QosParamSet],
    direction: ServiceFlowDirection,
) -> PrimaryServiceFlow:
    """
    Select the primary service flow of ``direction`` and its parameter set.

    Raises:
        PrimaryFlowNotFound: no flow of that direction is flagged primary.
        AmbiguousPrimaryFlow: more than one flow is.
        ParamSetNotFound: the param set table has no row for the flow index.
        MalformedIndex: the flow index does not end in a numeric SFID.
    """
    candidates = [
        index
        for index, flow in flows.items()
        if flow.direction == direction and flow.primary
    ]
    if not candidates:
        raise PrimaryFlowNotFound(direction.label)
    if len(candidates) > 1:
        raise AmbiguousPrimaryFlow(direction.label, candidates)

    index = candidates[0]
    param_set = param_sets.get(index)
    if param_set is None:
        raise ParamSetNotFound(direction.label, index)

    return PrimaryServiceFlow(
        direction=direction,
        index=index,
        sfid=extract_sfid(index),
        param_set=param_set,
    )


class ConfigurationMetrics(BaseMetricGroup):
    """DOCSIS mode and primary service flow parameters."""

    group_name = "configuration"

    def collect(self, snapshot: Snapshot) -> list[Metric]:
        docsis_mode = snapshot.parse_scalar(DOCSIS_BASE_CAPABILITY)

        flows = snapshot.parse_table(DOCS_QOS_SERVICE_FLOW_TABLE, QosServiceFlow.from_row)
        param_sets = snapshot.parse_table(DOCS_QOS_PARAM_SET_TABLE, QosParamSet.from_row)

        down = select_primary_flow(flows, param_sets, ServiceFlowDirection.DOWNSTREAM)
        up = select_primary_flow(flows, param_sets, ServiceFlowDirection.UPSTREAM)
        logger.debug(
            "Primary flows: downstream=%s upstream=%s", down.index, up.index,
        )

        return [
            self.gauge("docsis_mode", "DOCSIS Mode", docsis_mode),
            self.gauge(
                "primary_downstream_sfid",
                "Primary Downstream Service Flow SFID",
                down.sfid,
            ),
            self.gauge(
                "primary_downstream_max_traffic_rate",
                "Primary Downstream Service Flow Max Traffic Rate",
                down.param_set.max_traffic_rate,
            ),
            self.gauge(
                "primary_downstream_max_traffic_burst",
                "Primary Downstream Service Flow Max Traffic Burst",
                down.param_set.max_traffic_burst,
            ),
            self.gauge(
                "primary_downstream_min_reserved_rate",
                "Primary Downstream Service Flow Min Traffic Rate",
                down.param_set.min_reserved_rate,
            ),
            self.gauge(
                "primary_upstream_sfid",
                "Primary Upstream Service Flow SFID",
                up.sfid,
            ),
            self.gauge(
                "primary_upstream_max_traffic_rate",
                "Primary Upstream Service Flow Max Traffic Rate",
                up.param_set.max_traffic_rate,
            ),
            self.gauge(
                "primary_upstream_max_traffic_burst",
                "Primary Upstream Service Flow Max Traffic Burst",
                up.param_set.max_traffic_burst,
            ),
            self.gauge(
                "primary_upstream_min_reserved_rate",
                "Primary Upstream Service Flow Min Traffic Rate",
                up.param_set.min_reserved_rate,
            ),
            self.gauge(
                "primary_upstream_max_concat_burst",
                "Primary Upstream Service Flow Max Concatenated Burst",
                up.param_set.max_concat_burst,
            ),
            self.gauge(
                "primary_upstream_scheduling_type",
                "Primary Upstream Service Flow Scheduling Type",
                int(up.param_set.scheduling_type),
            ),
        ]
