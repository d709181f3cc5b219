"""
Domain models decoded from table rows.

每個 model 提供 ``from_row(row)``：統一的 row decoder，可直接傳給
``Snapshot.parse_table(table_oid, Model.from_row)``。

Decoding is all-or-nothing: a missing column raises ``ColumnNotFound``, an
unparseable value ``InvalidValue`` and an unknown enum code ``UnknownEnumCode``.
Power and signal quality columns are tenths of a unit and are scaled here.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hub_exporter.core.enums import (
    DownstreamModulation,
    SchedulingType,
    ServiceFlowDirection,
    UpstreamChannelType,
    UpstreamModulation,
)
from hub_exporter.snmp.oid_maps import (
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_MODULATION,
    ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_SYMBOL_RATE,
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
    TENTHS,
)
from hub_exporter.snmp.table import Row


class HubModel(BaseModel):
    """Base class for all decoded rows."""

    model_config = ConfigDict(frozen=True)


# ── Downstream ───────────────────────────────────────────────────


class DownstreamChannel(HubModel):
    """docsIfDownstreamChannelEntry."""

    channel_id: int
    frequency: int  # Hz
    modulation: DownstreamModulation
    power: float  # dBmV

    @classmethod
    def from_row(cls, row: Row) -> DownstreamChannel:
        return cls(
            channel_id=row.parse_int(DOCS_IF_DOWN_CHANNEL_ID, "down_channel_id"),
            frequency=row.parse_int(
                DOCS_IF_DOWN_CHANNEL_FREQUENCY, "down_channel_frequency",
            ),
            modulation=row.parse_enum(
                DOCS_IF_DOWN_CHANNEL_MODULATION,
                DownstreamModulation,
                "down_channel_modulation",
            ),
            power=row.parse_float(
                DOCS_IF_DOWN_CHANNEL_POWER, "down_channel_power", divisor=TENTHS,
            ),
        )


class SignalQualityExt(HubModel):
    """docsIf3SignalQualityExtEntry."""

    rx_mer: float  # dB

    @classmethod
    def from_row(cls, row: Row) -> SignalQualityExt:
        return cls(
            rx_mer=row.parse_float(
                DOCS_IF3_SIGNAL_QUALITY_EXT_RX_MER, "rx_mer", divisor=TENTHS,
            ),
        )


class SignalQuality(HubModel):
    """docsIfSignalQualityEntry."""

    correcteds: int
    uncorrectables: int
    signal_noise: float  # dB

    @classmethod
    def from_row(cls, row: Row) -> SignalQuality:
        return cls(
            correcteds=row.parse_int(DOCS_IF_SIG_Q_CORRECTEDS, "correcteds"),
            uncorrectables=row.parse_int(
                DOCS_IF_SIG_Q_UNCORRECTABLES, "uncorrectables",
            ),
            signal_noise=row.parse_float(
                DOCS_IF_SIG_Q_SIGNAL_NOISE, "signal_noise", divisor=TENTHS,
            ),
        )


# ── Upstream ─────────────────────────────────────────────────────


class UpstreamChannel(HubModel):
    """docsIfUpstreamChannelEntry."""

    channel_id: int
    frequency: int  # Hz
    channel_type: UpstreamChannelType

    @classmethod
    def from_row(cls, row: Row) -> UpstreamChannel:
        return cls(
            channel_id=row.parse_int(DOCS_IF_UP_CHANNEL_ID, "up_channel_id"),
            frequency=row.parse_int(
                DOCS_IF_UP_CHANNEL_FREQUENCY, "up_channel_frequency",
            ),
            channel_type=row.parse_enum(
                DOCS_IF_UP_CHANNEL_TYPE, UpstreamChannelType, "up_channel_type",
            ),
        )


class UpstreamChannelExtended(HubModel):
    """arrisCmDoc30IfUpstreamChannelExtendedEntry."""

    symbol_rate: int  # ksps
    modulation: UpstreamModulation

    @classmethod
    def from_row(cls, row: Row) -> UpstreamChannelExtended:
        return cls(
            symbol_rate=row.parse_int(
                ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_SYMBOL_RATE, "symbol_rate",
            ),
            modulation=row.parse_enum(
                ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_MODULATION,
                UpstreamModulation,
                "up_channel_modulation",
            ),
        )


class CmStatusUs(HubModel):
    """docsIf3CmStatusUsEntry."""

    tx_power: float  # dBmV
    t3_timeouts: int
    t4_timeouts: int

    @classmethod
    def from_row(cls, row: Row) -> CmStatusUs:
        return cls(
            tx_power=row.parse_float(
                DOCS_IF3_CM_STATUS_US_TX_POWER, "tx_power", divisor=TENTHS,
            ),
            t3_timeouts=row.parse_int(DOCS_IF3_CM_STATUS_US_T3_TIMEOUTS, "t3_timeouts"),
            t4_timeouts=row.parse_int(DOCS_IF3_CM_STATUS_US_T4_TIMEOUTS, "t4_timeouts"),
        )


# ── QoS ──────────────────────────────────────────────────────────


class QosServiceFlow(HubModel):
    """docsQosServiceFlowEntry (only the columns used for primary flow lookup)."""

    direction: ServiceFlowDirection
    primary: bool

    @classmethod
    def from_row(cls, row: Row) -> QosServiceFlow:
        return cls(
            direction=row.parse_enum(
                DOCS_QOS_SERVICE_FLOW_DIRECTION,
                ServiceFlowDirection,
                "service_flow_direction",
            ),
            primary=row.parse_bool(DOCS_QOS_SERVICE_FLOW_PRIMARY, "service_flow_primary"),
        )


class QosParamSet(HubModel):
    """docsQosParamSetEntry."""

    max_traffic_rate: int
    max_traffic_burst: int
    min_reserved_rate: int
    max_concat_burst: int
    scheduling_type: SchedulingType

    @classmethod
    def from_row(cls, row: Row) -> QosParamSet:
        return cls(
            max_traffic_rate=row.parse_int(
                DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE, "max_traffic_rate",
            ),
            max_traffic_burst=row.parse_int(
                DOCS_QOS_PARAM_SET_MAX_TRAFFIC_BURST, "max_traffic_burst",
            ),
            min_reserved_rate=row.parse_int(
                DOCS_QOS_PARAM_SET_MIN_RESERVED_RATE, "min_reserved_rate",
            ),
            max_concat_burst=row.parse_int(
                DOCS_QOS_PARAM_SET_MAX_CONCAT_BURST, "max_concat_burst",
            ),
            scheduling_type=row.parse_enum(
                DOCS_QOS_PARAM_SET_SCHEDULING_TYPE, SchedulingType, "scheduling_type",
            ),
        )


class PrimaryServiceFlow(HubModel):
    """Primary service flow of one direction joined with its parameter set."""

    direction: ServiceFlowDirection
    index: str
    sfid: int
    param_set: QosParamSet
