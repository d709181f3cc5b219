"""
OID Constants.

所有 OID 常數集中管理於此，collector 與 model 只需引用。
Table constants name the table (``B``); column constants name ``B.1.<column>``.
"""
from __future__ import annotations

from hub_exporter.snmp.oid import OID

# =============================================================================
# DOCS-IF-MIB (RFC 4546)
# =============================================================================

DOCSIS_BASE_CAPABILITY = OID("1.3.6.1.2.1.10.127.1.1.5")  # scalar, 1=docsis10 .. 4=docsis31

# docsIfDownstreamChannelTable
DOCS_IF_DOWNSTREAM_CHANNEL_TABLE = OID("1.3.6.1.2.1.10.127.1.1.1")
DOCS_IF_DOWN_CHANNEL_ID = OID("1.3.6.1.2.1.10.127.1.1.1.1.1")
DOCS_IF_DOWN_CHANNEL_FREQUENCY = OID("1.3.6.1.2.1.10.127.1.1.1.1.2")    # Hz
DOCS_IF_DOWN_CHANNEL_MODULATION = OID("1.3.6.1.2.1.10.127.1.1.1.1.4")
DOCS_IF_DOWN_CHANNEL_POWER = OID("1.3.6.1.2.1.10.127.1.1.1.1.6")        # 0.1 dBmV

# docsIfUpstreamChannelTable
DOCS_IF_UPSTREAM_CHANNEL_TABLE = OID("1.3.6.1.2.1.10.127.1.1.2")
DOCS_IF_UP_CHANNEL_ID = OID("1.3.6.1.2.1.10.127.1.1.2.1.1")
DOCS_IF_UP_CHANNEL_FREQUENCY = OID("1.3.6.1.2.1.10.127.1.1.2.1.2")      # Hz
DOCS_IF_UP_CHANNEL_TYPE = OID("1.3.6.1.2.1.10.127.1.1.2.1.15")

# docsIfSignalQualityTable
DOCS_IF_SIGNAL_QUALITY_TABLE = OID("1.3.6.1.2.1.10.127.1.1.4")
DOCS_IF_SIG_Q_CORRECTEDS = OID("1.3.6.1.2.1.10.127.1.1.4.1.3")
DOCS_IF_SIG_Q_UNCORRECTABLES = OID("1.3.6.1.2.1.10.127.1.1.4.1.4")
DOCS_IF_SIG_Q_SIGNAL_NOISE = OID("1.3.6.1.2.1.10.127.1.1.4.1.5")        # 0.1 dB

# =============================================================================
# DOCS-IF3-MIB (Enterprise 4491, CableLabs)
# =============================================================================

# docsIf3CmStatusUsTable
DOCS_IF3_CM_STATUS_US_TABLE = OID("1.3.6.1.4.1.4491.2.1.20.1.2")
DOCS_IF3_CM_STATUS_US_TX_POWER = OID("1.3.6.1.4.1.4491.2.1.20.1.2.1.1")     # 0.1 dBmV
DOCS_IF3_CM_STATUS_US_T3_TIMEOUTS = OID("1.3.6.1.4.1.4491.2.1.20.1.2.1.2")
DOCS_IF3_CM_STATUS_US_T4_TIMEOUTS = OID("1.3.6.1.4.1.4491.2.1.20.1.2.1.3")

# docsIf3SignalQualityExtTable
DOCS_IF3_SIGNAL_QUALITY_EXT_TABLE = OID("1.3.6.1.4.1.4491.2.1.20.1.24")
DOCS_IF3_SIGNAL_QUALITY_EXT_RX_MER = OID("1.3.6.1.4.1.4491.2.1.20.1.24.1.1")  # 0.1 dB

# =============================================================================
# DOCS-QOS3-MIB (Enterprise 4491, CableLabs)
# =============================================================================

# docsQosParamSetTable, indexed by ifIndex.serviceClass.sfid.type
DOCS_QOS_PARAM_SET_TABLE = OID("1.3.6.1.4.1.4491.2.1.21.1.2")
DOCS_QOS_PARAM_SET_MAX_TRAFFIC_RATE = OID("1.3.6.1.4.1.4491.2.1.21.1.2.1.6")    # bps
DOCS_QOS_PARAM_SET_MAX_TRAFFIC_BURST = OID("1.3.6.1.4.1.4491.2.1.21.1.2.1.7")   # bytes
DOCS_QOS_PARAM_SET_MIN_RESERVED_RATE = OID("1.3.6.1.4.1.4491.2.1.21.1.2.1.8")   # bps
DOCS_QOS_PARAM_SET_MAX_CONCAT_BURST = OID("1.3.6.1.4.1.4491.2.1.21.1.2.1.12")   # bytes
DOCS_QOS_PARAM_SET_SCHEDULING_TYPE = OID("1.3.6.1.4.1.4491.2.1.21.1.2.1.13")

# docsQosServiceFlowTable, indexed by ifIndex.sfid
DOCS_QOS_SERVICE_FLOW_TABLE = OID("1.3.6.1.4.1.4491.2.1.21.1.3")
DOCS_QOS_SERVICE_FLOW_DIRECTION = OID("1.3.6.1.4.1.4491.2.1.21.1.3.1.7")
DOCS_QOS_SERVICE_FLOW_PRIMARY = OID("1.3.6.1.4.1.4491.2.1.21.1.3.1.8")

# =============================================================================
# Vendor-Specific: Arris (Enterprise 4115)
# =============================================================================

# ARRIS-CM-DOC30-MIB
ARRIS_CM_DOC30_SW_REGISTRATION_STATE = OID("1.3.6.1.4.1.4115.1.3.4.1.5.9")  # scalar

# arrisCmDoc30IfUpstreamChannelExtendedTable
ARRIS_CM_DOC30_IF_UPSTREAM_CHANNEL_EXTENDED_TABLE = OID("1.3.6.1.4.1.4115.1.3.4.1.9.2")
ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_SYMBOL_RATE = OID("1.3.6.1.4.1.4115.1.3.4.1.9.2.1.2")  # ksps
ARRIS_CM_DOC30_IF_UP_CHANNEL_EXTENDED_MODULATION = OID("1.3.6.1.4.1.4115.1.3.4.1.9.2.1.3")

# =============================================================================
# Value scaling
# =============================================================================

# Power levels and signal quality metrics are reported in tenths of a unit.
TENTHS = 10.0
