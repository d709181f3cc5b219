"""
Enumeration definitions for the application.

All enums are defined here to maintain consistency and type safety.
DOCSIS enums carry the numeric codes used by the MIBs; gauges expose the code.
"""
from enum import Enum, IntEnum


class DownstreamModulation(IntEnum):
    """DOCS-IF-MIB::docsIfDownChannelModulation."""

    UNKNOWN = 1
    OTHER = 2
    QAM64 = 3
    QAM256 = 4


class UpstreamChannelType(IntEnum):
    """DOCS-IF-MIB::docsIfUpChannelType."""

    TDMA = 1
    ATDMA = 2
    SCDMA = 3
    TDMA_AND_ATDMA = 4


class UpstreamModulation(IntEnum):
    """ARRIS-CM-DOC30-MIB::arrisCmDoc30IfUpChannelExtendedModulation."""

    QPSK = 1
    QAM8 = 2
    QAM16 = 3
    QAM32 = 4
    QAM64 = 5
    QAM128 = 6
    QAM256 = 7


class SchedulingType(IntEnum):
    """
    DOCS-QOS3-MIB::docsQosParamSetSchedulingType.

    - UGS_AD: unsolicited grant service with activity detection
    """

    UNDEFINED = 1
    BEST_EFFORT = 2
    NON_REAL_TIME_POLLING = 3
    REAL_TIME_POLLING = 4
    UGS_AD = 5
    UGS = 6


class ServiceFlowDirection(IntEnum):
    """DOCS-QOS3-MIB::docsQosServiceFlowDirection."""

    DOWNSTREAM = 1
    UPSTREAM = 2

    @property
    def label(self) -> str:
        """Lowercase name used in log messages and errors."""
        return self.name.lower()


class CycleState(str, Enum):
    """
    Scrape cycle state of the hub collector.

    IDLE → FETCHING → EXTRACTING → READY | DEGRADED → IDLE
    """

    IDLE = "idle"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    READY = "ready"
    DEGRADED = "degraded"
