"""Core module - contains enums and configuration."""
from .config import Settings, get_settings
from .enums import (
    CycleState,
    DownstreamModulation,
    SchedulingType,
    ServiceFlowDirection,
    UpstreamChannelType,
    UpstreamModulation,
)

__all__ = [
    "CycleState",
    "DownstreamModulation",
    "SchedulingType",
    "ServiceFlowDirection",
    "UpstreamChannelType",
    "UpstreamModulation",
    "Settings",
    "get_settings",
]
